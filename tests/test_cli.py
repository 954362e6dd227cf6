import pytest
from click.testing import CliRunner

from conftest import make_response
from tba_shell.cli import main
from tba_shell.shell.command import TbaShell


@pytest.fixture
def shell(api):
    return TbaShell(api)


def test_batch_list(shell, session):
    session.reply("district/2017pnw/teams/keys", make_response(200, ["frc492"]))
    result = CliRunner().invoke(main, ["list", "-0", "teams?district=2017pnw"], obj=shell)
    assert result.exit_code == 0
    assert '"frc492"' in result.output


def test_batch_error_exit_code(shell, session):
    result = CliRunner().invoke(main, ["list", "teams?year=2017&team=frc492"], obj=shell)
    assert result.exit_code == 1
    assert "Invalid filter, expecting" in result.output
    assert "type ? for help" in result.output


def test_batch_get(shell, session):
    session.reply("match/2017cmp_f1m1", make_response(200, {"key": "2017cmp_f1m1"}))
    result = CliRunner().invoke(main, ["get", "match/2017cmp_f1m1"], obj=shell)
    assert result.exit_code == 0
    assert 'key: "2017cmp_f1m1"' in result.output


def test_interactive_session(shell, session):
    session.reply("status", make_response(200, {"is_datafeed_down": False}))
    result = CliRunner().invoke(main, [], obj=shell, input="?\nlist status\nlist nope\nquit\n")
    assert result.exit_code == 0
    assert "list [<Options>] <Model>" in result.output
    assert "is_datafeed_down: false" in result.output
    assert 'Invalid request "nope"' in result.output
    assert "Program terminated." in result.output


def test_interactive_ends_on_eof(shell):
    result = CliRunner().invoke(main, [], obj=shell, input="help\n")
    assert result.exit_code == 0
    assert "V3 <Request>:" in result.output


def test_help_command(shell):
    result = CliRunner().invoke(main, ["help", "--long"], obj=shell)
    assert "match/<MatchKey>[/simple]" in result.output
