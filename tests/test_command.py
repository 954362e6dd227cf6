import io

import pytest

from conftest import make_response
from tba_shell.shell.command import SYNTAX_TRAILER, TbaShell
from tba_shell.shell.dispatcher import ErrorKind


@pytest.fixture
def shell(api):
    return TbaShell(api)


def _run(shell, line):
    out = io.StringIO()
    res = shell.process_command(line.split(), out=out)
    return res, out.getvalue().splitlines()


def test_get_raw_path_prints_full_structure(shell, session):
    session.reply("team/frc492/years_participated", make_response(200, [2000, 2017]))
    res, lines = _run(shell, "get team/frc492/years_participated")
    assert res.ok and lines == ["[", "    2000", "    2017", "]"]


def test_get_failure(shell, session):
    res, _ = _run(shell, "get nowhere")
    assert res.error == SYNTAX_TRAILER


def test_list_default_level_is_medium(shell, session):
    session.reply("events/2017/simple", make_response(200, [{"key": "2017cmp", "name": "Championship"}]))
    res, lines = _run(shell, "list events?year=2017")
    assert res.ok and lines == ["[", '    "2017cmp": "Championship"', "]"]


def test_list_with_level_option(shell, session):
    session.reply("events/2017/keys", make_response(200, ["2017cmp"]))
    res, _ = _run(shell, "list -0 events?year=2017")
    assert res.data == ["2017cmp"]


@pytest.mark.parametrize("line, detail, kind", [
    ("list 0 teams", 'Invalid request option, expecting "-<VerboseLevel>".', ErrorKind.BAD_VERBOSITY),
    ("list -x teams", "Verbose level must be an integer: 'x'", ErrorKind.BAD_VERBOSITY),
    ("list -7 teams", "Verbose level must be 0, 1 or 2.", ErrorKind.BAD_VERBOSITY),
    ("list teams?year=2017?x", 'Invalid request syntax, expecting "<Model>?<Filters>".', ErrorKind.MALFORMED_FILTER),
    ("list teams?year", 'Invalid filter syntax, expecting "<key>=<value>".', ErrorKind.MALFORMED_FILTER),
    ("list widgets", 'Invalid request "widgets"', ErrorKind.UNRECOGNIZED_MODEL),
])
def test_list_errors(shell, session, line, detail, kind):
    res, lines = _run(shell, line)
    assert res.error == f"{detail}\n{SYNTAX_TRAILER}"
    assert res.error_kind is kind and res.data is None
    assert lines == [] and session.calls == []


@pytest.mark.parametrize("line", ["", "fetch teams", "list", "list -1 teams extra", "get"])
def test_unknown_command_shape(shell, line):
    res, _ = _run(shell, line)
    assert res.error == SYNTAX_TRAILER


def test_help_text():
    assert "social_media?team=<TeamKey>" in TbaShell.command_help()
    assert "V3 <Request>:" not in TbaShell.command_help()
    assert "V3 <Request>:" in TbaShell.command_help(True)
