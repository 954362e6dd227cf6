import pytest

from tba_shell.shell.filters import FilterSet, MalformedFilter


def test_parse_two_pairs():
    fs = FilterSet.parse("team=frc492&event=2017cmp")
    assert fs.value_of("team") == "frc492"
    assert fs.value_of("event") == "2017cmp"
    assert fs.count() == 2
    assert fs.keys() == {"team", "event"}


def test_missing_key_is_absent():
    assert FilterSet.parse("year=2017").value_of("team") is None


def test_last_duplicate_wins():
    fs = FilterSet.parse("year=2016&year=2017")
    assert fs.value_of("year") == "2017" and fs.count() == 1


@pytest.mark.parametrize("text", ["team", "team=frc492&event", "a=b=c", "=frc492", "team=", "year=2017&&team=frc1", ""])
def test_malformed(text):
    with pytest.raises(MalformedFilter, match="<key>=<value>"):
        FilterSet.parse(text)
