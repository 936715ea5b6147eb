import pytest

from devcommon.ini import DcIni

CONTENT = """top = 1
[app]
name = demo
flag = yes
off = Off
count = 0x10
big = 9000000000
neg = -5
bad = abc
"""


@pytest.fixture
def ini_path(tmp_path):
    path = tmp_path / "preference.ini"
    path.write_text(CONTENT, encoding="utf-8")
    return str(path)


def test_get_string(ini_path):
    section = DcIni("app", ini_path)
    assert section.get_string("name", "x") == "demo"
    assert section.get_string("missing", "fallback") == "fallback"


def test_keys_outside_sections_belong_to_default(ini_path):
    assert DcIni("DEFAULT", ini_path).get_string("top", "") == "1"
    assert DcIni("app", ini_path).get_string("top", "none") == "none"


def test_get_bool(ini_path):
    section = DcIni("app", ini_path)
    assert section.get_bool("flag", False) is True
    assert section.get_bool("off", True) is False
    assert section.get_bool("bad", True) is True
    assert section.get_bool("missing", False) is False


def test_integers(ini_path):
    section = DcIni("app", ini_path)
    assert section.get_int("count", 0) == 16
    assert section.get_long("big", 0) == 9000000000
    assert section.get_short("neg", 0) == -5
    assert section.get_int("bad", 7) == 7
    assert section.get_long("missing", 3) == 3


def test_put_round_trip_and_sharing(ini_path):
    first = DcIni("app", ini_path)
    assert first.put_int("level", -42).put_bool("ready", True).put_string("who", "me") is first
    second = DcIni("app", ini_path)
    assert second.get_int("level", 0) == -42
    assert second.get_bool("ready", False) is True
    assert second.get_string("who", "") == "me"


def test_new_section_is_created(ini_path):
    section = DcIni("fresh", ini_path)
    assert section.get_string("anything", "d") == "d"
    section.put_bool("seen", False)
    assert DcIni("fresh", ini_path).get_bool("seen", True) is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DcIni("app", str(tmp_path / "absent.ini"))