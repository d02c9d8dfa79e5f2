import pytest

from bbsysfs.sysfs import read_value, write_value


def test_string_round_trip(tmp_path):
    write_value(tmp_path, "direction", "out")
    assert read_value(tmp_path, "direction") == "out"


def test_int_written_as_decimal_text(tmp_path):
    write_value(tmp_path, "period", 20000)
    assert (tmp_path / "period").read_text() == "20000"
    assert read_value(str(tmp_path), "period") == "20000"


def test_bool_written_as_digit(tmp_path):
    write_value(tmp_path, "enable", True)
    assert read_value(tmp_path, "enable") == "1"


def test_write_replaces_previous_content(tmp_path):
    write_value(tmp_path, "value", "123456")
    write_value(tmp_path, "value", "0")
    assert read_value(tmp_path, "value") == "0"


def test_read_returns_only_first_line(tmp_path):
    (tmp_path / "trigger").write_text("none timer\nsecond line\n")
    assert read_value(tmp_path, "trigger") == "none timer"


def test_read_empty_file_gives_empty_string(tmp_path):
    (tmp_path / "edge").write_text("")
    assert read_value(tmp_path, "edge") == ""


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_value(tmp_path, "missing")


def test_write_into_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        write_value(tmp_path / "absent", "value", 1)