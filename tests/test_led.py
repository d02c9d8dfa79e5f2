import pytest

from bbsysfs.led import LED


@pytest.fixture
def led_dir(tmp_path):
    directory = tmp_path / "usr2"
    directory.mkdir()
    return directory


@pytest.fixture
def led(tmp_path, led_dir):
    return LED(2, root=tmp_path / "usr")


def test_path_appends_number(tmp_path, led, led_dir):
    assert led.path == led_dir


def test_turn_on(led, led_dir, capsys):
    led.turn_on()
    assert (led_dir / "trigger").read_text() == "none"
    assert (led_dir / "brightness").read_text() == "1"
    assert capsys.readouterr().out == "Turning LED2 on.\n"


def test_turn_off(led, led_dir, capsys):
    (led_dir / "trigger").write_text("timer")
    led.turn_off()
    assert (led_dir / "trigger").read_text() == "none"
    assert (led_dir / "brightness").read_text() == "0"
    assert capsys.readouterr().out == "Turning LED2 off.\n"


def test_flash_default_delay(led, led_dir, capsys):
    led.flash()
    assert (led_dir / "trigger").read_text() == "timer"
    assert (led_dir / "delay_on").read_text() == "50"
    assert (led_dir / "delay_off").read_text() == "50"
    assert capsys.readouterr().out == "Making LED2 flash.\n"


def test_flash_custom_delay(led, led_dir, capsys):
    led.flash("200")
    assert (led_dir / "delay_on").read_text() == "200"
    assert (led_dir / "delay_off").read_text() == "200"
    capsys.readouterr()
    assert led.output_state() == ["timer"]


def test_output_state_prints_all_lines(led, led_dir, capsys):
    (led_dir / "trigger").write_text("none [timer] heartbeat\nmmc0\n")
    lines = led.output_state()
    assert lines == ["none [timer] heartbeat", "mmc0"]
    assert capsys.readouterr().out == "none [timer] heartbeat\nmmc0\n"


def test_missing_led_directory_raises(tmp_path):
    with pytest.raises(OSError):
        LED(9, root=tmp_path / "usr").turn_on()