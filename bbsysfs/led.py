"""The on-board user LEDs."""

from __future__ import annotations

from pathlib import Path

from .sysfs import PathLike, write_value

LED_ROOT = "/sys/class/leds/beaglebone:green:usr"


class LED:
    """One user LED; its directory is ``root`` with the LED number appended."""

    def __init__(self, number: int, root: PathLike = LED_ROOT) -> None:
        self.number = number
        self.path = Path(f"{root}{number}")

    def _write(self, filename: str, value: str) -> None:
        write_value(self.path, filename, value)

    def _remove_trigger(self) -> None:
        self._write("trigger", "none")

    def turn_on(self) -> None:
        """Switch the LED on, removing any trigger first."""
        print(f"Turning LED{self.number} on.")
        self._remove_trigger()
        self._write("brightness", "1")

    def turn_off(self) -> None:
        """Switch the LED off, removing any trigger first."""
        print(f"Turning LED{self.number} off.")
        self._remove_trigger()
        self._write("brightness", "0")

    def flash(self, delay_ms: str = "50") -> None:
        """Flash the LED with the timer trigger, ``delay_ms`` on and off."""
        print(f"Making LED{self.number} flash.")
        self._write("trigger", "timer")
        self._write("delay_on", str(delay_ms))
        self._write("delay_off", str(delay_ms))

    def output_state(self) -> list[str]:
        """Print the trigger attribute line by line and return its lines."""
        with open(self.path / "trigger", encoding="ascii") as trigger:
            lines = trigger.read().splitlines()
        for line in lines:
            print(line)
        return lines

    def __repr__(self) -> str:
        return f"LED(number={self.number}, path={str(self.path)!r})"