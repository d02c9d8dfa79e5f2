"""Pulse-width modulation outputs."""

from __future__ import annotations

import re
from enum import IntEnum
from pathlib import Path

from .sysfs import PathLike, read_value, write_value

PWM_ROOT = "/sys/class/pwm/"
PWM_PERIOD = "period"
PWM_DUTY = "duty_cycle"
PWM_POLARITY = "polarity"
PWM_RUN = "enable"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Polarity(IntEnum):
    """Output polarity, written to the polarity attribute as its number."""

    ACTIVE_HIGH = 0
    ACTIVE_LOW = 1


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def frequency_to_period_ns(frequency_hz: float) -> int:
    """Return the period in whole nanoseconds for a frequency in hertz."""
    if frequency_hz <= 0:
        raise ValueError(f"frequency must be positive: {frequency_hz}")
    return int((1.0 / frequency_hz) * 1_000_000_000)


def period_ns_to_frequency(period_ns: int) -> float:
    """Return the frequency in hertz for a period in nanoseconds."""
    if period_ns <= 0:
        raise ValueError(f"period must be positive: {period_ns}")
    return 1.0 / (period_ns / 1_000_000_000)


class PWM:
    """One PWM channel under ``root``, e.g. ``pwm-1:0``."""

    def __init__(self, pin_name: str, root: PathLike = PWM_ROOT) -> None:
        self.name = pin_name
        self.path = Path(root) / pin_name
        self.analog_frequency = 100_000.0
        self.analog_max = 3.3

    def _read_int(self, filename: str) -> int:
        return _leading_int(read_value(self.path, filename))

    @property
    def period(self) -> int:
        """The period in nanoseconds."""
        return self._read_int(PWM_PERIOD)

    @period.setter
    def period(self, period_ns: int) -> None:
        write_value(self.path, PWM_PERIOD, int(period_ns))

    @property
    def frequency(self) -> float:
        """The frequency in hertz, derived from the period."""
        return period_ns_to_frequency(self.period)

    @frequency.setter
    def frequency(self, frequency_hz: float) -> None:
        self.period = frequency_to_period_ns(frequency_hz)

    @property
    def duty_cycle(self) -> int:
        """The duty cycle in nanoseconds."""
        return self._read_int(PWM_DUTY)

    @duty_cycle.setter
    def duty_cycle(self, duty_ns: int) -> None:
        write_value(self.path, PWM_DUTY, int(duty_ns))

    @property
    def polarity(self) -> Polarity:
        """The polarity; a stored value of 0 reads as ``ACTIVE_LOW``, anything else as ``ACTIVE_HIGH``."""
        if self._read_int(PWM_POLARITY) == 0:
            return Polarity.ACTIVE_LOW
        return Polarity.ACTIVE_HIGH

    @polarity.setter
    def polarity(self, polarity: Polarity) -> None:
        write_value(self.path, PWM_POLARITY, Polarity(polarity))

    @property
    def is_running(self) -> bool:
        """Whether the output is enabled."""
        return read_value(self.path, PWM_RUN) == "1"

    def set_duty_percent(self, percentage: float) -> None:
        """Set the duty cycle as a percentage (0 to 100) of the current period."""
        if not 0.0 <= percentage <= 100.0:
            raise ValueError(f"duty cycle percentage out of range: {percentage}")
        self.duty_cycle = int(self.period * (percentage / 100.0))

    @property
    def duty_percent(self) -> float:
        """The duty cycle as a percentage of the period."""
        return 100.0 * self.duty_cycle / self.period

    def invert_polarity(self) -> None:
        """Switch the polarity to the opposite of what it reads as now."""
        if self.polarity == Polarity.ACTIVE_LOW:
            self.polarity = Polarity.ACTIVE_HIGH
        else:
            self.polarity = Polarity.ACTIVE_LOW

    def calibrate_analog_max(self, analog_max: float) -> None:
        """Set the full-scale voltage used by ``analog_write``; must be 3.2 to 3.4 V."""
        if not 3.2 <= analog_max <= 3.4:
            raise ValueError(f"analog maximum must be between 3.2 and 3.4 V: {analog_max}")
        self.analog_max = analog_max

    def analog_write(self, voltage: float) -> None:
        """Produce an average output of ``voltage`` (0 to 3.3 V) and start the output."""
        if not 0.0 <= voltage <= 3.3:
            raise ValueError(f"voltage out of range: {voltage}")
        self.frequency = self.analog_frequency
        self.polarity = Polarity.ACTIVE_LOW
        self.set_duty_percent((100.0 * voltage) / self.analog_max)
        self.run()

    def run(self) -> None:
        """Enable the output."""
        write_value(self.path, PWM_RUN, 1)

    def stop(self) -> None:
        """Disable the output."""
        write_value(self.path, PWM_RUN, 0)

    def __repr__(self) -> str:
        return f"PWM(pin_name={self.name!r}, path={str(self.path)!r})"