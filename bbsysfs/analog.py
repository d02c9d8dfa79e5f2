"""Analog input channels of the on-chip ADC."""

from __future__ import annotations

from pathlib import Path

from .sysfs import PathLike, read_value

ADC_ROOT = "/sys/bus/iio/devices/iio:device0"


class AnalogIn:
    """One ADC channel, read through ``in_voltage<N>_raw``."""

    def __init__(self, number: int = 0, root: PathLike = ADC_ROOT) -> None:
        self.number = number
        self.root = Path(root)

    @property
    def number(self) -> int:
        """The channel number."""
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"ADC channel number must not be negative: {value}")
        self._number = value

    @property
    def attribute(self) -> str:
        """Name of the raw sample attribute for this channel."""
        return f"in_voltage{self.number}_raw"

    def read_sample(self) -> int:
        """Read one raw sample from the channel."""
        text = read_value(self.root, self.attribute).strip()
        try:
            return int(text.split()[0])
        except (IndexError, ValueError):
            raise ValueError(f"no ADC reading in {self.root / self.attribute}: {text!r}") from None

    def __repr__(self) -> str:
        return f"AnalogIn(number={self.number}, root={str(self.root)!r})"