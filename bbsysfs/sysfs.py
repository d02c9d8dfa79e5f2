"""Reading and writing single values in sysfs attribute files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def _format(value: object) -> str:
    # Integer-like values (including IntEnum members) are written as plain numbers.
    if isinstance(value, int):
        return str(int(value))
    return str(value)


def write_value(path: PathLike, filename: str, value: object) -> None:
    """Write ``value`` as text to the attribute ``filename`` in directory ``path``.

    Raises ``OSError`` if the attribute cannot be opened for writing.
    """
    with open(Path(path) / filename, "w", encoding="ascii") as attribute:
        attribute.write(_format(value))


def read_value(path: PathLike, filename: str) -> str:
    """Return the first line of the attribute ``filename`` in ``path``, without its newline.

    Raises ``OSError`` if the attribute cannot be opened for reading.
    """
    with open(Path(path) / filename, encoding="ascii") as attribute:
        return attribute.readline().rstrip("\n")