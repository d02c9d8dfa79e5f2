"""General-purpose digital input/output pins."""

from __future__ import annotations

import errno
import os
import select
import threading
import time
from enum import Enum, IntEnum
from pathlib import Path
from typing import Callable, Optional, TextIO

from .sysfs import PathLike, read_value, write_value

GPIO_ROOT = "/sys/class/gpio/"

EdgeCallback = Callable[[Optional[OSError]], object]


class Direction(Enum):
    """Pin direction, stored in the ``direction`` attribute."""

    INPUT = "in"
    OUTPUT = "out"


class Value(IntEnum):
    """Logic level of a pin."""

    LOW = 0
    HIGH = 1


class Edge(Enum):
    """Which signal edges raise an interrupt, stored in the ``edge`` attribute."""

    NONE = "none"
    RISING = "rising"
    FALLING = "falling"
    BOTH = "both"


class GPIO:
    """One exported GPIO pin, found at ``root/gpio<N>/``.

    The constructor waits ``settle_time`` seconds so that the sysfs
    structure of a freshly exported pin is in place.
    """

    def __init__(self, number: int, root: PathLike = GPIO_ROOT, settle_time: float = 0.25) -> None:
        self._number = number
        self.name = f"gpio{number}"
        self.path = Path(root) / self.name
        self.debounce_time = 0
        """Software debounce delay in milliseconds between edge callbacks."""
        self.toggle_period = 100
        """Full toggle period in milliseconds."""
        self._toggle_number = -1
        self._running = threading.Event()
        self._stream: TextIO | None = None
        if settle_time > 0:
            time.sleep(settle_time)

    @property
    def number(self) -> int:
        """The GPIO number."""
        return self._number

    # General input and output settings

    @property
    def direction(self) -> Direction:
        """The pin direction; anything other than ``in`` reads as ``OUTPUT``."""
        if read_value(self.path, "direction") == Direction.INPUT.value:
            return Direction.INPUT
        return Direction.OUTPUT

    @direction.setter
    def direction(self, direction: Direction) -> None:
        write_value(self.path, "direction", Direction(direction).value)

    @property
    def value(self) -> Value:
        """The logic level; anything other than ``0`` reads as ``HIGH``."""
        if read_value(self.path, "value") == "0":
            return Value.LOW
        return Value.HIGH

    @value.setter
    def value(self, value: Value) -> None:
        write_value(self.path, "value", "1" if Value(value) is Value.HIGH else "0")

    @property
    def edge_type(self) -> Edge:
        """The interrupt edge; unknown contents read as ``NONE``."""
        text = read_value(self.path, "edge")
        try:
            return Edge(text)
        except ValueError:
            return Edge.NONE

    @edge_type.setter
    def edge_type(self, edge: Edge) -> None:
        write_value(self.path, "edge", Edge(edge).value)

    def set_active_low(self, is_low: bool = True) -> None:
        """Invert the pin's logic (``True``) or restore it (``False``)."""
        write_value(self.path, "active_low", "1" if is_low else "0")

    def set_active_high(self) -> None:
        """Restore the default, non-inverted logic."""
        self.set_active_low(False)

    def toggle_output(self) -> None:
        """Make the pin an output and invert its current level once."""
        self.direction = Direction.OUTPUT
        self.value = Value.LOW if self.value is Value.HIGH else Value.HIGH

    # Threaded toggling

    def start_toggle(self, period_ms: int, times: int | None = None) -> threading.Thread:
        """Toggle the output in a background thread every half ``period_ms``.

        ``times`` is the number of level writes; ``None`` toggles until
        cancelled. Returns the started thread.
        """
        self.direction = Direction.OUTPUT
        self._toggle_number = -1 if times is None else times
        self.toggle_period = period_ms
        self._running.set()
        thread = threading.Thread(target=self._toggle_loop, name=f"{self.name}-toggle", daemon=True)
        try:
            thread.start()
        except RuntimeError:
            self._running.clear()
            raise
        return thread

    def _toggle_loop(self) -> None:
        is_high = self.value is Value.HIGH
        while self._running.is_set():
            self.value = Value.HIGH if is_high else Value.LOW
            time.sleep(self.toggle_period / 2000)
            is_high = not is_high
            if self._toggle_number > 0:
                self._toggle_number -= 1
            if self._toggle_number == 0:
                self._running.clear()

    def change_toggle_time(self, period_ms: int) -> None:
        """Change the toggle period of a running toggle."""
        self.toggle_period = period_ms

    def toggle_cancel(self) -> None:
        """Stop a running toggle thread."""
        self._running.clear()

    # Fast output through a kept-open stream

    def stream_open(self) -> None:
        """Keep the value attribute open for repeated fast writes."""
        self.stream_close()
        self._stream = open(self.path / "value", "w", encoding="ascii")

    def stream_write(self, value: Value) -> None:
        """Write a level through the open stream and flush it."""
        if self._stream is None:
            raise ValueError(f"value stream of {self.name} is not open")
        self._stream.write(str(int(Value(value))))
        self._stream.flush()

    def stream_close(self) -> None:
        """Close the value stream if it is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    # Edge detection

    def wait_for_edge(self) -> None:
        """Make the pin an input and block until an edge occurs.

        The first trigger, reported straight after registration, is ignored.
        Raises ``OSError`` if the value attribute cannot be polled.
        """
        self.direction = Direction.INPUT
        epoll_type = getattr(select, "epoll", None)
        if epoll_type is None:
            raise OSError(errno.ENOSYS, "edge detection needs epoll")
        with epoll_type(1) as poller:
            fd = os.open(self.path / "value", os.O_RDONLY | os.O_NONBLOCK)
            try:
                poller.register(fd, select.EPOLLIN | select.EPOLLET | select.EPOLLPRI)
                triggers = 0
                while triggers <= 1:
                    poller.poll(-1, 1)
                    triggers += 1
            finally:
                os.close(fd)

    def wait_for_edge_async(self, callback: EdgeCallback) -> threading.Thread:
        """Wait for edges in a background thread until cancelled.

        After each wait ``callback`` is called with ``None`` for an edge or
        with the ``OSError`` that ended the wait. Returns the started thread.
        """
        self._running.set()
        thread = threading.Thread(
            target=self._poll_loop, args=(callback,), name=f"{self.name}-poll", daemon=True
        )
        try:
            thread.start()
        except RuntimeError:
            self._running.clear()
            raise
        return thread

    def _poll_loop(self, callback: EdgeCallback) -> None:
        while self._running.is_set():
            error: OSError | None = None
            try:
                self.wait_for_edge()
            except OSError as exc:
                error = exc
            callback(error)
            time.sleep(self.debounce_time / 1000)

    def wait_for_edge_cancel(self) -> None:
        """Stop the background edge-waiting thread after its current wait."""
        self._running.clear()

    def __repr__(self) -> str:
        return f"GPIO(number={self.number}, path={str(self.path)!r})"