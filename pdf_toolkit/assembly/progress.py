"""
Progress reporting sinks.

Reporters are passive: the assembler tells them how far it has come and
nothing they do feeds back into the operation.
"""

from __future__ import annotations

from typing import Callable, Protocol

from tqdm import tqdm


def _clamp(fraction: float) -> float:
    return max(0.0, min(float(fraction), 1.0))


class ProgressReporter(Protocol):
    """Anything with a `report(fraction)` method, fraction in [0, 1]."""

    def report(self, fraction: float) -> None:
        ...


class NullProgressReporter:
    """Reporter that ignores every update."""

    def report(self, fraction: float) -> None:
        pass


class CallbackProgressReporter:
    """Forward clamped fractions to a plain callable."""

    def __init__(self, callback: Callable[[float], None]):
        self._callback = callback

    def report(self, fraction: float) -> None:
        self._callback(_clamp(fraction))


class SegmentProgressReporter:
    """
    Map one step's [0, 1] progress onto the slice [start, start + span] of a parent.

    Used when an operation assembles several documents and the caller should
    see a single bar moving from 0 to 1.
    """

    def __init__(self, parent: ProgressReporter, start: float, span: float):
        self._parent = parent
        self._start = start
        self._span = span

    def report(self, fraction: float) -> None:
        self._parent.report(_clamp(self._start + self._span * _clamp(fraction)))


class TqdmProgressReporter:
    """Terminal progress bar on a 0-100 percent scale."""

    def __init__(self, desc: str = "Pages", disable: bool = False):
        self._bar = tqdm(total=100, desc=f"  - {desc}", unit="%", disable=disable)
        self._position = 0

    def report(self, fraction: float) -> None:
        position = int(round(_clamp(fraction) * 100))
        if position > self._position:
            self._bar.update(position - self._position)
            self._position = position

    def close(self) -> None:
        self._bar.close()

    def __enter__(self) -> TqdmProgressReporter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

