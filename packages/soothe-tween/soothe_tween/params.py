"""Animated parameters with bounds and change observers."""
from __future__ import annotations

from typing import Callable

_Observer = Callable[["Param"], None]


class Param:
    """A named scalar driven over time and read on every redraw.

    Writes are clamped into ``[lo, hi]``, or wrapped modulo ``hi - lo`` when
    ``wrap`` is set, before they are stored. Observers run after every write
    that changes the stored value.
    """

    __slots__ = ("name", "lo", "hi", "wrap", "_value", "_observers")

    def __init__(
        self,
        name: str,
        value: float,
        lo: float | None = None,
        hi: float | None = None,
        wrap: bool = False,
    ) -> None:
        if lo is not None and hi is not None and lo > hi:
            raise ValueError(f"Param {name!r}: lo {lo} is above hi {hi}")
        if wrap and (lo is None or hi is None or lo == hi):
            raise ValueError(f"Param {name!r}: wrap needs two distinct bounds")
        self.name = name
        self.lo = lo
        self.hi = hi
        self.wrap = wrap
        self._observers: list[_Observer] = []
        self._value = self._fit(float(value))

    def _fit(self, value: float) -> float:
        if self.wrap:
            assert self.lo is not None and self.hi is not None
            return self.lo + (value - self.lo) % (self.hi - self.lo)
        if self.lo is not None and value < self.lo:
            return self.lo
        if self.hi is not None and value > self.hi:
            return self.hi
        return value

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new: float) -> None:
        fitted = self._fit(float(new))
        if fitted == self._value:
            return
        self._value = fitted
        for observer in list(self._observers):
            observer(self)

    def subscribe(self, observer: _Observer) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: _Observer) -> None:
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def __repr__(self) -> str:
        return f"Param({self.name!r}, {self._value!r})"
