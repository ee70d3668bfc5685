"""Colour scales: colours placed along the unit interval and sampled by mixing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from chromatic.color import Color
from chromatic.helper import Fraction
from chromatic.spaces import Lab

__all__ = ["ColorScale"]

MixFunction = Callable[[Color, Color, Fraction], Color]


def _as_fraction(position: Fraction | float) -> Fraction:
    return position if isinstance(position, Fraction) else Fraction(position)


def _mix_lab(a: Color, b: Color, fraction: Fraction) -> Color:
    return a.mix(b, fraction, Lab)


@dataclass
class _ColorStop:
    color: Color
    position: Fraction


class ColorScale:
    """Colours placed at positions from 0.0 (left end) to 1.0 (right end)."""

    def __init__(self) -> None:
        self._stops: list[_ColorStop] = []

    def add_stop(self, color: Color, position: Fraction | float) -> ColorScale:
        """Place ``color`` at ``position``, replacing any colour already there.

        Returns the scale itself so that calls can be chained.
        """
        position = _as_fraction(position)
        for stop in self._stops:
            if stop.position.value() == position.value():
                stop.color = color
                return self

        index = next(
            (
                i
                for i, stop in enumerate(self._stops)
                if position.value() < stop.position.value()
            ),
            len(self._stops),
        )
        self._stops.insert(index, _ColorStop(color, position))
        return self

    def sample(
        self, position: Fraction | float, mix: MixFunction | None = None
    ) -> Color | None:
        """The colour at ``position``, mixed from the surrounding stops.

        ``mix`` defaults to interpolation in Lab. Returns ``None`` when the
        scale has fewer than two stops or ``position`` is not between two stops.
        """
        if len(self._stops) < 2:
            return None
        position = _as_fraction(position)
        mix = mix if mix is not None else _mix_lab

        left = next(
            (s for s in reversed(self._stops) if position.value() >= s.position.value()),
            None,
        )
        right = next(
            (s for s in self._stops if position.value() <= s.position.value()),
            None,
        )
        if left is None or right is None:
            return None

        span = right.position.value() - left.position.value()
        if span == 0.0:
            local = Fraction(1.0)
        else:
            local = Fraction((position.value() - left.position.value()) / span)
        return mix(left.color, right.color, local)