"""
Background grid schema: colour stops, gradients and background layers.

A BackgroundLayer is one entry of a multi-layer CSS background: either a
column-number marker image or a linear gradient drawing the columns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from colgrid.schemas.css import LayoutResult
from colgrid.utilities.types import Length

TRANSPARENT: str = "transparent"


@dataclass(frozen=True)
class ColorStop:
    """One colour stop of a gradient."""

    color: str
    offset: Length


@dataclass(frozen=True)
class LinearGradient:
    """
    A linear gradient with hard-edged colour stops.

    Offsets must be non-decreasing; a hard edge is two stops sharing the
    same offset.
    """

    direction: str
    stops: tuple[ColorStop, ...]

    def __post_init__(self) -> None:
        for prev, stop in zip(self.stops, self.stops[1:]):
            if stop.offset < prev.offset:
                raise ValueError(
                    f"colour stop offsets must be non-decreasing: {prev.offset} then {stop.offset}"
                )


@dataclass(frozen=True)
class BackgroundLayer:
    """
    One background layer.

    Attributes:
        image: Marker image URL, or a LinearGradient.
        position: Horizontal and vertical background-position.
        repeat: background-repeat keyword.
    """

    image: Union[str, LinearGradient]
    position: tuple[Union[Length, str], Union[Length, str]]
    repeat: str = "no-repeat"

    @property
    def is_marker(self) -> bool:
        return isinstance(self.image, str)


@dataclass(frozen=True)
class BackgroundResult(LayoutResult):
    """LayoutResult plus the background layers computed for the main direction."""

    layers: tuple[BackgroundLayer, ...] = field(default=())

    @property
    def markers(self) -> tuple[BackgroundLayer, ...]:
        return tuple(layer for layer in self.layers if layer.is_marker)

    @property
    def gradients(self) -> tuple[LinearGradient, ...]:
        return tuple(
            layer.image for layer in self.layers if isinstance(layer.image, LinearGradient)
        )
