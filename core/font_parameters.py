"""
Font Parameters - Slider positions to font variation values

PURPOSE: Convert raw slider progress (0-100) into width, weight and italic values
         that the font provider accepts.
CONTEXT: Sliders report integer progress only; the provider expects values in its own
         domains (width up to WIDTH_MAX, weight strictly inside (0, WEIGHT_MAX),
         italic in [0.0, 1.0]).
"""
from __future__ import annotations

from dataclasses import dataclass

from config import (
    ITALIC_DEFAULT,
    PROGRESS_MAX,
    WEIGHT_DEFAULT,
    WEIGHT_MAX,
    WIDTH_DEFAULT,
    WIDTH_MAX,
)


def width_from_progress(progress: int) -> float:
    """
    Converts slider progress to the value of width.

    Args:
        progress: Slider position from 0 to 100 inclusive

    Returns:
        Width between 1.0 and WIDTH_MAX
    """
    if progress == 0:
        return 1.0
    return float(round(progress * WIDTH_MAX / PROGRESS_MAX))


def weight_from_progress(progress: int) -> int:
    """
    Converts slider progress to the value of weight.

    The range of the weight is (0, WEIGHT_MAX), exclusive on both ends, so the
    two slider end positions are pulled one step inside.

    Args:
        progress: Slider position from 0 to 100 inclusive

    Returns:
        Weight between 1 and WEIGHT_MAX - 1
    """
    if progress == 0:
        return 1
    if progress == PROGRESS_MAX:
        return WEIGHT_MAX - 1
    return WEIGHT_MAX * progress // PROGRESS_MAX


def italic_from_progress(progress: int) -> float:
    """Converts slider progress to the value of italic (0.0 - 1.0)."""
    return progress / float(PROGRESS_MAX)


def default_width_progress() -> int:
    """Slider position matching WIDTH_DEFAULT"""
    return int(PROGRESS_MAX * WIDTH_DEFAULT / WIDTH_MAX)


def default_weight_progress() -> int:
    """Slider position matching WEIGHT_DEFAULT"""
    return int(WEIGHT_DEFAULT / WEIGHT_MAX * PROGRESS_MAX)


def default_italic_progress() -> int:
    return int(ITALIC_DEFAULT)


@dataclass(frozen=True)
class FontVariationParameters:
    """
    Immutable set of variation values for one font request.

    Attributes:
        width: 0 < width <= WIDTH_MAX
        weight: 0 < weight < WEIGHT_MAX
        italic: 0.0 <= italic <= 1.0
        best_effort: Let the provider substitute the closest available instance
    """

    width: float
    weight: int
    italic: float
    best_effort: bool = False

    @classmethod
    def from_progress(
        cls,
        width_progress: int,
        weight_progress: int,
        italic_progress: int,
        best_effort: bool = False,
    ) -> "FontVariationParameters":
        """Build parameters from the current slider positions."""
        return cls(
            width=width_from_progress(width_progress),
            weight=weight_from_progress(weight_progress),
            italic=italic_from_progress(italic_progress),
            best_effort=best_effort,
        )
