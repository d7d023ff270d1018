"""Indicator settings — inputs, line styles, and the builder that commits them.

Settings are immutable values. The settings dialog works on a
:class:`SettingsBuilder` and hands a freshly built :class:`BollingerSettings`
to the host on save; a live settings value is never edited in place.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from bandchart.errors import InvalidConfiguration, UnknownSource

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"

LINE_NAMES = ("basis", "upper", "lower")


class Source(str, Enum):
    """OHLCV field that feeds the band statistics."""

    CLOSE = "close"


class LineStyle(str, Enum):
    SOLID = "solid"
    DASHED = "dashed"


def parse_source(value: Source | str) -> Source:
    """Resolve *value* to a :class:`Source`, rejecting anything unsupported."""
    if isinstance(value, Source):
        return value
    try:
        return Source(value)
    except ValueError:
        supported = ", ".join(s.value for s in Source)
        raise UnknownSource(f"Unknown source {value!r} (supported: {supported})") from None


class BollingerInputs(BaseModel):
    """Computation inputs. ``length`` is checked by the engine, never clamped."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = 20
    multiplier: float = Field(default=2.0, allow_inf_nan=False)
    offset: int = 0
    source: Source = Source.CLOSE


class LineSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    visible: bool = True
    color: str = Field(pattern=HEX_COLOR)
    width: int = Field(default=1, ge=1, le=5)
    style: LineStyle = LineStyle.SOLID


class BackgroundSettings(BaseModel):
    """Shaded region between the upper and lower bands."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    visible: bool = True
    opacity: float = Field(default=0.12, ge=0.0, le=1.0)
    color: str = Field(default="#10B981", pattern=HEX_COLOR)


class BollingerStyle(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    basis: LineSettings = Field(default_factory=lambda: LineSettings(color="#F59E0B"))
    upper: LineSettings = Field(default_factory=lambda: LineSettings(color="#10B981"))
    lower: LineSettings = Field(default_factory=lambda: LineSettings(color="#EF4444"))
    background: BackgroundSettings = Field(default_factory=BackgroundSettings)


class BollingerSettings(BaseModel):
    """Everything the settings dialog edits: inputs plus style."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    inputs: BollingerInputs = Field(default_factory=BollingerInputs)
    style: BollingerStyle = Field(default_factory=BollingerStyle)


class SettingsBuilder:
    """Accumulates edits on top of an initial settings value.

    Each setter returns the builder so edits can be chained::

        new = SettingsBuilder(current).length(50).line("upper", color="#FFFFFF").build()

    ``current`` is left untouched; ``build()`` validates the merged result and
    returns a new :class:`BollingerSettings`.
    """

    def __init__(self, initial: BollingerSettings | None = None) -> None:
        self._initial = initial if initial is not None else BollingerSettings()
        self._inputs: dict[str, Any] = {}
        self._lines: dict[str, dict[str, Any]] = {}
        self._background: dict[str, Any] = {}

    def length(self, value: int) -> SettingsBuilder:
        if value < 1:
            raise InvalidConfiguration(f"length must be >= 1, got {value}")
        self._inputs["length"] = int(value)
        return self

    def multiplier(self, value: float) -> SettingsBuilder:
        if not math.isfinite(value):
            raise InvalidConfiguration(f"multiplier must be a finite number, got {value}")
        self._inputs["multiplier"] = float(value)
        return self

    def offset(self, value: int) -> SettingsBuilder:
        self._inputs["offset"] = int(value)
        return self

    def source(self, value: Source | str) -> SettingsBuilder:
        self._inputs["source"] = parse_source(value)
        return self

    def line(self, name: str, **fields: Any) -> SettingsBuilder:
        if name not in LINE_NAMES:
            raise InvalidConfiguration(f"Unknown band line {name!r}")
        self._lines.setdefault(name, {}).update(fields)
        return self

    def background(self, **fields: Any) -> SettingsBuilder:
        self._background.update(fields)
        return self

    def reset(self) -> SettingsBuilder:
        """Discard pending edits."""
        self._inputs.clear()
        self._lines.clear()
        self._background.clear()
        return self

    def build(self) -> BollingerSettings:
        inputs = BollingerInputs.model_validate(
            {**self._initial.inputs.model_dump(), **self._inputs}
        )
        style = self._initial.style
        merged: dict[str, Any] = {}
        for name in LINE_NAMES:
            current: LineSettings = getattr(style, name)
            merged[name] = LineSettings.model_validate(
                {**current.model_dump(), **self._lines.get(name, {})}
            )
        merged["background"] = BackgroundSettings.model_validate(
            {**style.background.model_dump(), **self._background}
        )
        return BollingerSettings(inputs=inputs, style=BollingerStyle(**merged))
