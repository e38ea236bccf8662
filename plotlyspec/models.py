from __future__ import annotations

import string
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import (
    Any,
    ClassVar,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from .utils import _freeze, _present, _to_jsonable

T = TypeVar("T")
R = TypeVar("R", bound="_Record")


# ---------------------------------------------------------------------------
# Enumerated values. Member values are the exact Plotly.js tokens.
# ---------------------------------------------------------------------------


class Mode(str, Enum):
    """How a scatter trace is drawn. Several modes combine as ``a+b``."""

    MARKERS = "markers"
    LINES = "lines"
    TEXT = "text"


class TraceType(str, Enum):
    SCATTER = "scatter"
    SCATTER3D = "scatter3d"
    BAR = "bar"
    MESH3D = "mesh3d"


class Symbol(str, Enum):
    """Marker shapes."""

    CIRCLE = "circle"
    SQUARE = "square"
    DIAMOND = "diamond"
    CROSS = "cross"


class Dash(str, Enum):
    SOLID = "solid"
    DASHDOT = "dashdot"
    DOT = "dot"


class Orientation(str, Enum):
    """Horizontal or vertical bars."""

    HORIZONTAL = "h"
    VERTICAL = "v"


class Fill(str, Enum):
    """Area fill: from the zero line, to the next trace, or onto itself."""

    NONE = "none"
    TO_ZERO_Y = "tozeroy"
    TO_NEXT_Y = "tonexty"
    TO_ZERO_X = "tozerox"
    TO_NEXT_X = "tonextx"
    TO_SELF = "toself"
    TO_NEXT = "tonext"


class HoverElem(str, Enum):
    """Parts of a point shown on hover, combined as ``x+y+text``."""

    X = "x"
    Y = "y"
    Z = "z"
    TEXT = "text"
    NAME = "name"


class HoverKeyword(str, Enum):
    """Fixed hover-info settings that cannot be combined."""

    ALL = "all"
    NONE = "none"
    SKIP = "skip"


class HoverOn(str, Enum):
    POINTS = "points"
    FILLS = "fills"


class TextPosition(str, Enum):
    """Text anchor relative to its point: vertical then horizontal."""

    TOP_LEFT = "top left"
    TOP_CENTER = "top center"
    TOP_RIGHT = "top right"
    MIDDLE_LEFT = "middle left"
    MIDDLE_CENTER = "middle center"
    MIDDLE_RIGHT = "middle right"
    BOTTOM_LEFT = "bottom left"
    BOTTOM_CENTER = "bottom center"
    BOTTOM_RIGHT = "bottom right"


class BarMode(str, Enum):
    """How several bar traces share a category: side by side or stacked."""

    STACK = "stack"
    GROUP = "group"


class Visibility(Enum):
    """Trace visibility. ``LEGEND_ONLY`` hides the trace but keeps its legend entry."""

    SHOWN = True
    HIDDEN = False
    LEGEND_ONLY = "legendonly"


HoverInfo = Union[HoverKeyword, Sequence[HoverElem]]


def _coerce_enum(enum_cls: type, value: Any) -> Any:
    """Accept an enum member or its raw token; ``None`` stays absent."""
    if value is None:
        return None
    return enum_cls(value)


def _coerce_enums(enum_cls: type, values: Optional[Iterable[Any]]) -> Optional[Tuple[Any, ...]]:
    if values is None:
        return None
    return tuple(enum_cls(v) for v in _freeze(values))


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RGB:
    """Solid color used for every point."""

    r: int
    g: int
    b: int

    def to_js(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


@dataclass(frozen=True)
class RGBA:
    """Solid color with alpha. The alpha channel is emitted as given."""

    r: int
    g: int
    b: int
    a: Union[int, float]

    def to_js(self) -> str:
        return f"rgba({self.r},{self.g},{self.b},{self.a})"


@dataclass(frozen=True)
class ColorIndex:
    """Category index, resolved against the renderer's own palette."""

    index: int

    def to_js(self) -> int:
        return int(self.index)


Color = Union[RGB, RGBA, ColorIndex]
SolidColor = Union[RGB, RGBA]


def _qcolor_to_rgba(color: Any) -> Optional[Tuple[int, int, int, int]]:
    """Convert a QColor object to an RGBA tuple.

    Args:
        color: Candidate QColor from PySide6.QtGui. The type hint is Any so
               PySide6 stays an optional dependency.

    Returns:
        Tuple of (r, g, b, a) with values 0-255, or ``None`` when ``color`` is
        not a QColor (or PySide6 is not installed).
    """
    try:
        from PySide6.QtGui import QColor
    except ImportError:
        return None
    if isinstance(color, QColor):
        return (color.red(), color.green(), color.blue(), color.alpha())
    return None


def _hex_to_color(s: str) -> SolidColor:
    digits = s[1:] if s.startswith("#") else ""
    if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
        raise ValueError(
            f"Invalid hex color: '{s}'. Use '#RRGGBB' or '#RRGGBBAA'."
        )
    channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        return RGB(*channels)
    return RGBA(*channels)


def as_color(value: Any) -> Color:
    """Normalize caller input to a ``Color``.

    Accepts:
    - ``RGB`` / ``RGBA`` / ``ColorIndex`` values (returned unchanged)
    - RGB or RGBA tuples: (r, g, b) / (r, g, b, a)
    - Hex strings: "#RRGGBB" or "#RRGGBBAA"
    - A plain ``int``, taken as a category index
    - QColor objects, when PySide6 is installed

    Raises:
        ValueError: malformed hex strings or tuples of the wrong length.
        TypeError: anything else.
    """
    if isinstance(value, (RGB, RGBA, ColorIndex)):
        return value
    if isinstance(value, bool):
        raise TypeError("A bool is not a color")
    if isinstance(value, int):
        return ColorIndex(value)
    if isinstance(value, (tuple, list)):
        if len(value) == 3:
            return RGB(*(int(c) for c in value))
        if len(value) == 4:
            r, g, b, a = value
            return RGBA(int(r), int(g), int(b), a)
        raise ValueError(f"Color tuples need 3 or 4 channels, got {len(value)}")
    if isinstance(value, str):
        return _hex_to_color(value)

    rgba = _qcolor_to_rgba(value)
    if rgba is not None:
        return RGBA(*rgba)

    raise TypeError(
        f"Color must be RGB, RGBA, ColorIndex, an (r, g, b[, a]) tuple, "
        f"a hex string or a QColor object, got {type(value)}"
    )


# ---------------------------------------------------------------------------
# One value for all points, or one value per point
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class All(Generic[T]):
    """A single value applied to every point of a trace."""

    value: T

    def to_js(self) -> Any:
        return _to_jsonable(self.value)


@dataclass(frozen=True)
class PerPoint(Generic[T]):
    """One value per point of a trace, in point order."""

    values: Tuple[T, ...]

    def __post_init__(self):
        object.__setattr__(self, "values", _freeze(self.values))

    def to_js(self) -> List[Any]:
        return [_to_jsonable(v) for v in self.values]


ListOrElem = Union[All[T], PerPoint[T]]


def _list_or_elem(value: Any) -> Optional[ListOrElem[Any]]:
    """Wrap a bare value: sequences become ``PerPoint``, anything else ``All``."""
    if value is None or isinstance(value, (All, PerPoint)):
        return value
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple, np.ndarray)):
        return All(value)
    return PerPoint(value)


def cat_colors(values: Iterable[Any]) -> PerPoint[ColorIndex]:
    """Assign a color index to each categorical value.

    Equal values share an index. New values are numbered in order of first
    appearance, starting from 0.
    """
    seen: List[Any] = []
    lookup: Dict[Any, int] = {}
    out: List[ColorIndex] = []
    for v in values:
        try:
            ix = lookup.get(v)
        except TypeError:
            # unhashable
            ix = next((n for n, s in enumerate(seen) if s == v), None)
        if ix is None:
            ix = len(seen)
            seen.append(v)
            try:
                lookup[v] = ix
            except TypeError:
                pass
        out.append(ColorIndex(ix))
    return PerPoint(tuple(out))


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class _Record:
    """Copy-on-write setters shared by every record.

    ``set`` and ``unset`` never touch ``self``; they return a new record.
    """

    # fields that must always be present
    _REQUIRED: ClassVar[FrozenSet[str]] = frozenset()
    # fields fixed at construction
    _FIXED: ClassVar[FrozenSet[str]] = frozenset()

    def set(self: R, **changes: Any) -> R:
        """Return a copy with the given fields replaced."""
        fixed = self._FIXED.intersection(changes)
        if fixed:
            raise TypeError(
                f"{type(self).__name__} field(s) {sorted(fixed)} cannot be changed"
            )
        missing = sorted(n for n in self._REQUIRED.intersection(changes) if changes[n] is None)
        if missing:
            raise TypeError(f"{type(self).__name__} field(s) {missing} are required")
        return replace(self, **changes)

    def unset(self: R, *names: str) -> R:
        """Return a copy with the given optional fields made absent."""
        known = {f.name for f in fields(self)}
        for name in names:
            if name not in known:
                raise TypeError(f"{type(self).__name__} has no field '{name}'")
            if name in self._REQUIRED or name in self._FIXED:
                raise TypeError(f"{type(self).__name__}.{name} is required")
        return replace(self, **{name: None for name in names})


@dataclass(frozen=True)
class Marker(_Record):
    """
    Marker style of a trace.

    size: ``All(10)`` for uniform markers, ``PerPoint([...])`` per point
    (a bare sequence is taken as per point, a bare scalar as ``All``)
    color: ``All(RGB(...))`` or ``cat_colors(labels)`` / ``PerPoint([...])``
    symbol / opacity: applied to every marker
    """

    size: Optional[ListOrElem[float]] = None
    color: Optional[ListOrElem[Any]] = None
    symbol: Optional[Symbol] = None
    opacity: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "size", _list_or_elem(self.size))
        object.__setattr__(self, "color", _list_or_elem(self.color))
        object.__setattr__(self, "symbol", _coerce_enum(Symbol, self.symbol))

    def to_js(self) -> Dict[str, Any]:
        return _present(
            {
                "size": self.size,
                "color": self.color,
                "symbol": self.symbol,
                "opacity": self.opacity,
            }
        )


@dataclass(frozen=True)
class Line(_Record):
    """
    Line style of a trace.

    color takes a solid color only; see ``as_color`` for accepted inputs.
    """

    width: Optional[float] = None
    color: Optional[SolidColor] = None
    dash: Optional[Dash] = None

    def __post_init__(self):
        if self.color is not None:
            color = as_color(self.color)
            if isinstance(color, ColorIndex):
                raise TypeError("Line color must be a solid RGB or RGBA color")
            object.__setattr__(self, "color", color)
        object.__setattr__(self, "dash", _coerce_enum(Dash, self.dash))

    def to_js(self) -> Dict[str, Any]:
        return _present({"width": self.width, "color": self.color, "dash": self.dash})


@dataclass(frozen=True)
class Axis(_Record):
    """Options for one axis of the layout."""

    range: Optional[Tuple[float, float]] = None
    title: Optional[str] = None
    show_grid: Optional[bool] = None
    zero_line: Optional[bool] = None
    visible: Optional[bool] = None
    tick_vals: Optional[Sequence[Any]] = None
    tick_text: Optional[Sequence[str]] = None

    def __post_init__(self):
        if self.range is not None:
            lo_hi = _freeze(self.range)
            if len(lo_hi) != 2:
                raise ValueError(f"Axis range needs (min, max), got {len(lo_hi)} values")
            object.__setattr__(self, "range", lo_hi)
        object.__setattr__(self, "tick_vals", _freeze(self.tick_vals))
        object.__setattr__(self, "tick_text", _freeze(self.tick_text))

    def to_js(self) -> Dict[str, Any]:
        return _present(
            {
                "range": self.range,
                "title": self.title,
                "showgrid": self.show_grid,
                "zeroline": self.zero_line,
                "visible": self.visible,
                "tickvals": self.tick_vals,
                "ticktext": self.tick_text,
            }
        )


@dataclass(frozen=True)
class Margin(_Record):
    """Plot margins in pixels: left, right, bottom, top and padding."""

    l: Optional[int] = None
    r: Optional[int] = None
    b: Optional[int] = None
    t: Optional[int] = None
    pad: Optional[int] = None

    def to_js(self) -> Dict[str, Any]:
        return _present({"l": self.l, "r": self.r, "b": self.b, "t": self.t, "pad": self.pad})


# Reasonable margins without and with room for a title
THIN_MARGINS = Margin(l=50, r=25, b=30, t=10, pad=4)
TITLE_MARGINS = Margin(l=50, r=25, b=30, t=40, pad=4)
