"""Trace, layout and plot records.

A plot is an element id, an ordered list of traces and a layout. Build
traces from one of the typed constructors and refine them with chained
``set`` calls; every call returns a new value:

    tr = (
        scatter()
        .set(x=[1, 2, 3], y=[4, 5, 6])
        .set(mode=[Mode.MARKERS, Mode.LINES])
    )
    plotly("chart1", [tr]).to_json()

Serialization follows the Plotly.js schema: absent fields are left out,
never written as ``null``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple, Union

from .models import (
    Axis,
    BarMode,
    Color,
    Fill,
    HoverElem,
    HoverInfo,
    HoverKeyword,
    HoverOn,
    Line,
    ListOrElem,
    Margin,
    Marker,
    Mode,
    Orientation,
    TextPosition,
    TraceType,
    Visibility,
    _coerce_enum,
    _coerce_enums,
    _list_or_elem,
    _Record,
    as_color,
)
from .utils import _freeze, _join_tokens, _present

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trace(_Record):
    """A single data series. Several traces can be superimposed.

    ``trace_type`` is fixed when the trace is created; use ``scatter()``,
    ``scatter3d()``, ``bars()`` or ``mesh3d()`` rather than this class
    directly. Coordinate arrays are passed through as given, their lengths
    are not checked against each other.

    ``hover_info`` takes a ``HoverKeyword`` or a sequence of ``HoverElem``;
    a bare token such as ``"x"`` or ``"x+y"`` is also accepted. A bare
    ``hover_text`` string applies to every point.
    """

    _FIXED = frozenset({"trace_type"})

    trace_type: TraceType

    # coordinates; values may be numbers or category labels
    x: Optional[Sequence[Any]] = None
    y: Optional[Sequence[Any]] = None
    z: Optional[Sequence[Any]] = None

    mode: Optional[Sequence[Mode]] = None
    name: Optional[str] = None  # legend entry
    text: Optional[Sequence[str]] = None
    text_position: Optional[TextPosition] = None
    marker: Optional[Marker] = None
    line: Optional[Line] = None
    fill: Optional[Fill] = None
    orientation: Optional[Orientation] = None
    visible: Optional[Visibility] = None
    show_legend: Optional[bool] = None
    legend_group: Optional[str] = None
    hover_info: Optional[HoverInfo] = None
    hover_text: Optional[Union[str, ListOrElem[str]]] = None
    hover_on: Optional[Sequence[HoverOn]] = None
    connect_gaps: Optional[bool] = None

    # 3D mesh vertex indices
    i: Optional[Sequence[int]] = None
    j: Optional[Sequence[int]] = None
    k: Optional[Sequence[int]] = None
    color: Optional[Color] = None
    opacity: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "trace_type", TraceType(self.trace_type))
        for name in ("x", "y", "z", "text", "i", "j", "k"):
            object.__setattr__(self, name, _freeze(getattr(self, name)))
        object.__setattr__(self, "mode", _coerce_enums(Mode, self.mode))
        object.__setattr__(self, "hover_on", _coerce_enums(HoverOn, self.hover_on))
        object.__setattr__(
            self, "text_position", _coerce_enum(TextPosition, self.text_position)
        )
        object.__setattr__(self, "fill", _coerce_enum(Fill, self.fill))
        object.__setattr__(self, "orientation", _coerce_enum(Orientation, self.orientation))
        object.__setattr__(self, "visible", _coerce_enum(Visibility, self.visible))
        object.__setattr__(self, "hover_info", _coerce_hover_info(self.hover_info))
        object.__setattr__(self, "hover_text", _list_or_elem(self.hover_text))
        if self.color is not None:
            object.__setattr__(self, "color", as_color(self.color))

    def to_js(self) -> Dict[str, Any]:
        return _present(
            {
                "type": self.trace_type,
                "x": self.x,
                "y": self.y,
                "z": self.z,
                "i": self.i,
                "j": self.j,
                "k": self.k,
                "mode": _join_tokens(self.mode),
                "name": self.name,
                "text": self.text,
                "textposition": self.text_position,
                "marker": self.marker,
                "line": self.line,
                "fill": self.fill,
                "orientation": self.orientation,
                "visible": self.visible,
                "showlegend": self.show_legend,
                "legendgroup": self.legend_group,
                "hoverinfo": _encode_hover_info(self.hover_info),
                "hovertext": self.hover_text,
                "hoveron": _join_tokens(self.hover_on),
                "connectgaps": self.connect_gaps,
                "color": self.color,
                "opacity": self.opacity,
            }
        )


_HOVER_KEYWORDS = frozenset(k.value for k in HoverKeyword)


def _coerce_hover_info(value: Any) -> Optional[HoverInfo]:
    if value is None or isinstance(value, HoverKeyword):
        return value
    if isinstance(value, str):
        if value in _HOVER_KEYWORDS:
            return HoverKeyword(value)
        # "x", or a combination such as "x+y"
        return _coerce_enums(HoverElem, value.split("+"))
    return _coerce_enums(HoverElem, value)


def _encode_hover_info(value: Optional[HoverInfo]) -> Optional[str]:
    if value is None or isinstance(value, HoverKeyword):
        return value
    return _join_tokens(value)


def mk_trace(trace_type: TraceType) -> Trace:
    """An empty trace of the given type."""
    return Trace(trace_type)


def scatter() -> Trace:
    """An empty scatter trace (also used for line plots)."""
    return mk_trace(TraceType.SCATTER)


def scatter3d() -> Trace:
    return mk_trace(TraceType.SCATTER3D)


def bars() -> Trace:
    """An empty bar trace."""
    return mk_trace(TraceType.BAR)


def mesh3d() -> Trace:
    return mk_trace(TraceType.MESH3D)


@dataclass(frozen=True)
class Layout(_Record):
    """Options for the layout of the whole plot."""

    xaxis: Optional[Axis] = None
    yaxis: Optional[Axis] = None
    zaxis: Optional[Axis] = None
    title: Optional[str] = None
    show_legend: Optional[bool] = None
    height: Optional[int] = None  # pixels
    width: Optional[int] = None  # pixels
    bar_mode: Optional[BarMode] = None
    margin: Optional[Margin] = None

    def __post_init__(self):
        object.__setattr__(self, "bar_mode", _coerce_enum(BarMode, self.bar_mode))

    def to_js(self) -> Dict[str, Any]:
        return _present(
            {
                "xaxis": self.xaxis,
                "yaxis": self.yaxis,
                "zaxis": self.zaxis,
                "title": self.title,
                "showlegend": self.show_legend,
                "height": self.height,
                "width": self.width,
                "barmode": self.bar_mode,
                "margin": self.margin,
            }
        )


@dataclass(frozen=True)
class Plot(_Record):
    """The whole plot.

    elemid: id of the DOM element the chart is mounted into
    traces: drawn in order, later traces on top
    layout: defaults to an empty ``Layout()``
    """

    _REQUIRED = frozenset({"elemid", "traces", "layout"})

    elemid: str
    traces: Tuple[Trace, ...] = ()
    layout: Layout = field(default_factory=Layout)

    def __post_init__(self):
        if self.elemid is None or self.traces is None:
            raise TypeError("Plot needs an elemid and a sequence of traces")
        object.__setattr__(self, "traces", _freeze(self.traces))
        if self.layout is None:
            object.__setattr__(self, "layout", Layout())

    def to_js(self) -> Dict[str, Any]:
        LOGGER.debug("Serializing plot %r with %d trace(s)", self.elemid, len(self.traces))
        return {
            "id": self.elemid,
            "data": [tr.to_js() for tr in self.traces],
            "layout": self.layout.to_js(),
        }

    def to_json(self, **options: Any) -> str:
        """Serialize to a JSON string.

        ``options`` are passed to ``json.dumps``. Output is compact unless
        ``indent`` is given. NaN and infinities in the data are written as
        ``null``, so the result is always strict JSON.
        """
        if "allow_nan" in options:
            raise TypeError("allow_nan cannot be configured; output is always strict JSON")
        if options.get("indent") is None:
            options.setdefault("separators", (",", ":"))
        return json.dumps(self.to_js(), allow_nan=False, **options)


def plotly(elemid: str, traces: Sequence[Trace], layout: Optional[Layout] = None) -> Plot:
    """Build a plot from an element id, traces and an optional layout."""
    return Plot(elemid, tuple(traces), layout if layout is not None else Layout())


def to_json(plot: Plot, **options: Any) -> str:
    """Serialize ``plot``; see ``Plot.to_json``."""
    return plot.to_json(**options)
