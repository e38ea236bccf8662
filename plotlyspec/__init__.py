import logging

from .models import (
    Mode,
    TraceType,
    Symbol,
    Dash,
    Orientation,
    Fill,
    HoverElem,
    HoverKeyword,
    HoverInfo,
    HoverOn,
    TextPosition,
    BarMode,
    Visibility,
    # colors
    RGB,
    RGBA,
    ColorIndex,
    Color,
    as_color,
    cat_colors,
    # single value or one per point
    All,
    PerPoint,
    ListOrElem,
    # records
    Marker,
    Line,
    Axis,
    Margin,
    THIN_MARGINS,
    TITLE_MARGINS,
)

from .plot_models import (
    Trace,
    Layout,
    Plot,
    mk_trace,
    scatter,
    scatter3d,
    bars,
    mesh3d,
    plotly,
    to_json,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Mode",
    "TraceType",
    "Symbol",
    "Dash",
    "Orientation",
    "Fill",
    "HoverElem",
    "HoverKeyword",
    "HoverInfo",
    "HoverOn",
    "TextPosition",
    "BarMode",
    "Visibility",
    # Colors
    "RGB",
    "RGBA",
    "ColorIndex",
    "Color",
    "as_color",
    "cat_colors",
    "All",
    "PerPoint",
    "ListOrElem",
    # Records
    "Marker",
    "Line",
    "Axis",
    "Margin",
    "THIN_MARGINS",
    "TITLE_MARGINS",
    "Trace",
    "Layout",
    "Plot",
    # Construction and serialization
    "mk_trace",
    "scatter",
    "scatter3d",
    "bars",
    "mesh3d",
    "plotly",
    "to_json",
]
