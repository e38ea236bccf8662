"""Horizontal and stacked bars."""

import numpy as np

from plotlyspec import (
    RGB,
    BarMode,
    Layout,
    Marker,
    All,
    Orientation,
    THIN_MARGINS,
    bars,
    plotly,
)

NAMES = ["Simon", "Joe", "Dorothy"]


def main():
    rng = np.random.default_rng(42)

    # one trace per quarter, stacked along x
    traces = [
        bars()
        .set(y=NAMES, x=rng.uniform(5.0, 20.0, len(NAMES)).round(1))
        .set(orientation=Orientation.HORIZONTAL, name=f"Q{q}")
        .set(marker=Marker(color=All(RGB(40 * q, 90, 200))))
        for q in range(1, 4)
    ]
    layout = Layout(bar_mode=BarMode.STACK, margin=THIN_MARGINS, height=300)
    print(plotly("bars", traces, layout).to_json())


if __name__ == "__main__":
    main()
