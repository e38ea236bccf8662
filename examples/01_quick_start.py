"""Quick start: a scatter plot colored by category.

Builds a trace with the fluent setters, wraps it in a plot and prints the
Plotly.js JSON. Paste the output into ``Plotly.newPlot(id, data, layout)``.
"""

from plotlyspec import (
    TITLE_MARGINS,
    All,
    Axis,
    Layout,
    Marker,
    Mode,
    Symbol,
    cat_colors,
    plotly,
    scatter,
)

ROWS = [
    (5.1, 3.5, "setosa"),
    (4.9, 3.0, "setosa"),
    (7.0, 3.2, "versicolor"),
    (6.4, 3.2, "versicolor"),
    (6.3, 3.3, "virginica"),
    (5.8, 2.7, "virginica"),
]


def main():
    tr = (
        scatter()
        .set(x=[r[0] for r in ROWS], y=[r[1] for r in ROWS])
        .set(mode=[Mode.MARKERS])
        .set(
            marker=Marker(
                color=cat_colors([r[2] for r in ROWS]),
                size=All(10),
                symbol=Symbol.DIAMOND,
            )
        )
    )
    layout = Layout(
        title="Iris sepals",
        xaxis=Axis(title="Sepal length"),
        yaxis=Axis(title="Sepal width"),
        margin=TITLE_MARGINS,
    )
    print(plotly("iris", [tr], layout).to_json(indent=2))


if __name__ == "__main__":
    main()
