"""Shared fixtures: small iris-like sample data and prebuilt traces."""

import pytest

from plotlyspec import Marker, Mode, All, Symbol, cat_colors, scatter


@pytest.fixture
def iris_sample():
    """A handful of (sepal_length, sepal_width, species) rows."""
    return [
        (5.1, 3.5, "setosa"),
        (4.9, 3.0, "setosa"),
        (7.0, 3.2, "versicolor"),
        (6.4, 3.2, "versicolor"),
        (6.3, 3.3, "virginica"),
        (5.8, 2.7, "virginica"),
    ]


@pytest.fixture
def iris_trace(iris_sample):
    """Scatter trace colored by species."""
    return scatter().set(
        x=[r[0] for r in iris_sample],
        y=[r[1] for r in iris_sample],
        mode=[Mode.MARKERS],
        marker=Marker(
            color=cat_colors([r[2] for r in iris_sample]),
            size=All(8),
            symbol=Symbol.CIRCLE,
        ),
    )
