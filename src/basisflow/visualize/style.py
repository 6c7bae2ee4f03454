"""
Plotting style definitions for basis set figures.
"""

from typing import Any

import plotly.colors
import plotly.graph_objects as go

# -----------------------------------------------------------------------------
# Style parameters
# -----------------------------------------------------------------------------

FONT_FAMILY = "Helvetica"
FONT_COLOR = "#333333"

FONT_SIZES: dict[str, int] = {
    "title": 20,
    "axis_title": 16,
    "tick_label": 14,
    "legend": 12,
}

AXIS_STYLE: dict[str, Any] = {
    "showgrid": True,
    "gridwidth": 1,
    "gridcolor": "#E7E7E7",
    "zeroline": False,
    "linewidth": 2,
    "linecolor": "#333333",
}

LAYOUT_STYLE: dict[str, Any] = {
    "plot_bgcolor": "#FBFCFF",
    "paper_bgcolor": "#FBFCFF",
    "margin": dict(t=60, b=40, r=40),
}

DEVELOPMENT_STYLE: dict[str, Any] = {
    "template": "plotly_dark",
    "plot_bgcolor": "black",
    "paper_bgcolor": "black",
    "font": dict(color="white"),
}

# One color per angular momentum channel, S first
CHANNEL_COLORS: list[str] = list(plotly.colors.qualitative.Plotly)


def channel_color(index: int) -> str:
    """Color for the channel at ``index``; cycles past the palette length."""
    return CHANNEL_COLORS[index % len(CHANNEL_COLORS)]


def get_font_dict(size: int, bold: bool = False) -> dict[str, Any]:
    """Helper function to create consistent font dictionaries.

    Args:
        size: Font size to use
        bold: Whether to use bold font weight

    Returns:
        Dictionary with font settings
    """
    return dict(
        family=FONT_FAMILY,
        size=size,
        color=FONT_COLOR,
        weight="bold" if bold else None,
    )


def apply_publication_style(fig: go.Figure, **kwargs: Any) -> None:
    """Apply light, publication-quality styling to every axis and the layout.

    Args:
        fig: A plotly figure
        **kwargs: Additional layout parameters to override defaults
    """
    fig.update_layout(font=get_font_dict(FONT_SIZES["tick_label"]))
    for key in fig.layout:
        if key.startswith("xaxis") or key.startswith("yaxis"):
            getattr(fig.layout, key).update(
                AXIS_STYLE,
                title_font=get_font_dict(FONT_SIZES["axis_title"], bold=True),
                tickfont=get_font_dict(FONT_SIZES["tick_label"]),
            )

    layout_style: dict[str, Any] = LAYOUT_STYLE.copy()
    layout_style.update(kwargs)
    fig.update_layout(layout_style, legend=dict(font=get_font_dict(FONT_SIZES["legend"])))


def apply_development_style(fig: go.Figure) -> None:
    """Apply dark theme development styling to a figure.

    Args:
        fig: A plotly figure
    """
    fig.update_layout(**DEVELOPMENT_STYLE)
