from typing import Literal

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from basisflow.basis_sets.angular_momentum import AngularMomentum
from basisflow.basis_sets.atomic import AtomicBasisSet
from basisflow.visualize.style import apply_development_style, apply_publication_style, channel_color


def plot_basis_set(
    basis_set: AtomicBasisSet,
    title: str = "Basis Set Primitives",
    style: Literal["development", "publication"] = "development",
) -> go.Figure:
    """
    Plots the primitives of a basis set, one subplot row per angular momentum channel.

    Each contraction becomes one trace (coefficient on a log x-axis, exponent on
    the y-axis). Channels without contractions get no row.

    Args:
        basis_set (AtomicBasisSet): The basis set to plot.
        title (str, optional): Title of the plot. Defaults to "Basis Set Primitives".
        style (str, optional): "development" (dark) or "publication" (light).

    Returns:
        plotly.graph_objects.Figure: The generated Plotly figure.
    """
    channels: dict[AngularMomentum, list] = {}
    for angular_momentum, contraction in basis_set:
        channels.setdefault(angular_momentum, []).append(contraction)

    names = [am.letter or "Unsupported" for am in channels]
    fig = make_subplots(rows=max(len(channels), 1), cols=1, subplot_titles=[f"{n} channel" for n in names])

    for row, (angular_momentum, contractions) in enumerate(channels.items(), start=1):
        name = names[row - 1]
        for i, contraction in enumerate(contractions):
            fig.add_trace(
                go.Scatter(
                    x=list(contraction.coefficients),
                    y=list(contraction.exponents),
                    mode="lines+markers",
                    line=dict(color=channel_color(max(int(angular_momentum), 0))),
                    name=f"{name} #{i + 1} ({contraction.primitive_count()} prim.)",
                    legendgroup=name,
                ),
                row=row,
                col=1,
            )
        fig.update_xaxes(type="log", title_text="Coefficient", row=row, col=1)
        fig.update_yaxes(title_text="Exponent", row=row, col=1)

    fig.update_layout(title=title, height=300 * max(len(channels), 1), showlegend=True)

    if style == "publication":
        apply_publication_style(fig)
    else:
        apply_development_style(fig)
    return fig
