"""Plotly template and colours shared by the takehome charts."""

from __future__ import annotations

import plotly.graph_objects as go
import plotly.io as pio

# One colour per tax component; every chart sets its trace colours explicitly
FEDERAL_COLOR = "#4363D8"
JURISDICTION_COLOR = "#F58231"
PAYROLL_COLOR = "#911EB4"
DEDUCTION_COLOR = "#BDBDBD"
NET_COLOR = "#3CB44B"
LOSS_COLOR = "#E6194B"

_GRID_COLOR = "#E5E5E5"


def make_rgba(hex_color: str, alpha: float) -> str:
    """Convert hex color string to rgba() with given alpha."""
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def add_zero_hline(fig: go.Figure) -> None:
    """Add a $0 reference line for charts whose values can go negative."""
    fig.add_hline(y=0, line_dash="dot", line_color=DEDUCTION_COLOR, line_width=1)


def register_theme() -> None:
    """Register the "takehome" template and make it the default.

    Money is the usual y-axis unit, so the template formats it as dollars;
    horizontal bar charts reset that on their category axis.
    """
    layout = go.Layout(
        font=dict(size=13),
        title_font=dict(size=16),
        plot_bgcolor="white",
        paper_bgcolor="white",
        xaxis=dict(gridcolor=_GRID_COLOR),
        yaxis=dict(gridcolor=_GRID_COLOR, tickformat="$,.0f"),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0),
    )
    pio.templates["takehome"] = go.layout.Template(layout=layout)
    pio.templates.default = "takehome"
