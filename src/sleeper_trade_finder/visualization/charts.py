"""
Plotly Chart Generators

Generates interactive charts for trade finder results.
All charts return HTML strings for embedding or standalone use.
"""

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from sleeper_trade_finder.models.trade_finder import Opportunity, TradeShape


DARK_THEME = {
    "paper_bgcolor": "#1a1a2e",
    "plot_bgcolor": "#16213e",
    "font_color": "#e8e8e8",
    "gridcolor": "#2d3a4f",
}

ACCEPTANCE_COLORS = {
    "High": "#10b981",
    "Medium": "#ffe66d",
    "Low": "#ef4444",
}

SHAPE_SYMBOLS = {
    TradeShape.ONE_FOR_ONE.value: "circle",
    TradeShape.CONSOLIDATE.value: "diamond",
    TradeShape.TWO_FOR_TWO.value: "square",
}


def _apply_dark_theme(fig: go.Figure) -> go.Figure:
    """Apply dark theme styling to a figure."""
    fig.update_layout(
        paper_bgcolor=DARK_THEME["paper_bgcolor"],
        plot_bgcolor=DARK_THEME["plot_bgcolor"],
        font={"color": DARK_THEME["font_color"], "family": "Inter, sans-serif"},
        margin={"l": 60, "r": 40, "t": 60, "b": 60},
    )
    fig.update_xaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    fig.update_yaxes(
        gridcolor=DARK_THEME["gridcolor"],
        linecolor=DARK_THEME["gridcolor"],
    )
    return fig


def opportunities_frame(opportunities: list[Opportunity]) -> pd.DataFrame:
    """
    Flatten opportunities into one row per trade.

    Args:
        opportunities: Ranked opportunities

    Returns:
        DataFrame with opponent, shape, give/get labels, values, and score
    """
    columns = [
        "opponent", "shape", "give", "get", "give_value",
        "get_value", "pct_diff", "score", "acceptance",
    ]
    rows = [
        {
            "opponent": o.opponent_name,
            "shape": o.package.shape.value,
            "give": ", ".join(a.label for a in o.package.give),
            "get": ", ".join(a.label for a in o.package.get),
            "give_value": o.package.give_total,
            "get_value": o.package.get_total,
            "pct_diff": round(o.package.pct_diff, 1),
            "score": o.score,
            "acceptance": o.acceptance.value,
        }
        for o in opportunities
    ]
    return pd.DataFrame(rows, columns=columns)


def opportunity_chart(
    opportunities: list[Opportunity], title: str = "Trade Opportunities"
) -> str:
    """
    Create a chart of trade opportunities by opponent and value.

    Args:
        opportunities: Ranked opportunities
        title: Chart title

    Returns:
        HTML string containing the chart
    """
    if not opportunities:
        return "<div>No trade opportunities found</div>"

    df = opportunities_frame(opportunities)
    by_opponent = (
        df.groupby("opponent")
        .agg(trades=("score", "size"), best_score=("score", "max"))
        .sort_values("best_score")
    )

    fig = make_subplots(
        rows=1,
        cols=2,
        subplot_titles=("Best Score by Opponent", "Score vs Value Change"),
        horizontal_spacing=0.15,
    )

    fig.add_trace(
        go.Bar(
            y=by_opponent.index.tolist(),
            x=by_opponent["best_score"].tolist(),
            orientation="h",
            marker_color="#00d9ff",
            text=[f"{n} trades" for n in by_opponent["trades"]],
            textposition="inside",
            name="Best score",
        ),
        row=1,
        col=1,
    )

    fig.add_trace(
        go.Scatter(
            x=df["pct_diff"],
            y=df["score"],
            mode="markers",
            marker={
                "size": 11,
                "color": [ACCEPTANCE_COLORS[a] for a in df["acceptance"]],
                "symbol": [SHAPE_SYMBOLS[s] for s in df["shape"]],
            },
            customdata=df[["opponent", "give", "get"]].to_numpy(),
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>"
                "Give: %{customdata[1]}<br>"
                "Get: %{customdata[2]}<br>"
                "Value change: %{x:.1f}%<br>"
                "Score: %{y}<extra></extra>"
            ),
            name="Trades",
        ),
        row=1,
        col=2,
    )

    fig.update_xaxes(title_text="Score", range=[0, 100], row=1, col=1)
    fig.update_xaxes(title_text="Value change (%)", row=1, col=2)
    fig.update_yaxes(title_text="Score", range=[0, 105], row=1, col=2)

    fig.update_layout(
        title={"text": title, "x": 0.5, "xanchor": "center"},
        height=max(450, 40 * len(by_opponent) + 150),
        showlegend=False,
    )

    _apply_dark_theme(fig)
    return fig.to_html(full_html=False, include_plotlyjs="cdn")
