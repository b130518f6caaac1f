"""
bankroll/charts.py - ProBet Tracker
===================================
plotly figure builders for the bankroll trend and per-book profit. Pure:
records in, go.Figure out (or None when there is nothing worth drawing).
No app shell, no file output.

Architecture rule: imports history and analytics result types only.
"""

from typing import Optional

import plotly.graph_objects as go

from bankroll.analytics import BookPerformance
from bankroll.history import BankrollHistoryPoint

PLOTLY_BASE = dict(
    paper_bgcolor="#0f172a",
    plot_bgcolor="#111827",
    font=dict(color="#d1d5db", size=11, family="monospace"),
    margin=dict(l=50, r=20, t=40, b=50),
    xaxis=dict(gridcolor="#1e293b", linecolor="#1e293b", tickfont=dict(size=10)),
    yaxis=dict(gridcolor="#1e293b", linecolor="#1e293b", tickfont=dict(size=10)),
    hoverlabel=dict(bgcolor="#1e293b", bordercolor="#334155", font_color="#f3f4f6"),
)
GREEN = "#22c55e"
RED = "#ef4444"
GRID = "#334155"
TITLE_FONT = dict(size=12, color="#9ca3af")


def bankroll_trend_figure(history: list[BankrollHistoryPoint]) -> Optional[go.Figure]:
    """
    Area chart of the running balance, one marker per settled date.

    Returns None with fewer than two points (a lone "Start" point has no trend).
    """
    if len(history) < 2:
        return None

    labels = [p.formatted_date for p in history]
    balances = [p.balance for p in history]
    start = balances[0]
    color = GREEN if balances[-1] >= start else RED

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels, y=balances,
        mode="lines+markers",
        name="Bankroll",
        line=dict(color=color, width=2),
        marker=dict(size=5, color=color),
        fill="tozeroy",
        fillcolor="rgba(34,197,94,0.08)" if color == GREEN else "rgba(239,68,68,0.08)",
        hovertemplate="%{x}<br>Balance: $%{y:,.2f}<extra></extra>",
    ))
    fig.add_hline(y=start, line_color=GRID, line_width=1, line_dash="dot")

    layout = dict(PLOTLY_BASE)
    layout["title"] = dict(text="Bankroll Trend", font=TITLE_FONT, x=0)
    layout["height"] = 260
    layout["yaxis"] = dict(**PLOTLY_BASE["yaxis"], tickprefix="$")
    layout["xaxis"] = dict(**PLOTLY_BASE["xaxis"], type="category")
    layout["showlegend"] = False
    fig.update_layout(**layout)
    return fig


def book_performance_figure(rows: list[BookPerformance]) -> Optional[go.Figure]:
    """Profit by sportsbook as bars, green in profit and red in loss. None when empty."""
    if not rows:
        return None

    names = [r.name for r in rows]
    profits = [round(r.profit, 2) for r in rows]
    bar_colors = [GREEN if p >= 0 else RED for p in profits]

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names, y=profits,
        marker_color=bar_colors, opacity=0.8,
        text=[f"{r.wins}-{r.losses}" for r in rows],
        textposition="outside",
        textfont=dict(size=10, color="#9ca3af"),
        hovertemplate="%{x}<br>Profit: $%{y:+,.2f}<extra></extra>",
    ))
    fig.add_hline(y=0, line_color=GRID, line_width=1)

    layout = dict(PLOTLY_BASE)
    layout["title"] = dict(text="Profit by Sportsbook", font=TITLE_FONT, x=0)
    layout["height"] = 220
    layout["yaxis"] = dict(**PLOTLY_BASE["yaxis"], title="Profit", tickprefix="$")
    layout["showlegend"] = False
    layout["bargap"] = 0.3
    fig.update_layout(**layout)
    return fig
