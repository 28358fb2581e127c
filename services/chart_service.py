"""Plotly figures for the dashboard pages."""

from __future__ import annotations
from typing import Any, Iterable, List

import plotly.graph_objects as go

from config.constants import (
    HEALTH_COLORS,
    STATUS_COLORS,
    COMPONENT_PROGRESS_COLORS,
    PROGRESS_SERIES,
    TOP_BUDGET_LIMIT,
)
from core.classifier import classify_health, component_progress_bucket
from core.portfolio_engine import stage_funnel, status_counts
from core.query import top_by_budget
from core.utils import to_float
from models.evm import Health

MIN_BUBBLE_SIZE = 15
MAX_BUBBLE_SIZE = 50
MATRIX_RANGE = [0.5, 1.5]


def _bubble_sizes(budgets: List[float]) -> List[float]:
    """Bubble diameters proportional to budget, uniform when all budgets are zero."""
    max_bac = max(budgets, default=0.0)
    if max_bac <= 0:
        return [MIN_BUBBLE_SIZE] * len(budgets)
    return [MIN_BUBBLE_SIZE + (MAX_BUBBLE_SIZE - MIN_BUBBLE_SIZE) * (b / max_bac) for b in budgets]


def build_health_matrix(projects: Iterable[Any]) -> go.Figure:
    """Portfolio health matrix: SPI on x, CPI on y, bubble size by BAC, colour by health."""
    projects = list(projects)
    sized = list(zip(projects, _bubble_sizes([max(to_float(p.bac), 0.0) for p in projects])))

    fig = go.Figure()
    for health in Health:
        bucket = [(p, size) for p, size in sized if classify_health(p) == health]
        if not bucket:
            continue

        hover_text = []
        for p, _ in bucket:
            evm = p.evm
            hover_text.append(
                f"<b>{p.code}</b><br>" +
                f"{p.name}<br>" +
                f"CPI: {evm.cpi:.2f} | SPI: {evm.spi:.2f}<br>" +
                f"Budget: ${to_float(p.bac):,.0f}M"
            )

        fig.add_trace(go.Scatter(
            x=[p.spi for p, _ in bucket],
            y=[p.cpi for p, _ in bucket],
            mode='markers',
            name=health.value,
            customdata=[p.id for p, _ in bucket],
            marker=dict(
                color=HEALTH_COLORS[health.value],
                size=[size for _, size in bucket],
                opacity=0.7,
                line=dict(color='white', width=1)
            ),
            hovertemplate='%{hovertext}<extra></extra>',
            hovertext=hover_text
        ))

    fig.add_hline(y=1.0, line_dash="dash", line_color="gray", opacity=0.5)
    fig.add_vline(x=1.0, line_dash="dash", line_color="gray", opacity=0.5)
    fig.update_layout(
        title='Portfolio Health Matrix (EVM)',
        xaxis_title='Schedule Performance (SPI)',
        yaxis_title='Cost Performance (CPI)',
        xaxis=dict(range=MATRIX_RANGE, showgrid=True, gridcolor='lightgray'),
        yaxis=dict(range=MATRIX_RANGE, showgrid=True, gridcolor='lightgray'),
        height=450,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def build_budget_utilization(projects: Iterable[Any], n: int = TOP_BUDGET_LIMIT) -> go.Figure:
    """Actual cost, earned value and budget for the largest projects."""
    top = top_by_budget(projects, n)
    codes = [p.code for p in top]

    fig = go.Figure()
    for attr, label, color in (('ac', 'Actual Cost', '#3b82f6'),
                               ('ev', 'Earned Value', '#10b981'),
                               ('bac', 'Budget', '#cbd5e1')):
        fig.add_trace(go.Bar(
            y=codes,
            x=[getattr(p, attr) for p in top],
            name=label,
            orientation='h',
            marker_color=color
        ))

    fig.update_layout(
        title=f'Budget Utilization (Top {n} by BAC)',
        barmode='group',
        xaxis_title='$M',
        yaxis=dict(autorange='reversed'),
        height=380,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def build_physical_progress(projects: Iterable[Any], n: int = TOP_BUDGET_LIMIT) -> go.Figure:
    """Design / procurement / construction / commissioning progress for the largest projects."""
    top = top_by_budget(projects, n)
    codes = [p.code for p in top]

    fig = go.Figure()
    for attr, label, color in PROGRESS_SERIES:
        fig.add_trace(go.Bar(
            y=codes,
            x=[getattr(p, attr) for p in top],
            name=label,
            orientation='h',
            marker_color=color
        ))

    fig.update_layout(
        title='Physical Progress Breakdown (%)',
        barmode='group',
        xaxis=dict(range=[0, 100]),
        yaxis=dict(autorange='reversed'),
        height=380,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig


def build_project_milestones(project: Any) -> go.Figure:
    """Milestone progress summary of one project, one bar per phase."""
    fig = go.Figure(go.Bar(
        y=[label for _, label, _ in PROGRESS_SERIES],
        x=[to_float(getattr(project, attr)) for attr, _, _ in PROGRESS_SERIES],
        orientation='h',
        marker_color=[color for _, _, color in PROGRESS_SERIES],
        text=[f"{to_float(getattr(project, attr)):.0f}%" for attr, _, _ in PROGRESS_SERIES],
        textposition='auto'
    ))
    fig.update_layout(
        title='Milestone Progress Summary',
        xaxis=dict(range=[0, 100]),
        yaxis=dict(autorange='reversed'),
        height=260
    )
    return fig


def build_stage_funnel(projects: Iterable[Any]) -> go.Figure:
    """Project count per funnel stage."""
    funnel = stage_funnel(projects)
    fig = go.Figure(go.Bar(
        y=[row.stage for row in funnel],
        x=[row.count for row in funnel],
        orientation='h',
        marker_color='#1e293b',
        text=[f"{row.count} ({row.share_percent:.0f}%)" for row in funnel],
        textposition='auto'
    ))
    fig.update_layout(
        title='Project Funnel',
        yaxis=dict(autorange='reversed'),
        xaxis=dict(dtick=1),
        height=320
    )
    return fig


def build_component_progress(project: Any) -> go.Figure:
    """Per-component progress bars for one project."""
    components = list(project.components)
    fig = go.Figure(go.Bar(
        y=[c.name for c in components],
        x=[c.progress for c in components],
        orientation='h',
        marker_color=[COMPONENT_PROGRESS_COLORS[component_progress_bucket(c.progress)] for c in components],
        text=[f"{to_float(c.progress):.0f}%" for c in components],
        textposition='auto'
    ))
    fig.update_layout(
        title='Detailed Component Progress',
        xaxis=dict(range=[0, 100]),
        yaxis=dict(autorange='reversed'),
        height=300
    )
    return fig


def build_status_breakdown(projects: Iterable[Any]) -> go.Figure:
    """Project count per registry status."""
    counts = status_counts(projects)
    fig = go.Figure(go.Bar(
        x=list(counts),
        y=list(counts.values()),
        marker_color=[STATUS_COLORS[status] for status in counts],
        text=list(counts.values()),
        textposition='auto'
    ))
    fig.update_layout(
        title='Status Breakdown',
        yaxis=dict(dtick=1),
        height=280
    )
    return fig
