"""Plotly chart components for home cost visualization."""

import plotly.graph_objects as go
import pandas as pd

from src.mortgage import MortgageBreakdown


def create_payment_breakdown_chart(breakdown: MortgageBreakdown) -> go.Figure:
    """Create donut chart splitting the payment into mortgage, tax and insurance."""
    label = breakdown.period.value.title()

    fig = go.Figure(go.Pie(
        labels=['Mortgage', 'Tax', 'Insurance'],
        values=[
            breakdown.mortgage_payment,
            breakdown.tax_payment,
            breakdown.insurance_payment,
        ],
        hole=0.5,
        marker=dict(colors=['#1f77b4', '#ff7f0e', '#2ca02c']),
        hovertemplate='%{label}: $%{value:,.2f}<extra></extra>',
        sort=False,
    ))

    fig.update_layout(
        title=f'{label} Payment Breakdown',
        annotations=[dict(
            text=f'${breakdown.total_payment:,.2f}',
            showarrow=False,
            font=dict(size=16),
        )],
    )

    return fig


def create_term_comparison_chart(comparison: pd.DataFrame, label: str = "Monthly") -> go.Figure:
    """Create stacked bar chart of payments for each loan term."""
    fig = go.Figure()

    terms = comparison['term_years'].astype(str) + ' yr'

    for column, name, color in [
        ('mortgage_payment', 'Mortgage', '#1f77b4'),
        ('tax_payment', 'Tax', '#ff7f0e'),
        ('insurance_payment', 'Insurance', '#2ca02c'),
    ]:
        fig.add_trace(go.Bar(
            x=terms,
            y=comparison[column],
            name=name,
            marker_color=color,
            hovertemplate='%{x}<br>' + name + ': $%{y:,.2f}<extra></extra>',
        ))

    fig.update_layout(
        title=f'{label} Payment by Loan Term',
        xaxis_title='Loan Term',
        yaxis_title='Amount ($)',
        barmode='stack',
        hovermode='x unified',
        yaxis=dict(tickformat='$,.0f'),
    )

    return fig
