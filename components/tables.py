"""Streamlit table display components."""


import pandas as pd
import streamlit as st

from src.fields import format_amount
from src.mortgage import MortgageBreakdown


def breakdown_table(breakdown: MortgageBreakdown) -> pd.DataFrame:
    """Labelled, formatted rows of a breakdown.

    Payment labels follow the period: "Monthly Mortgage" or "Yearly Mortgage".
    """
    label = breakdown.period.value.title()

    rows = [
        ("Down Payment Percentage", f"{format_amount(breakdown.down_payment_pct)}%"),
        ("Loan Amount", f"${format_amount(breakdown.loan_amount)}"),
        (f"{label} Mortgage", f"${format_amount(breakdown.mortgage_payment)}"),
        (f"{label} Tax", f"${format_amount(breakdown.tax_payment)}"),
        (f"{label} Insurance", f"${format_amount(breakdown.insurance_payment)}"),
    ]

    return pd.DataFrame(rows, columns=['Item', 'Amount'])


def display_breakdown(breakdown: MortgageBreakdown) -> None:
    """Display the breakdown table and the total payment."""
    label = breakdown.period.value.title()

    st.subheader(f"{label} Breakdown")

    st.dataframe(
        breakdown_table(breakdown),
        use_container_width=True,
        hide_index=True,
    )

    st.metric(
        f"Total {label} Payment",
        f"${format_amount(breakdown.total_payment)}",
    )


def display_term_comparison(comparison: pd.DataFrame, label: str = "Monthly") -> None:
    """Display payments for each loan term side by side."""
    st.subheader("Loan Term Comparison")

    display_df = comparison.rename(columns={
        'term_years': 'Term (years)',
        'mortgage_payment': f'{label} Mortgage',
        'tax_payment': f'{label} Tax',
        'insurance_payment': f'{label} Insurance',
        'total_payment': f'Total {label} Payment',
    })

    for col in display_df.columns[1:]:
        display_df[col] = display_df[col].apply(lambda x: f"${format_amount(x)}")

    st.dataframe(
        display_df,
        use_container_width=True,
        hide_index=True,
    )
