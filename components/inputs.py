"""Streamlit input components for the home cost calculator."""

import streamlit as st
from typing import Optional, Sequence

from src.config import (
    CURRENCY_FIELD,
    DEFAULT_FREE_LOAN_TERM_YEARS,
    DEFAULT_LOAN_TERM_YEARS,
    LOAN_TERM_OPTIONS,
    QUICK_DOWN_PAYMENT_PERCENTAGES,
)
from src.fields import FieldConfig, NumericField, apply_edit, set_from_percentage_of
from src.mortgage import Period


def _field_key(key_prefix: str, name: str) -> str:
    return f"{key_prefix}_{name}_field"


def _widget_key(key_prefix: str, name: str) -> str:
    return f"{key_prefix}_{name}"


def _commit(field_key: str, widget_key: str, field: NumericField) -> None:
    """Store the field state and echo its display text back into the widget."""
    st.session_state[field_key] = field
    st.session_state[widget_key] = field.display_value


def handle_field_change(field_key: str, widget_key: str, config: FieldConfig) -> None:
    """on_change callback: run the widget's raw text through the field rules."""
    previous = st.session_state[field_key]
    field = apply_edit(previous, config, st.session_state[widget_key])
    _commit(field_key, widget_key, field)


def apply_quick_option(
    field_key: str,
    widget_key: str,
    config: FieldConfig,
    base: float,
    percentage: float,
) -> None:
    """on_click callback: set the field to a percentage of ``base``."""
    previous = st.session_state[field_key]
    field = set_from_percentage_of(previous, config, base, percentage)
    _commit(field_key, widget_key, field)


def formatted_number_input(
    label: str,
    name: str,
    config: FieldConfig = CURRENCY_FIELD,
    initial_value: float = 0.0,
    placeholder: Optional[str] = None,
    key_prefix: str = "calc",
    help: Optional[str] = None,
) -> NumericField:
    """Text input that keeps a formatted number as the user types.

    The field state lives in session state under its own key; the widget text
    is rewritten with the grouped display value after every edit.

    Returns the committed NumericField.
    """
    field_key = _field_key(key_prefix, name)
    widget_key = _widget_key(key_prefix, name)

    if field_key not in st.session_state:
        _commit(field_key, widget_key, NumericField.from_initial(initial_value))

    st.text_input(
        label,
        key=widget_key,
        placeholder=placeholder,
        on_change=handle_field_change,
        args=(field_key, widget_key, config),
        help=help,
    )

    return st.session_state[field_key]


def down_payment_quick_options(
    house_price: float,
    name: str = "down_payment",
    config: FieldConfig = CURRENCY_FIELD,
    percentages: Sequence[int] = QUICK_DOWN_PAYMENT_PERCENTAGES,
    key_prefix: str = "calc",
) -> None:
    """Row of buttons setting the down payment to a share of the house price."""
    field_key = _field_key(key_prefix, name)
    widget_key = _widget_key(key_prefix, name)

    columns = st.columns(len(percentages))
    for column, percentage in zip(columns, percentages):
        with column:
            st.button(
                f"{percentage}%",
                key=f"{key_prefix}_quick_{percentage}",
                on_click=apply_quick_option,
                args=(field_key, widget_key, config, house_price, percentage),
                use_container_width=True,
            )


def loan_term_input(enumerated: bool = True, key_prefix: str = "calc") -> int:
    """Loan term in years, either picked from fixed choices or typed freely."""
    if enumerated:
        return st.selectbox(
            "Loan Term (years)",
            options=list(LOAN_TERM_OPTIONS),
            index=LOAN_TERM_OPTIONS.index(DEFAULT_LOAN_TERM_YEARS),
            key=f"{key_prefix}_term_choice",
        )

    return int(st.number_input(
        "Loan Term (years)",
        min_value=0,
        max_value=50,
        value=DEFAULT_FREE_LOAN_TERM_YEARS,
        step=1,
        key=f"{key_prefix}_term_free",
        help="Length of the loan in years",
    ))


def period_selector(key_prefix: str = "calc") -> Period:
    """Monthly or yearly view of the breakdown."""
    return st.radio(
        "Breakdown",
        options=list(Period),
        format_func=lambda period: period.value.title(),
        horizontal=True,
        key=f"{key_prefix}_period",
    )
