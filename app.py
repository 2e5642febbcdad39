"""Home Cost Calculator - Streamlit Application."""


import streamlit as st

from components.charts import (
    create_payment_breakdown_chart,
    create_term_comparison_chart,
)

# Import UI components
from components.inputs import (
    down_payment_quick_options,
    formatted_number_input,
    loan_term_input,
    period_selector,
)
from components.tables import (
    display_breakdown,
    display_term_comparison,
)
from src.config import (
    FIELD_CONFIGS,
    INITIAL_VALUES,
    PAGE_ICON,
    PAGE_TITLE,
    configure_logging,
)

# Import core modules
from src.mortgage import (
    MortgageInputs,
    calculate_breakdown,
    compare_loan_terms,
)

configure_logging()

# Page configuration
st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="wide",
)


def _field(label: str, name: str, placeholder: str):
    return formatted_number_input(
        label,
        name,
        config=FIELD_CONFIGS[name],
        initial_value=INITIAL_VALUES[name],
        placeholder=placeholder,
    )


def main():
    """Main application entry point."""
    st.title(f"{PAGE_ICON} {PAGE_TITLE}")

    st.sidebar.title("Options")
    enumerated_terms = st.sidebar.toggle(
        "Choose loan term from standard options",
        value=True,
        help="Off: type any number of years",
    )

    col1, col2 = st.columns(2)

    with col1:
        house_price = _field("House Price ($)", "house_price", "Enter house price")
        if not house_price.value:
            st.warning("Don't forget to enter the price of the home")

        down_payment_quick_options(house_price.value)
        down_payment = _field("Down Payment ($)", "down_payment", "Enter down payment")

        left, right = st.columns(2)
        with left:
            tax_rate = _field("Tax Rate (%)", "tax_rate", "Enter tax rate")
            interest_rate = _field("Interest Rate (%)", "interest_rate", "Enter interest rate")
        with right:
            insurance = _field("Annual Insurance ($)", "annual_insurance", "Enter annual insurance")
            loan_term = loan_term_input(enumerated=enumerated_terms)

        period = period_selector()

    inputs = MortgageInputs(
        house_price=house_price.value,
        down_payment=down_payment.value,
        annual_insurance=insurance.value,
        annual_interest_rate_pct=interest_rate.value,
        annual_tax_rate_pct=tax_rate.value,
        loan_term_years=loan_term,
        period=period,
    )
    breakdown = calculate_breakdown(inputs)
    label = breakdown.period.value.title()

    with col2:
        display_breakdown(breakdown)
        if breakdown.total_payment > 0:
            st.plotly_chart(create_payment_breakdown_chart(breakdown), use_container_width=True)

    if house_price.value:
        st.divider()
        comparison = compare_loan_terms(inputs)
        display_term_comparison(comparison, label=label)
        st.plotly_chart(create_term_comparison_chart(comparison, label=label), use_container_width=True)


if __name__ == "__main__":
    main()
