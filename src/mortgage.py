"""Core home cost calculations: mortgage payment, tax, insurance, totals."""

import logging
import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np
import pandas as pd

from .config import LOAN_TERM_OPTIONS

logger = logging.getLogger(__name__)


class Period(Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


def round_half_up(x: float) -> float:
    """Round to the nearest integer, ties toward positive infinity."""
    if not math.isfinite(x):
        return x
    floor = math.floor(x)
    if x - floor >= 0.5:
        floor += 1
    return floor


def round2(x: float) -> float:
    """Round to cents."""
    scaled = x * 100
    if not math.isfinite(scaled):
        return scaled / 100
    return round_half_up(scaled) / 100


@dataclass(frozen=True)
class MortgageInputs:
    """Inputs for one recalculation of the home cost breakdown."""

    house_price: float
    down_payment: float
    annual_insurance: float
    annual_interest_rate_pct: float  # e.g. 3.5 for 3.5%
    annual_tax_rate_pct: float  # e.g. 2 for 2%
    loan_term_years: int
    period: Union[Period, str] = Period.MONTHLY

    def __post_init__(self):
        object.__setattr__(self, 'period', Period(self.period))


@dataclass(frozen=True)
class MortgageBreakdown:
    """Derived figures, rounded to cents and scaled to ``period``."""

    down_payment_pct: float
    loan_amount: float
    mortgage_payment: float
    tax_payment: float
    insurance_payment: float
    total_payment: float
    period: Period = Period.MONTHLY

    def to_dict(self) -> dict:
        data = asdict(self)
        data['period'] = self.period.value
        return data


def period_multiplier(period: Union[Period, str]) -> int:
    """Number of months in the reporting period."""
    return 12 if Period(period) is Period.YEARLY else 1


def down_payment_percentage(inputs: MortgageInputs) -> float:
    if inputs.house_price == 0:
        return 0
    return round2(inputs.down_payment / inputs.house_price * 100)


def loan_amount(inputs: MortgageInputs) -> float:
    return round2(inputs.house_price - inputs.down_payment)


def mortgage_payment(inputs: MortgageInputs) -> float:
    """Principal and interest payment for the period.

    M = P * [r(1+r)^n] / [(1+r)^n - 1]

    The monthly payment is rounded to cents before scaling to the period and
    rounded again afterwards. A zero term, nothing left to borrow, a zero
    rate (0/0) or an overflow gives 0.
    """
    if not inputs.loan_term_years:
        return 0

    principal = np.float64(loan_amount(inputs))
    if principal <= 0:
        return 0

    r = np.float64(inputs.annual_interest_rate_pct) / 100 / 12
    n = inputs.loan_term_years * 12

    with np.errstate(all='ignore'):
        growth = (1 + r) ** n
        raw = principal * (r * growth) / (growth - 1)

    payment = round2(round2(float(raw)) * period_multiplier(inputs.period))
    if not math.isfinite(payment):
        logger.debug(
            "Degenerate mortgage payment for loan=%s rate=%s%% term=%s years",
            principal, inputs.annual_interest_rate_pct, inputs.loan_term_years,
        )
        return 0
    return payment


def tax_payment(inputs: MortgageInputs) -> float:
    monthly_tax = round2(inputs.house_price * (inputs.annual_tax_rate_pct / 100) / 12)
    return round2(monthly_tax * period_multiplier(inputs.period))


def insurance_payment(inputs: MortgageInputs) -> float:
    monthly_insurance = inputs.annual_insurance / 12
    return round2(monthly_insurance * period_multiplier(inputs.period))


def total_payment(inputs: MortgageInputs) -> float:
    """Sum of the period-scaled mortgage, tax and insurance payments."""
    return round2(
        mortgage_payment(inputs) + tax_payment(inputs) + insurance_payment(inputs)
    )


def calculate_breakdown(inputs: MortgageInputs) -> MortgageBreakdown:
    """Compute every derived figure for the given inputs."""
    return MortgageBreakdown(
        down_payment_pct=down_payment_percentage(inputs),
        loan_amount=loan_amount(inputs),
        mortgage_payment=mortgage_payment(inputs),
        tax_payment=tax_payment(inputs),
        insurance_payment=insurance_payment(inputs),
        total_payment=total_payment(inputs),
        period=inputs.period,
    )


def compare_loan_terms(
    inputs: MortgageInputs,
    terms: Sequence[int] = LOAN_TERM_OPTIONS,
) -> pd.DataFrame:
    """Payments for the same purchase across several loan terms.

    Returns DataFrame with columns:
    - term_years: loan term
    - mortgage_payment, tax_payment, insurance_payment, total_payment:
      figures for ``inputs.period``
    """
    rows = []
    for term in terms:
        scenario = MortgageInputs(
            house_price=inputs.house_price,
            down_payment=inputs.down_payment,
            annual_insurance=inputs.annual_insurance,
            annual_interest_rate_pct=inputs.annual_interest_rate_pct,
            annual_tax_rate_pct=inputs.annual_tax_rate_pct,
            loan_term_years=term,
            period=inputs.period,
        )
        rows.append({
            'term_years': term,
            'mortgage_payment': mortgage_payment(scenario),
            'tax_payment': tax_payment(scenario),
            'insurance_payment': insurance_payment(scenario),
            'total_payment': total_payment(scenario),
        })

    return pd.DataFrame(rows)
