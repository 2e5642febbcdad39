"""Calculator defaults and logging setup."""

import logging
import os
from typing import Optional

from .fields import FieldConfig

# Dollar amounts allow cents, rates allow thousandths of a percent
CURRENCY_FIELD = FieldConfig(max_decimals=2)
RATE_FIELD = FieldConfig(max_decimals=3)

FIELD_CONFIGS = {
    'house_price': CURRENCY_FIELD,
    'down_payment': CURRENCY_FIELD,
    'annual_insurance': CURRENCY_FIELD,
    'interest_rate': RATE_FIELD,
    'tax_rate': RATE_FIELD,
}

INITIAL_VALUES = {
    'house_price': 0.0,
    'down_payment': 0.0,
    'annual_insurance': 0.0,
    'interest_rate': 3.5,
    'tax_rate': 2.0,
}

LOAN_TERM_OPTIONS = (10, 15, 20, 30)
DEFAULT_LOAN_TERM_YEARS = 30
# Free-entry term starts empty, so no mortgage payment until a term is typed
DEFAULT_FREE_LOAN_TERM_YEARS = 0

QUICK_DOWN_PAYMENT_PERCENTAGES = (5, 10, 20)

PAGE_TITLE = "Home Cost Calculator"
PAGE_ICON = "🏠"

LOG_LEVEL_ENV = "HOME_COST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Read the log level from the environment, falling back to WARNING."""
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(level: Optional[int] = None) -> None:
    """Configure root logging for the app."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
    )
