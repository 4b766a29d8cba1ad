# motorph/validation.py

from decimal import Decimal, InvalidOperation

from motorph.attendance.periods import PayPeriod
from motorph.errors import ConfigurationError


def require_employee_id(employee_id):
    if employee_id is None or not str(employee_id).strip():
        raise ConfigurationError("Employee ID cannot be null or empty")
    return str(employee_id).strip()


def require_positive_rate(hourly_rate):
    try:
        rate = Decimal(str(hourly_rate))
    except (InvalidOperation, TypeError):
        raise ConfigurationError(f"Invalid hourly rate: {hourly_rate!r}") from None
    if not rate.is_finite() or rate <= 0:
        raise ConfigurationError("Hourly rate must be positive")
    return rate


def require_period(period, supported_year=None):
    if not isinstance(period, PayPeriod):
        raise ConfigurationError(f"Expected a PayPeriod, got {period!r}")
    if supported_year is not None and period.year != supported_year:
        raise ConfigurationError(f"Only the {supported_year} tax year is supported (got {period.year})")
    return period
