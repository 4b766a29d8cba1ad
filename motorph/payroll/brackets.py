# motorph/payroll/brackets.py
"""Ordered range tables shared by the contribution schedules and the tax schedule.

A table is a list of rows ``(low, high, value)``. Lookup returns the value of the
first row whose range contains the amount, so an amount sitting exactly on a
shared boundary resolves to the lower row.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from motorph.errors import DataIntegrityError
from motorph.sources import read_rows

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
UNBOUNDED = Decimal('Infinity')


def parse_amount(text):
    """Parses "24,750" / "3250.0" into a Decimal."""
    cleaned = str(text).replace(',', '').strip()
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise DataIntegrityError(f"Invalid numeric value: {text!r}") from None
    if not value.is_finite():
        raise DataIntegrityError(f"Invalid numeric value: {text!r}")
    return value


_BELOW = re.compile(r'^below\s+(?P<x>[\d,.]+)$', re.IGNORECASE)
_OVER = re.compile(r'^(?:over\s+(?P<a>[\d,.]+)|(?P<b>[\d,.]+)\s*(?:[-\u2013]\s*)?and\s+(?:over|above))$', re.IGNORECASE)
_SPAN = re.compile(r'^(?P<low>[\d,.]+)\s*[-\u2013]\s*(?P<high>[\d,.]+)$')


def parse_range(text):
    """Normalizes a compensation range label into numeric ``(low, high)`` bounds.

    "Below X" -> (0, X), "Over X" / "X and over" -> (X, inf), "X - Y" -> (X, Y)
    and a bare number -> (X, X).
    """
    label = ' '.join(str(text).split())
    match = _BELOW.match(label)
    if match:
        return ZERO, parse_amount(match.group('x'))
    match = _OVER.match(label)
    if match:
        return parse_amount(match.group('a') or match.group('b')), UNBOUNDED
    match = _SPAN.match(label)
    if match:
        low, high = parse_amount(match.group('low')), parse_amount(match.group('high'))
        if low > high:
            raise DataIntegrityError(f"Range bounds are reversed: {text!r}")
        return low, high
    try:
        value = parse_amount(label)
    except DataIntegrityError:
        raise DataIntegrityError(f"Invalid compensation range format: {text!r}") from None
    return value, value


@dataclass(frozen=True)
class BracketRow:
    low: Decimal
    high: Decimal
    value: object

    def contains(self, amount):
        return self.low <= amount <= self.high


def _last_row(rows, amount):
    return rows[-1]


class RangeTable:
    """Generic ordered range lookup.

    ``contains`` decides whether a row matches an amount; ``fallback`` picks the
    row to use when nothing matches.
    """

    def __init__(self, name, rows, contains=BracketRow.contains, fallback=_last_row):
        self.name = name
        self.rows = tuple(rows)
        if not self.rows:
            raise DataIntegrityError(f"{name} table has no rows")
        self._contains = contains
        self._fallback = fallback

    def find_row(self, amount):
        for row in self.rows:
            if self._contains(row, amount):
                return row
        logger.warning('%s table has no bracket for %s; using fallback row', self.name, amount)
        return self._fallback(self.rows, amount)

    def lookup(self, amount):
        return self.find_row(amount).value

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return f'<RangeTable {self.name} ({len(self.rows)} rows)>'


# --- CONTRIBUTION TABLES (SSS / PHILHEALTH / PAG-IBIG) ---

@dataclass(frozen=True)
class Contribution:
    """Either a fixed employee share or a rate of gross, optionally capped."""
    amount: Decimal = None
    rate: Decimal = None
    cap: Decimal = None

    def for_wage(self, gross):
        if self.rate is None:
            return self.amount
        share = gross * self.rate
        if self.cap is not None:
            share = min(share, self.cap)
        return max(share, ZERO)


def _highest_contribution(rows, amount):
    return max(rows, key=lambda row: row.value.for_wage(amount))


class ContributionTable(RangeTable):

    def __init__(self, name, rows):
        super().__init__(name, rows, fallback=_highest_contribution)

    @classmethod
    def from_schedule(cls, name, schedule):
        """Builds a table from ``(range_label, Contribution)`` pairs."""
        rows = []
        for label, contribution in schedule:
            low, high = parse_range(label)
            rows.append(BracketRow(low, high, contribution))
        return cls(name, rows)

    def contribution(self, gross):
        return self.lookup(gross).for_wage(gross)


def _optional_amount(value):
    text = str(value).strip()
    if text in ('', '-'):
        return None
    return parse_amount(text)


def load_contribution_table(name, path):
    """Loads a contribution schedule export.

    Columns: ``Compensation Range`` and either ``Contribution`` (fixed share) or
    ``Rate`` with an optional ``Cap``.
    """
    schedule = []
    for line_no, row in enumerate(read_rows(path), start=2):
        label = row.get('Compensation Range', '')
        if label == '':
            continue
        rate = _optional_amount(row.get('Rate', ''))
        if rate is not None:
            contribution = Contribution(rate=rate, cap=_optional_amount(row.get('Cap', '')))
        else:
            amount = _optional_amount(row.get('Contribution', ''))
            contribution = Contribution(amount=amount if amount is not None else ZERO)
        schedule.append((label, contribution))

    table = ContributionTable.from_schedule(name, schedule)
    logger.info('Loaded %d %s brackets from %s', len(table), name, path)
    return table


# --- WITHHOLDING TAX TABLE ---

@dataclass(frozen=True)
class TaxBracket:
    base_tax: Decimal
    rate: Decimal
    excess_over: Decimal

    def tax_for(self, taxable_income):
        return self.base_tax + (taxable_income - self.excess_over) * self.rate


class TaxTable(RangeTable):

    @classmethod
    def progressive(cls, name, schedule):
        """Builds contiguous brackets from ``(upper_bound, base_tax, rate)`` triples.

        Each bracket starts where the previous one ends; an upper bound of None
        leaves the last bracket open.
        """
        rows = []
        low = ZERO
        for upper, base_tax, rate in schedule:
            high = UNBOUNDED if upper is None else Decimal(upper)
            rows.append(BracketRow(low, high, TaxBracket(Decimal(base_tax), Decimal(rate), low)))
            low = high
        return cls(name, rows)

    def tax(self, taxable_income):
        income = max(taxable_income, ZERO)
        return self.lookup(income).tax_for(income)
