# motorph/payroll/tables.py
"""Built-in 2024 contribution and withholding tax schedules."""

from decimal import Decimal

from .brackets import Contribution, ContributionTable, TaxTable, load_contribution_table

# --- SSS CONTRIBUTION TABLE ---
# Employee share per monthly compensation range
SSS_SCHEDULE = (
    ('Below 3,250', Contribution(amount=Decimal('135.00'))),
    ('3,250 - 3,750', Contribution(amount=Decimal('157.50'))),
    ('3,750 - 4,250', Contribution(amount=Decimal('180.00'))),
    ('4,250 - 4,750', Contribution(amount=Decimal('202.50'))),
    ('4,750 - 5,250', Contribution(amount=Decimal('225.00'))),
    ('5,250 - 5,750', Contribution(amount=Decimal('247.50'))),
    ('5,750 - 6,250', Contribution(amount=Decimal('270.00'))),
    ('6,250 - 6,750', Contribution(amount=Decimal('292.50'))),
    ('6,750 - 7,250', Contribution(amount=Decimal('315.00'))),
    ('7,250 - 7,750', Contribution(amount=Decimal('337.50'))),
    ('7,750 - 8,250', Contribution(amount=Decimal('360.00'))),
    ('8,250 - 8,750', Contribution(amount=Decimal('382.50'))),
    ('8,750 - 9,250', Contribution(amount=Decimal('405.00'))),
    ('9,250 - 9,750', Contribution(amount=Decimal('427.50'))),
    ('9,750 - 10,250', Contribution(amount=Decimal('450.00'))),
    ('10,250 - 10,750', Contribution(amount=Decimal('472.50'))),
    ('10,750 - 11,250', Contribution(amount=Decimal('495.00'))),
    ('11,250 - 11,750', Contribution(amount=Decimal('517.50'))),
    ('11,750 - 12,250', Contribution(amount=Decimal('540.00'))),
    ('12,250 - 12,750', Contribution(amount=Decimal('562.50'))),
    ('12,750 - 13,250', Contribution(amount=Decimal('585.00'))),
    ('13,250 - 13,750', Contribution(amount=Decimal('607.50'))),
    ('13,750 - 14,250', Contribution(amount=Decimal('630.00'))),
    ('14,250 - 14,750', Contribution(amount=Decimal('652.50'))),
    ('14,750 - 15,250', Contribution(amount=Decimal('675.00'))),
    ('15,250 - 15,750', Contribution(amount=Decimal('697.50'))),
    ('15,750 - 16,250', Contribution(amount=Decimal('720.00'))),
    ('16,250 - 16,750', Contribution(amount=Decimal('742.50'))),
    ('16,750 - 17,250', Contribution(amount=Decimal('765.00'))),
    ('17,250 - 17,750', Contribution(amount=Decimal('787.50'))),
    ('17,750 - 18,250', Contribution(amount=Decimal('810.00'))),
    ('18,250 - 18,750', Contribution(amount=Decimal('832.50'))),
    ('18,750 - 19,250', Contribution(amount=Decimal('855.00'))),
    ('19,250 - 19,750', Contribution(amount=Decimal('877.50'))),
    ('19,750 - 20,250', Contribution(amount=Decimal('900.00'))),
    ('20,250 - 20,750', Contribution(amount=Decimal('922.50'))),
    ('20,750 - 21,250', Contribution(amount=Decimal('945.00'))),
    ('21,250 - 21,750', Contribution(amount=Decimal('967.50'))),
    ('21,750 - 22,250', Contribution(amount=Decimal('990.00'))),
    ('22,250 - 22,750', Contribution(amount=Decimal('1012.50'))),
    ('22,750 - 23,250', Contribution(amount=Decimal('1035.00'))),
    ('23,250 - 23,750', Contribution(amount=Decimal('1057.50'))),
    ('23,750 - 24,250', Contribution(amount=Decimal('1080.00'))),
    ('24,250 - 24,750', Contribution(amount=Decimal('1102.50'))),
    ('Over 24,750', Contribution(amount=Decimal('1125.00'))),
)

# --- PHILHEALTH CONTRIBUTION TABLE ---
# 5% premium, 50/50 employee/employer split, floor 10,000 and ceiling 100,000
PHILHEALTH_SCHEDULE = (
    ('Below 10,000', Contribution(amount=Decimal('250.00'))),
    ('10,000 - 100,000', Contribution(rate=Decimal('0.025'))),
    ('Over 100,000', Contribution(amount=Decimal('2500.00'))),
)

# --- PAG-IBIG (HDMF) CONTRIBUTION TABLE ---
# 1% up to 1,500, 2% above; employee share capped at 100
PAGIBIG_SCHEDULE = (
    ('Below 1,500', Contribution(rate=Decimal('0.01'))),
    ('Over 1,500', Contribution(rate=Decimal('0.02'), cap=Decimal('100.00'))),
)

# --- WITHHOLDING TAX (TRAIN LAW, MONTHLY) ---
# (upper_bound, base_tax, rate on the excess over the bracket floor)
WITHHOLDING_TAX_SCHEDULE = (
    ('20832', '0', '0'),
    ('33333', '0', '0.20'),
    ('66667', '2500', '0.25'),
    ('166667', '10833', '0.30'),
    ('666667', '40833.33', '0.32'),
    (None, '200833.33', '0.35'),
)


def sss_table(path=None):
    if path:
        return load_contribution_table('SSS', path)
    return ContributionTable.from_schedule('SSS', SSS_SCHEDULE)


def philhealth_table(path=None):
    if path:
        return load_contribution_table('PhilHealth', path)
    return ContributionTable.from_schedule('PhilHealth', PHILHEALTH_SCHEDULE)


def pagibig_table(path=None):
    if path:
        return load_contribution_table('Pag-IBIG', path)
    return ContributionTable.from_schedule('Pag-IBIG', PAGIBIG_SCHEDULE)


def withholding_tax_table():
    return TaxTable.progressive('Withholding Tax', WITHHOLDING_TAX_SCHEDULE)
