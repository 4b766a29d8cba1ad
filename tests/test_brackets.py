"""
Tests for the ordered range tables: range parsing, contribution lookups and
the progressive withholding tax schedule.
"""

import pytest
from decimal import Decimal

from motorph.errors import DataIntegrityError
from motorph.payroll.brackets import (
    UNBOUNDED,
    Contribution,
    ContributionTable,
    load_contribution_table,
    parse_range,
)
from motorph.payroll import tables

SAMPLE_WAGES = [Decimal(v) for v in (
    '0', '0.01', '1499.99', '1500', '3249.99', '3250', '3250.01', '9999.99', '10000',
    '24750', '24750.01', '50000', '100000', '100000.01', '1000000', '123456789',
)]


class TestParseRange:

    def test_below(self):
        assert parse_range('Below 3,250') == (Decimal('0'), Decimal('3250'))

    def test_over(self):
        assert parse_range('Over 24,750') == (Decimal('24750'), UNBOUNDED)

    def test_and_over(self):
        assert parse_range('24,750 and over') == (Decimal('24750'), UNBOUNDED)

    def test_span(self):
        assert parse_range('3,250 - 3,749.99') == (Decimal('3250'), Decimal('3749.99'))

    def test_en_dash_span(self):
        assert parse_range('3,250 – 3,750') == (Decimal('3250'), Decimal('3750'))
        assert parse_range('24,750 – and over') == (Decimal('24750'), UNBOUNDED)

    def test_single_value(self):
        assert parse_range('3250.0') == (Decimal('3250'), Decimal('3250'))

    @pytest.mark.parametrize('label', ['', 'between 1 and 2', 'Below', '5,000 - 1,000', '1 - 2 - 3'])
    def test_malformed(self, label):
        with pytest.raises(DataIntegrityError):
            parse_range(label)


class TestContributionTables:

    @pytest.mark.parametrize('table', [tables.sss_table(), tables.philhealth_table(), tables.pagibig_table()],
                             ids=['sss', 'philhealth', 'pagibig'])
    def test_every_wage_has_a_bracket(self, table):
        for wage in SAMPLE_WAGES:
            assert any(row.contains(wage) for row in table.rows), wage

    def test_sss_brackets(self):
        sss = tables.sss_table()
        assert sss.contribution(Decimal('1000')) == Decimal('135.00')
        assert sss.contribution(Decimal('3500')) == Decimal('157.50')
        assert sss.contribution(Decimal('24500')) == Decimal('1102.50')
        assert sss.contribution(Decimal('90000')) == Decimal('1125.00')

    def test_boundary_matches_lower_bracket(self):
        sss = tables.sss_table()
        assert sss.contribution(Decimal('3250')) == Decimal('135.00')
        assert sss.contribution(Decimal('3250.01')) == Decimal('157.50')
        assert sss.contribution(Decimal('24750')) == Decimal('1102.50')
        assert sss.contribution(Decimal('24750.01')) == Decimal('1125.00')

    def test_philhealth(self):
        philhealth = tables.philhealth_table()
        assert philhealth.contribution(Decimal('5000')) == Decimal('250.00')
        assert philhealth.contribution(Decimal('20000')) == Decimal('500')
        assert philhealth.contribution(Decimal('250000')) == Decimal('2500.00')

    def test_pagibig(self):
        pagibig = tables.pagibig_table()
        assert pagibig.contribution(Decimal('1000')) == Decimal('10')
        assert pagibig.contribution(Decimal('3000')) == Decimal('60')
        assert pagibig.contribution(Decimal('10000')) == Decimal('100.00')

    def test_contributions_are_non_negative(self):
        for table in (tables.sss_table(), tables.philhealth_table(), tables.pagibig_table()):
            for wage in SAMPLE_WAGES:
                assert table.contribution(wage) >= 0

    def test_gap_falls_back_to_highest_row(self):
        table = ContributionTable.from_schedule('Gappy', [
            ('Below 1,000', Contribution(amount=Decimal('10'))),
            ('2,000 - 3,000', Contribution(amount=Decimal('30'))),
            ('3,000 - 4,000', Contribution(amount=Decimal('20'))),
        ])
        assert table.contribution(Decimal('1500')) == Decimal('30')

    def test_load_from_csv(self, tmp_path):
        path = tmp_path / 'sss.csv'
        path.write_text(
            'Compensation Range,Contribution,Rate,Cap\n'
            '"Below 3,250",135.00,,\n'
            '"3,250 - 3,750",157.50,,\n'
            '"Over 3,750",-,0.045,"1,125"\n'
        )
        table = load_contribution_table('SSS', str(path))

        assert len(table) == 3
        assert table.contribution(Decimal('3000')) == Decimal('135.00')
        assert table.contribution(Decimal('3750')) == Decimal('157.50')
        assert table.contribution(Decimal('10000')) == Decimal('450.000')
        assert table.contribution(Decimal('100000')) == Decimal('1125')

    def test_load_rejects_bad_range(self, tmp_path):
        path = tmp_path / 'sss.csv'
        path.write_text('Compensation Range,Contribution\nsomewhere,135.00\n')
        with pytest.raises(DataIntegrityError):
            load_contribution_table('SSS', str(path))


class TestWithholdingTax:

    @pytest.fixture
    def tax_table(self):
        return tables.withholding_tax_table()

    def test_fifty_thousand(self, tax_table):
        assert tax_table.tax(Decimal('50000')) == Decimal('6666.75')

    @pytest.mark.parametrize('income, expected', [
        ('0', '0'),
        ('20832', '0'),
        ('25000', '833.60'),
        ('100000', '20832.90'),
        ('200000', '51499.89'),
        ('1000000', '317499.88'),
    ])
    def test_schedule(self, tax_table, income, expected):
        assert tax_table.tax(Decimal(income)) == Decimal(expected)

    def test_boundary_uses_lower_bracket(self, tax_table):
        row = tax_table.find_row(Decimal('33333'))
        assert row.value.excess_over == Decimal('20832')
        assert tax_table.tax(Decimal('33333')) == Decimal('2500.20')

    def test_six_contiguous_brackets(self, tax_table):
        assert len(tax_table) == 6
        for lower, upper in zip(tax_table.rows, tax_table.rows[1:]):
            assert lower.high == upper.low
        assert tax_table.rows[0].low == 0
        assert tax_table.rows[-1].high == UNBOUNDED

    def test_every_income_has_a_bracket(self, tax_table):
        for income in SAMPLE_WAGES:
            assert any(row.contains(income) for row in tax_table.rows)

    def test_negative_income_is_untaxed(self, tax_table):
        assert tax_table.tax(Decimal('-500')) == 0
