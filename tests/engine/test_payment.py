from dataclasses import replace
from decimal import Decimal
from types import SimpleNamespace

import pytest

from miniloan.engine.payment import (
    effective_period_rate,
    number_of_payments,
    periodic_payment,
)
from miniloan.engine.schedule import compute_schedule
from miniloan.exceptions import InvalidFrequencyError
from miniloan.models.loan import PaymentFrequency


class TestPeriodicPayment:
    def test_standard_mortgage(self, make_loan):
        """$400K loan at 7% for 30 years."""
        loan = make_loan(amount="400000", rate="7", years=30)
        assert periodic_payment(loan) == Decimal("2661.21")

    def test_one_year_monthly(self, monthly_loan):
        # 10000 * 0.005 / (1 - 1.005^-12)
        assert periodic_payment(monthly_loan) == Decimal("860.66")

    def test_zero_rate_even_principal(self, zero_rate_loan):
        assert periodic_payment(zero_rate_loan) == Decimal("1000.00")

    def test_zero_rate_annual(self, make_loan):
        loan = make_loan(amount="12000", rate="0", years=2, frequency=PaymentFrequency.ANNUALLY)
        assert periodic_payment(loan) == Decimal("6000.00")

    def test_zero_rate_bi_monthly(self, make_loan):
        loan = make_loan(amount="12000", rate="0", frequency=PaymentFrequency.BI_MONTHLY)
        assert periodic_payment(loan) == Decimal("2000.00")

    def test_single_annual_payment_is_compounded_year(self, annual_loan):
        # One payment: P * (1 + i_eff) with i_eff = (1 + 0.10/12)^12 - 1
        assert periodic_payment(annual_loan) == Decimal("11047.13")

    def test_result_has_two_decimals(self, make_loan):
        loan = make_loan(
            amount="98765.43", rate="3.875", years=15, frequency=PaymentFrequency.SEMI_ANNUALLY
        )
        assert periodic_payment(loan).as_tuple().exponent == -2


class TestPeriodRate:
    def test_monthly_is_monthly_rate(self, monthly_loan):
        assert effective_period_rate(monthly_loan) == monthly_loan.monthly_rate

    def test_zero_rate(self, zero_rate_loan):
        assert effective_period_rate(zero_rate_loan) == 0

    def test_number_of_payments(self, make_loan):
        assert number_of_payments(make_loan(years=30)) == 360
        assert number_of_payments(make_loan(years=3, frequency=PaymentFrequency.SEMI_ANNUALLY)) == 6
        assert number_of_payments(make_loan(years=5, frequency=PaymentFrequency.ANNUALLY)) == 5


class TestInvalidFrequency:
    def test_zero_stride_rejected(self, monthly_loan):
        broken = replace(monthly_loan, payment_frequency=SimpleNamespace(value=0))
        with pytest.raises(InvalidFrequencyError):
            periodic_payment(broken)

    def test_is_a_value_error(self, monthly_loan):
        broken = replace(monthly_loan, payment_frequency=SimpleNamespace(value=-6))
        with pytest.raises(ValueError, match=">= 1 month"):
            number_of_payments(broken)


class TestUnroundedAmount:
    def test_payment_uses_cent_principal(self, make_loan):
        # 1200.005 is walked as 1200.01; the payment must be computed on the same principal
        rounded = make_loan(amount="1200.01", rate="10", frequency=PaymentFrequency.ANNUALLY)
        raw = replace(rounded, amount=Decimal("1200.005"))
        assert periodic_payment(raw) == periodic_payment(rounded) == Decimal("1325.67")

    def test_schedule_settles_unrounded_loan(self, make_loan):
        loan = replace(
            make_loan(rate="10", frequency=PaymentFrequency.ANNUALLY), amount=Decimal("1200.005")
        )
        assert compute_schedule(loan)[-1].remaining_balance == Decimal("0.00")
