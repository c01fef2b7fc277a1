"""
Unit Tests for the Payroll Gateway Underwriting Module.

These tests verify:
1. Salary band to minimum score mapping
2. Credit margin calculation
3. Installment options for simulations (rounded half-up)
4. Approval rule
5. Installment schedule generation (monthly, unrounded)

Test Categories:
- TestRequiredScore: salary band lookups and boundaries
- TestCreditMargin: 35% margin rule
- TestInstallmentOptions: simulation breakdown
- TestDecide: approval threshold
- TestInstallmentSchedule: due dates and values
- TestUnderwritingSettings: configuration validation
"""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from payroll_gateway.domain.entities import ApprovalStatus
from payroll_gateway.service.underwriting import (
    UnderwritingSettings,
    build_installment_schedule,
    calculate_installment_options,
    credit_margin,
    decide,
    exceeds_margin,
    installment_value,
    required_score,
    round_half_up,
)


# =============================================================================
# Salary Band Tests
# =============================================================================

class TestRequiredScore:
    """Tests for required_score()."""

    @pytest.mark.parametrize(
        "salary,expected",
        [
            ("0", 400),
            ("1500", 400),
            ("2000", 400),
            ("2000.01", 500),
            ("4000", 500),
            ("4000.01", 600),
            ("8000", 600),
            ("8000.01", 700),
            ("12000", 700),
            ("12000.01", 700),
            ("50000", 700),
        ],
    )
    def test_band_boundaries(self, salary, expected):
        """Band upper bounds are inclusive."""
        assert required_score(Decimal(salary)) == expected

    def test_monotonic_in_salary(self):
        """A higher salary never requires a lower score."""
        salaries = [Decimal(s) for s in range(0, 20001, 250)]
        scores = [required_score(s) for s in salaries]

        assert scores == sorted(scores)

    def test_custom_bands(self):
        settings = UnderwritingSettings(
            salary_bands_json="[[3000, 350], [6000, 450]]",
            top_band_score=550,
        )

        assert required_score(Decimal("3000"), settings) == 350
        assert required_score(Decimal("5000"), settings) == 450
        assert required_score(Decimal("7000"), settings) == 550


# =============================================================================
# Credit Margin Tests
# =============================================================================

class TestCreditMargin:
    """Tests for credit_margin() and exceeds_margin()."""

    def test_margin_is_35_percent_of_salary(self):
        assert credit_margin(Decimal("5000")) == Decimal("1750")
        assert credit_margin(Decimal("1500")) == Decimal("525")

    def test_margin_keeps_cents(self):
        assert credit_margin(Decimal("3333.33")) == Decimal("1166.6655")

    def test_amount_equal_to_margin_is_allowed(self):
        assert exceeds_margin(Decimal("1750"), Decimal("5000")) is False

    def test_amount_above_margin(self):
        assert exceeds_margin(Decimal("1750.01"), Decimal("5000")) is True

    def test_custom_margin_rate(self):
        settings = UnderwritingSettings(margin_rate=Decimal("0.30"))

        assert credit_margin(Decimal("5000"), settings) == Decimal("1500")


# =============================================================================
# Installment Option Tests
# =============================================================================

class TestInstallmentOptions:
    """Tests for calculate_installment_options()."""

    def test_breakdown_of_1000(self):
        options = calculate_installment_options(Decimal("1000"))

        assert [(o.count, o.value_per_installment) for o in options] == [
            (1, Decimal("1000.00")),
            (2, Decimal("500.00")),
            (3, Decimal("333.33")),
            (4, Decimal("250.00")),
        ]

    def test_always_four_options(self):
        for amount in ("100", "525", "1750", "4200"):
            assert len(calculate_installment_options(Decimal(amount))) == 4

    def test_rounds_half_up(self):
        """100.10 / 4 = 25.025, which rounds up to 25.03."""
        options = calculate_installment_options(Decimal("100.10"))

        assert options[3].value_per_installment == Decimal("25.03")

    def test_two_thirds_rounds_up(self):
        options = calculate_installment_options(Decimal("200"))

        assert options[2].value_per_installment == Decimal("66.67")

    def test_round_half_up_helper(self):
        assert round_half_up(Decimal("0.005")) == Decimal("0.01")
        assert round_half_up(Decimal("0.004")) == Decimal("0.00")
        assert round_half_up(Decimal("2.675")) == Decimal("2.68")

    def test_custom_max_installments(self):
        settings = UnderwritingSettings(max_installments=6)

        options = calculate_installment_options(Decimal("600"), settings)

        assert [o.count for o in options] == [1, 2, 3, 4, 5, 6]
        assert options[5].value_per_installment == Decimal("100.00")


# =============================================================================
# Decision Tests
# =============================================================================

class TestDecide:
    """Tests for decide()."""

    def test_score_above_band_approved(self):
        assert decide(450, Decimal("1500")) == ApprovalStatus.APPROVED

    def test_score_below_band_rejected(self):
        assert decide(300, Decimal("1500")) == ApprovalStatus.REJECTED

    def test_score_equal_to_band_approved(self):
        assert decide(600, Decimal("5000")) == ApprovalStatus.APPROVED

    def test_fractional_score_just_below_band(self):
        assert decide(599.9, Decimal("5000")) == ApprovalStatus.REJECTED

    def test_high_salary_needs_top_band(self):
        assert decide(650, Decimal("15000")) == ApprovalStatus.REJECTED
        assert decide(700, Decimal("15000")) == ApprovalStatus.APPROVED

    def test_fallback_score_always_clears_own_band(self):
        """The band minimum used as a fallback score approves by construction."""
        for salary in ("1000", "3000", "6000", "10000", "20000"):
            s = Decimal(salary)
            assert decide(required_score(s), s) == ApprovalStatus.APPROVED


# =============================================================================
# Installment Schedule Tests
# =============================================================================

class TestInstallmentSchedule:
    """Tests for build_installment_schedule()."""

    def test_schedule_has_count_installments(self):
        loan_id = uuid4()

        schedule = build_installment_schedule(
            loan_id, Decimal("1000"), 3, start_date=date(2025, 3, 10)
        )

        assert [inst.number for inst in schedule] == [1, 2, 3]
        assert all(inst.loan_id == loan_id for inst in schedule)
        assert len({inst.id for inst in schedule}) == 3

    def test_monthly_due_dates(self):
        schedule = build_installment_schedule(
            uuid4(), Decimal("1000"), 4, start_date=date(2025, 3, 10)
        )

        assert [inst.due_date for inst in schedule] == [
            date(2025, 4, 10),
            date(2025, 5, 10),
            date(2025, 6, 10),
            date(2025, 7, 10),
        ]

    def test_due_dates_cross_year(self):
        schedule = build_installment_schedule(
            uuid4(), Decimal("400"), 2, start_date=date(2025, 12, 5)
        )

        assert [inst.due_date for inst in schedule] == [
            date(2026, 1, 5),
            date(2026, 2, 5),
        ]

    def test_end_of_month_clamped(self):
        """Jan 31 + 1 month is the last day of February; later months keep day 31."""
        schedule = build_installment_schedule(
            uuid4(), Decimal("1000"), 3, start_date=date(2025, 1, 31)
        )

        assert [inst.due_date for inst in schedule] == [
            date(2025, 2, 28),
            date(2025, 3, 31),
            date(2025, 4, 30),
        ]

    def test_leap_year_february(self):
        schedule = build_installment_schedule(
            uuid4(), Decimal("1000"), 1, start_date=date(2024, 1, 31)
        )

        assert schedule[0].due_date == date(2024, 2, 29)

    def test_values_are_not_rounded(self):
        schedule = build_installment_schedule(
            uuid4(), Decimal("1000"), 3, start_date=date(2025, 3, 10)
        )

        assert all(inst.value == Decimal("1000") / 3 for inst in schedule)
        assert schedule[0].value != Decimal("333.33")

    def test_values_sum_to_principal(self):
        for count in (1, 2, 3, 4):
            schedule = build_installment_schedule(
                uuid4(), Decimal("1750"), count, start_date=date(2025, 3, 10)
            )
            total = sum(inst.value for inst in schedule)
            assert abs(total - Decimal("1750")) < Decimal("0.000001")

    def test_installment_value(self):
        assert installment_value(Decimal("1000"), 4) == Decimal("250")

    def test_defaults_to_today(self):
        schedule = build_installment_schedule(uuid4(), Decimal("500"), 1)

        assert schedule[0].due_date > date.today()


# =============================================================================
# Settings Tests
# =============================================================================

class TestUnderwritingSettings:
    """Tests for UnderwritingSettings validation."""

    def test_default_bands(self):
        settings = UnderwritingSettings()

        assert settings.salary_bands == [
            (Decimal("2000"), 400),
            (Decimal("4000"), 500),
            (Decimal("8000"), 600),
            (Decimal("12000"), 700),
        ]

    def test_invalid_json_rejected(self):
        with pytest.raises(ValidationError):
            UnderwritingSettings(salary_bands_json="not json")

    def test_descending_bands_rejected(self):
        with pytest.raises(ValidationError):
            UnderwritingSettings(salary_bands_json="[[4000, 500], [2000, 400]]")

    def test_decreasing_scores_rejected(self):
        with pytest.raises(ValidationError):
            UnderwritingSettings(salary_bands_json="[[2000, 500], [4000, 400]]")

    def test_margin_rate_bounds(self):
        with pytest.raises(ValidationError):
            UnderwritingSettings(margin_rate=Decimal("0"))
        with pytest.raises(ValidationError):
            UnderwritingSettings(margin_rate=Decimal("1.5"))
