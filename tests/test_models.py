"""Tests for registries, income, deduction and household models."""

from __future__ import annotations

from decimal import Decimal

import pytest

from takehome.config.defaults import default_input
from takehome.models.deductions import (
    Deduction,
    DeductionFrequency,
    DeductionType,
    RetirementContributions,
    apply_deductions,
    summarize_deductions,
)
from takehome.models.filing_status import FilingStatus
from takehome.models.household import (
    Household,
    PartnerProfile,
    SplitMethod,
    calculate_split,
    split_household,
)
from takehome.models.income import IncomeInput, PayFrequency
from takehome.models.jurisdiction import Jurisdiction

D = Decimal


class TestFilingStatus:
    def test_all_statuses(self) -> None:
        assert len(FilingStatus.all()) == 5
        assert FilingStatus.all()[0] is FilingStatus.SINGLE

    def test_names(self) -> None:
        assert FilingStatus.MARRIED_FILING_JOINTLY.display_name == "Married Filing Jointly"
        assert FilingStatus.MARRIED_FILING_JOINTLY.short_name == "MFJ"
        assert FilingStatus.QUALIFYING_WIDOWER.display_name == "Qualifying Widow(er)"
        assert FilingStatus.HEAD_OF_HOUSEHOLD.short_name == "HoH"


class TestJurisdiction:
    def test_registry_size(self) -> None:
        assert len(Jurisdiction.all()) == 51
        assert len({j.code for j in Jurisdiction}) == 51

    def test_from_code(self) -> None:
        assert Jurisdiction.from_code("ca") is Jurisdiction.CALIFORNIA
        assert Jurisdiction.from_code(" NY ") is Jurisdiction.NEW_YORK
        assert Jurisdiction.from_code("ZZ") is None
        assert Jurisdiction.from_code("") is None

    def test_display_names(self) -> None:
        assert Jurisdiction.DISTRICT_OF_COLUMBIA.display_name == "Washington D.C."
        assert Jurisdiction.NEW_HAMPSHIRE.display_name == "New Hampshire"
        assert Jurisdiction.TEXAS.display_name == "Texas"

    def test_tax_flags(self) -> None:
        assert Jurisdiction.TEXAS.no_income_tax
        assert not Jurisdiction.CALIFORNIA.no_income_tax
        assert Jurisdiction.ILLINOIS.flat_tax
        assert Jurisdiction.CALIFORNIA.disability_insurance
        assert Jurisdiction.NEW_YORK.local_tax
        assert not Jurisdiction.TEXAS.local_tax

    def test_no_tax_and_flat_are_exclusive(self) -> None:
        assert not any(j.no_income_tax and j.flat_tax for j in Jurisdiction)
        assert sum(j.no_income_tax for j in Jurisdiction) == 9


class TestIncomeInput:
    def test_total_gross(self) -> None:
        income = IncomeInput(salary=D("90000"), bonuses=D("8000"), other_income=D("2000"))
        assert income.total_gross == D("100000")

    def test_per_paycheck(self) -> None:
        income = IncomeInput(salary=D("104000"))
        assert income.per_paycheck() == D("4000")
        assert income.per_paycheck(D("52000")) == D("2000")

    def test_pay_frequency(self) -> None:
        assert PayFrequency.SEMI_MONTHLY.periods_per_year == D("24")
        assert PayFrequency.BI_WEEKLY.display_name == "Bi-Weekly"


class TestDeductions:
    def test_annual_amount_by_frequency(self) -> None:
        per_check = Deduction(DeductionType.HEALTH_INSURANCE, D("100"))
        monthly = Deduction(DeductionType.HSA, D("100"), DeductionFrequency.MONTHLY)
        annual = Deduction(DeductionType.UNION_DUES, D("100"), DeductionFrequency.ANNUAL)
        assert per_check.annual_amount() == D("2600")
        assert per_check.annual_amount(PayFrequency.MONTHLY) == D("1200")
        assert monthly.annual_amount() == D("1200")
        assert annual.annual_amount() == D("100")

    def test_label(self) -> None:
        assert Deduction(DeductionType.HSA, D("1")).label == "HSA"
        assert Deduction(DeductionType.OTHER, D("1"), name="Gym").label == "Gym"

    def test_pre_tax_classification(self) -> None:
        assert DeductionType.HEALTH_INSURANCE.is_pre_tax
        assert DeductionType.TRADITIONAL_401K.is_pre_tax
        assert not DeductionType.ROTH_401K.is_pre_tax
        assert not DeductionType.LIFE_INSURANCE.is_pre_tax

    def test_summarize(self) -> None:
        summary = summarize_deductions(
            [
                Deduction(DeductionType.HEALTH_INSURANCE, D("100")),
                Deduction(DeductionType.LIFE_INSURANCE, D("10"), DeductionFrequency.MONTHLY),
                Deduction(DeductionType.TRADITIONAL_401K, D("500")),
                Deduction(DeductionType.ROTH_401K, D("1000"), DeductionFrequency.ANNUAL),
            ],
            employer_match=D("4000"),
            vesting_percentage=D("0.5"),
        )
        assert summary.pre_tax == D("2600")
        assert summary.post_tax == D("120")
        assert summary.retirement.traditional == D("13000")
        assert summary.retirement.roth == D("1000")
        assert summary.retirement.vested_employer_match == D("2000")
        assert summary.total == D("16720")

    def test_empty_summary(self) -> None:
        summary = summarize_deductions([])
        assert summary.total == 0

    def test_apply_to_input(self) -> None:
        summary = summarize_deductions(
            [
                Deduction(DeductionType.FSA, D("1200"), DeductionFrequency.ANNUAL),
                Deduction(DeductionType.ROTH_401K, D("6000"), DeductionFrequency.ANNUAL),
            ]
        )
        inp = apply_deductions(default_input(), summary)
        assert inp.pre_tax_deductions == D("1200")
        assert inp.roth_retirement == D("6000")
        assert inp.traditional_retirement == 0
        assert inp.jurisdiction is Jurisdiction.CALIFORNIA

    def test_retirement_totals(self) -> None:
        contributions = RetirementContributions(
            traditional=D("10000"), roth=D("5000"), employer_match=D("3000")
        )
        assert contributions.total_employee_contributions == D("15000")
        assert contributions.total_with_match == D("18000")


class TestHouseholdSplit:
    def test_proportional(self) -> None:
        split = calculate_split(D("8000"), D("2000"), D("1000"))
        assert split.primary_ratio == D("0.8")
        assert split.partner_ratio == D("0.2")
        assert split.primary_monthly == D("800")
        assert split.partner_monthly == D("200")
        assert split.primary_percent == D("80")

    def test_shares_sum_to_expense(self) -> None:
        split = calculate_split(D("7000"), D("3000"), D("2500"))
        assert split.primary_monthly + split.partner_monthly == split.total_monthly

    def test_equal(self) -> None:
        split = calculate_split(D("9000"), D("1000"), D("1000"), SplitMethod.EQUAL)
        assert split.primary_monthly == D("500")

    def test_zero_combined_income_splits_evenly(self) -> None:
        split = calculate_split(D("0"), D("0"), D("1000"))
        assert split.primary_ratio == D("0.5")
        assert split.partner_monthly == D("500")

    def test_custom(self) -> None:
        split = calculate_split(D("1"), D("1"), D("1000"), SplitMethod.CUSTOM, D("0.7"))
        assert split.primary_monthly == D("700")
        assert split.partner_ratio == D("0.3")

    @pytest.mark.parametrize("ratio", [None, D("-0.1"), D("1.5")])
    def test_custom_ratio_validated(self, ratio: Decimal | None) -> None:
        with pytest.raises(ValueError, match="ratio"):
            calculate_split(D("1"), D("1"), D("1000"), SplitMethod.CUSTOM, ratio)

    def test_split_household(self) -> None:
        household = Household(
            partner=PartnerProfile(name="Sam", net_income=D("3000")),
            shared_expenses_monthly=D("2000"),
        )
        split = split_household(D("9000"), household)
        assert split.primary_monthly == D("1500")

    def test_household_without_partner(self) -> None:
        split = split_household(D("5000"), Household(shared_expenses_monthly=D("100")))
        assert split.primary_ratio == 1
        assert split.partner_monthly == 0
