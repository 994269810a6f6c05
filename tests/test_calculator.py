"""
Unit tests for bill calculation
"""

import pytest

from hospitalbilling.billing import (
    BillingAdjustment,
    BillingCalculator,
    PatientCategory,
    PatientRecord,
    identity,
    insurance_discount,
)


@pytest.fixture
def calculator():
    return BillingCalculator()


class TestBaseCharge:

    @pytest.mark.parametrize("category, expected", [
        (PatientCategory.GENERAL, 2000),
        (PatientCategory.EMERGENCY, 5000),
        (PatientCategory.INSURANCE, 3000),
    ])
    def test_base_charge_per_category(self, calculator, category, expected):
        assert calculator.base_charge(category) == expected


class TestCalculateBill:

    def test_general_bill_is_base_charge(self, calculator):
        record = PatientRecord.create(1, "Meera", PatientCategory.GENERAL)
        assert calculator.calculate_bill(record) == 2000

    def test_emergency_bill_adds_surcharge(self, calculator):
        record = PatientRecord.create(7, "Ravi", PatientCategory.EMERGENCY)
        assert record.base_charge == 5000
        assert calculator.calculate_bill(record) == record.base_charge + 1500 == 6500

    def test_insurance_bill_is_base_charge_before_discount(self, calculator):
        record = PatientRecord.create(101, "Asha", PatientCategory.INSURANCE)
        assert calculator.calculate_bill(record) == 3000


class TestAdjustments:

    def test_identity_returns_amount(self):
        assert identity(1234.5) == 1234.5

    def test_insurance_discount_is_seventy_percent(self):
        assert insurance_discount(3000.0) == 3000.0 * 0.7
        assert insurance_discount(1000.0) == 700.0

    def test_discount_keeps_float_artifacts(self):
        # 0.1 * 0.7 is not exactly 0.07 in binary floating point
        assert insurance_discount(0.1) == 0.1 * 0.7
        assert insurance_discount(0.1) != 0.07

    @pytest.mark.parametrize("category, expected", [
        (PatientCategory.GENERAL, BillingAdjustment.IDENTITY),
        (PatientCategory.EMERGENCY, BillingAdjustment.IDENTITY),
        (PatientCategory.INSURANCE, BillingAdjustment.INSURANCE_DISCOUNT),
    ])
    def test_select_adjustment(self, calculator, category, expected):
        assert calculator.select_adjustment(category) == expected

    def test_apply_adjustment_branches(self, calculator):
        assert calculator.apply_adjustment(6500.0, BillingAdjustment.IDENTITY) == 6500.0
        assert calculator.apply_adjustment(3000.0, BillingAdjustment.INSURANCE_DISCOUNT) == 2100.0


class TestCalculate:

    def test_general_final_bill(self, calculator):
        result = calculator.calculate(PatientRecord.create(1, "Meera", PatientCategory.GENERAL))
        assert result.base_bill == 2000
        assert result.adjustment == BillingAdjustment.IDENTITY
        assert result.final_bill == 2000

    def test_emergency_final_bill(self, calculator):
        result = calculator.calculate(PatientRecord.create(7, "Ravi", PatientCategory.EMERGENCY))
        assert result.final_bill == 6500

    def test_insurance_final_bill(self, calculator):
        result = calculator.calculate(PatientRecord.create(101, "Asha", PatientCategory.INSURANCE))
        assert result.base_bill == 3000
        assert result.adjustment == BillingAdjustment.INSURANCE_DISCOUNT
        assert isinstance(result.final_bill, float)
        assert result.final_bill == 2100.0

    def test_calculate_logs_result(self, calculator, caplog):
        caplog.set_level("INFO", logger="hospitalbilling")
        calculator.calculate(PatientRecord.create(7, "Ravi", PatientCategory.EMERGENCY))
        assert "Final 6500" in caplog.text

    def test_to_dict(self, calculator):
        result = calculator.calculate(PatientRecord.create(101, "Asha", PatientCategory.INSURANCE))
        data = result.to_dict()
        assert data['patient_id'] == 101
        assert data['category'] == "Insurance"
        assert data['adjustment'] == "insurance_discount"
        assert data['final_bill'] == 2100.0
