"""
Bill calculation for admitted patients.
"""

from ..utils.logger import get_logger
from .models import (
    BASE_CHARGES,
    BillResult,
    BillingAdjustment,
    PatientCategory,
    PatientRecord,
)


def identity(amount: float) -> float:
    """Return the amount unchanged."""
    return amount


def insurance_discount(amount: float) -> float:
    """Apply the 30% insurance discount."""
    return amount * BillingCalculator.INSURANCE_RATE


class BillingCalculator:
    """Calculate patient bills from category charges and adjustments."""

    # Added on top of the emergency base charge, not stored in it
    EMERGENCY_SURCHARGE = 1500

    # Share of the bill an insured patient pays
    INSURANCE_RATE = 0.7

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def base_charge(self, category: PatientCategory) -> float:
        """
        Get the base charge for a patient category.

        Args:
            category: Patient category

        Returns:
            Base charge before surcharge or discount
        """
        return BASE_CHARGES[category]

    def calculate_bill(self, record: PatientRecord) -> float:
        """
        Calculate the unadjusted bill for a patient.

        Args:
            record: Patient record

        Returns:
            Bill amount before any billing adjustment
        """
        if record.category == PatientCategory.EMERGENCY:
            return record.base_charge + self.EMERGENCY_SURCHARGE
        return record.base_charge

    def select_adjustment(self, category: PatientCategory) -> BillingAdjustment:
        if category == PatientCategory.INSURANCE:
            return BillingAdjustment.INSURANCE_DISCOUNT
        return BillingAdjustment.IDENTITY

    def apply_adjustment(self, amount: float, adjustment: BillingAdjustment) -> float:
        """
        Apply a billing adjustment to an amount.

        Args:
            amount: Bill amount
            adjustment: Adjustment to apply

        Returns:
            Adjusted amount
        """
        if adjustment == BillingAdjustment.INSURANCE_DISCOUNT:
            return insurance_discount(amount)
        return identity(amount)

    def calculate(self, record: PatientRecord) -> BillResult:
        """
        Calculate the final bill for a patient.

        Args:
            record: Patient record

        Returns:
            BillResult with base and final amounts
        """
        base_bill = self.calculate_bill(record)
        adjustment = self.select_adjustment(record.category)
        final_bill = self.apply_adjustment(base_bill, adjustment)

        self.logger.info(f"Calculated bill for patient {record.patient_id}: "
                         f"Base {base_bill}, Adjustment {adjustment.value}, "
                         f"Final {final_bill}")

        return BillResult(
            record=record,
            base_bill=base_bill,
            adjustment=adjustment,
            final_bill=final_bill,
        )
