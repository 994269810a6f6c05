"""
Data models for hospital billing.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional
from enum import Enum


class PatientCategory(Enum):
    """Categories of admitted patients."""
    GENERAL = "General"
    EMERGENCY = "Emergency"
    INSURANCE = "Insurance"

    @property
    def choice(self) -> int:
        """Menu number used to select this category."""
        return _CHOICES[self]

    @property
    def label(self) -> str:
        """Display label shown on the bill, e.g. ``GeneralPatient``."""
        return f"{self.value}Patient"

    @property
    def menu_text(self) -> str:
        return f"{self.value} Patient"

    @classmethod
    def from_choice(cls, choice: int) -> Optional['PatientCategory']:
        """
        Look up a category by its menu number.

        Args:
            choice: Number entered by the user

        Returns:
            Matching category, or None if the number is not on the menu
        """
        for category, number in _CHOICES.items():
            if number == choice:
                return category
        return None


_CHOICES = {
    PatientCategory.GENERAL: 1,
    PatientCategory.EMERGENCY: 2,
    PatientCategory.INSURANCE: 3,
}


class BillingAdjustment(Enum):
    """Adjustments applied to a computed bill."""
    IDENTITY = "identity"
    INSURANCE_DISCOUNT = "insurance_discount"


# Base charge per category
BASE_CHARGES = {
    PatientCategory.GENERAL: 2000.0,
    PatientCategory.EMERGENCY: 5000.0,
    PatientCategory.INSURANCE: 3000.0,
}


@dataclass(frozen=True)
class PatientRecord:
    """Identity and category of the patient being billed."""

    patient_id: int
    name: str
    category: PatientCategory
    base_charge: float

    @classmethod
    def create(cls, patient_id: int, name: str, category: PatientCategory) -> 'PatientRecord':
        """Build a record with the base charge fixed by its category."""
        return cls(
            patient_id=patient_id,
            name=name,
            category=category,
            base_charge=BASE_CHARGES[category],
        )


@dataclass(frozen=True)
class BillResult:
    """Container for a computed bill."""

    record: PatientRecord
    base_bill: float
    adjustment: BillingAdjustment
    final_bill: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            'patient_id': self.record.patient_id,
            'patient_name': self.record.name,
            'category': self.record.category.value,
            'base_charge': self.record.base_charge,
            'base_bill': self.base_bill,
            'adjustment': self.adjustment.value,
            'final_bill': self.final_bill,
        }
