"""
Bill calculation and patient data models.
"""

from .calculator import BillingCalculator, identity, insurance_discount
from .models import BillingAdjustment, BillResult, PatientCategory, PatientRecord

__all__ = [
    'BillingCalculator',
    'BillingAdjustment',
    'BillResult',
    'PatientCategory',
    'PatientRecord',
    'identity',
    'insurance_discount',
]
