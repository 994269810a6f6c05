"""
Hospital billing console application.
"""

from .billing import BillingCalculator, BillResult, PatientCategory, PatientRecord
from .notifications import HospitalNotifier
from .session import BillingSession

__version__ = "1.0.0"

__all__ = [
    'BillingCalculator',
    'BillResult',
    'BillingSession',
    'HospitalNotifier',
    'PatientCategory',
    'PatientRecord',
]
