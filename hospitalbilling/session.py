"""
Interactive billing session: read a patient from the console, bill them,
and notify the hospital departments.
"""

import sys
from typing import Optional, TextIO

from .billing.calculator import BillingCalculator
from .billing.models import BillResult, PatientCategory, PatientRecord
from .notifications.notifier import (
    CURRENCY_SYMBOL,
    HospitalNotifier,
    default_listeners,
    format_amount,
    format_notification,
)
from .utils.logger import get_logger
from .utils.validator import InputValidator

INVALID_CATEGORY_MESSAGE = "Invalid patient type selected."
COMPLETION_MESSAGE = "Process Completed Successfully."


class BillingSession:
    """Run one billing pass over the given input and output streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        calculator: Optional[BillingCalculator] = None,
        notifier: Optional[HospitalNotifier] = None
    ):
        """
        Initialize billing session.

        Args:
            stdin: Input stream (defaults to sys.stdin)
            stdout: Output stream (defaults to sys.stdout)
            calculator: Bill calculator
            notifier: Notifier; defaults to the admin, billing and medical team listeners
        """
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.logger = get_logger(self.__class__.__name__)

        self.validator = InputValidator()
        self.calculator = calculator or BillingCalculator()
        self.notifier = notifier or HospitalNotifier(default_listeners(self._write))

    def _write(self, line: str = "") -> None:
        print(line, file=self.stdout)

    def _read_line(self) -> str:
        # EOF reads as an empty line
        return self.stdin.readline().rstrip('\r\n')

    def read_patient(self) -> Optional[PatientRecord]:
        """
        Prompt for patient details.

        Returns:
            Patient record, or None if the patient type is not on the menu

        Raises:
            ValueError: If the patient ID or the type choice is not an integer
        """
        self._write("Enter Patient ID:")
        patient_id = self.validator.parse_patient_id(self._read_line())

        self._write("Enter Patient Name:")
        name = self._read_line()

        self._write()
        self._write("Select Patient Type:")
        for category in PatientCategory:
            self._write(f"{category.choice}. {category.menu_text}")

        choice = self.validator.parse_category_choice(self._read_line())
        category = PatientCategory.from_choice(choice)
        if category is None:
            self.logger.warning(f"Rejected patient type choice: {choice}")
            return None

        return PatientRecord.create(patient_id, name, category)

    def print_bill(self, result: BillResult) -> None:
        record = result.record
        self._write()
        self._write("----- BILL DETAILS -----")
        self._write(f"Patient ID   : {record.patient_id}")
        self._write(f"Patient Name : {record.name}")
        self._write(f"Patient Type : {record.category.label}")
        self._write(f"Final Bill   : {CURRENCY_SYMBOL}{format_amount(result.final_bill)}")

    def run(self) -> Optional[BillResult]:
        """
        Run the session.

        Returns:
            The computed bill, or None if the patient type was invalid
        """
        self.logger.info("Billing session started")

        record = self.read_patient()
        if record is None:
            self._write(INVALID_CATEGORY_MESSAGE)
            return None

        result = self.calculator.calculate(record)
        self.print_bill(result)

        self.notifier.notify(format_notification(record.name, result.final_bill))

        self._write()
        self._write(COMPLETION_MESSAGE)

        self.logger.debug(f"Billing session finished: {result.to_dict()}")
        return result
