"""
Notification broadcast to hospital departments.
"""

from typing import Callable, Iterable, List, Optional

from ..utils.logger import get_logger

Listener = Callable[[str], None]

CURRENCY_SYMBOL = "₹"

ADMIN_PREFIX = "ADMIN ALERT: "
BILLING_PREFIX = "BILLING DEPARTMENT: "
MEDICAL_TEAM_PREFIX = "MEDICAL TEAM: "


def format_amount(amount: float) -> str:
    """
    Format a bill amount for display.

    Whole amounts are shown without a fractional part (2100.0 -> "2100").

    Args:
        amount: Amount to format

    Returns:
        Display string without currency symbol
    """
    if float(amount).is_integer():
        return str(int(amount))
    return repr(float(amount))


def format_notification(name: str, amount: float) -> str:
    return f"Patient {name} admitted. Final bill amount {CURRENCY_SYMBOL}{format_amount(amount)}"


def make_listener(prefix: str, write: Callable[[str], None]) -> Listener:
    """
    Create a listener that writes each message as one prefixed line.

    Args:
        prefix: Text written before the message
        write: Callable that emits a single line of output

    Returns:
        Listener callable
    """
    def listener(message: str) -> None:
        write(prefix + message)

    return listener


def default_listeners(write: Callable[[str], None]) -> List[Listener]:
    """Admin, billing department and medical team listeners, in that order."""
    return [
        make_listener(ADMIN_PREFIX, write),
        make_listener(BILLING_PREFIX, write),
        make_listener(MEDICAL_TEAM_PREFIX, write),
    ]


class HospitalNotifier:
    """Broadcast messages to a fixed, ordered set of listeners."""

    def __init__(self, listeners: Optional[Iterable[Listener]] = None):
        """
        Initialize notifier.

        Args:
            listeners: Listeners in the order they are invoked
        """
        self._listeners = tuple(listeners or ())
        self.logger = get_logger(self.__class__.__name__)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self, message: str) -> None:
        """
        Deliver a message to every listener in registration order.

        Args:
            message: Notification text
        """
        self.logger.debug(f"Broadcasting to {self.listener_count} listeners: {message}")
        for listener in self._listeners:
            listener(message)
