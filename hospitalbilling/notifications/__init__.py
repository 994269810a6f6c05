"""
Department notifications for completed bills.
"""

from .notifier import (
    HospitalNotifier,
    Listener,
    default_listeners,
    format_amount,
    format_notification,
    make_listener,
)

__all__ = [
    'HospitalNotifier',
    'Listener',
    'default_listeners',
    'format_amount',
    'format_notification',
    'make_listener',
]
