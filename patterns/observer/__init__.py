"""
Observer pattern package - notifications, observers and the notifier mixin.
"""
from .notification import Notification
from .observer import Observer
from .notifier import Notifier

__all__ = [
    'Notification',
    'Observer',
    'Notifier'
]
