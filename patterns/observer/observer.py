"""
Observer - a callback plus the context it is called on behalf of.
"""
from typing import Any, Callable
from core.interfaces.multicore_interfaces import IObserver, INotification
from utils.async_utils import maybe_await


class Observer(IObserver):
    """
    Subscription record held by the View.

    Observers are matched for removal by the identity of their context, never
    by the callback, so one context can strip its own subscription without
    holding on to the observer object.
    """

    def __init__(self, notify_method: Callable[[INotification], Any], notify_context: Any):
        self._notify_method = notify_method
        self._notify_context = notify_context

    @property
    def notify_method(self) -> Callable[[INotification], Any]:
        return self._notify_method

    @notify_method.setter
    def notify_method(self, notify_method: Callable[[INotification], Any]):
        self._notify_method = notify_method

    @property
    def notify_context(self) -> Any:
        return self._notify_context

    @notify_context.setter
    def notify_context(self, notify_context: Any):
        self._notify_context = notify_context

    async def notify_observer(self, notification: INotification) -> None:
        """Call the notify method, waiting for it if it suspends"""
        if self._notify_method is None:
            return
        await maybe_await(self._notify_method(notification))

    def compare_notify_context(self, obj: Any) -> bool:
        return obj is self._notify_context

    def __repr__(self) -> str:
        method = getattr(self._notify_method, '__qualname__', self._notify_method)
        return f"Observer(method={method}, context={self._notify_context!r})"
