"""
Mediator - base class for named view adapters registered with the View.
"""
from typing import Any, List, Optional
from core.interfaces.multicore_interfaces import IMediator, INotification
from patterns.observer.notifier import Notifier


class Mediator(Notifier, IMediator):
    """
    Adapts a view component to the bus.

    Subclasses return their interests from list_notification_interests and
    react in handle_notification. Interests are read again when the mediator
    is removed, so return the current set rather than a cached one.
    """

    NAME = "Mediator"

    def __init__(self, mediator_name: Optional[str] = None, view_component: Any = None):
        self._mediator_name = mediator_name if mediator_name is not None else self.NAME
        self._view_component = view_component

    @property
    def mediator_name(self) -> str:
        return self._mediator_name

    @property
    def view_component(self) -> Any:
        return self._view_component

    @view_component.setter
    def view_component(self, view_component: Any):
        self._view_component = view_component

    def list_notification_interests(self) -> List[str]:
        return []

    async def handle_notification(self, notification: INotification) -> None:
        pass

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass
