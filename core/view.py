"""
View - per-core mediator registry and notification bus.
CRITICAL: delivery is sequential in subscription order and iterates over a snapshot.
"""
from typing import Any, Dict, List, Optional
from .interfaces.multicore_interfaces import IView, IMediator, IObserver, INotification
from .registry import MultitonMixin, MultitonRegistry
from patterns.observer.observer import Observer
from utils.logger import get_bus_logger

logger = get_bus_logger()


class View(MultitonMixin, IView):
    """
    Routes notifications to observers and keeps the mediators of one core.

    Observer lists are keyed by notification name. A name whose list
    becomes empty is dropped from the map, so presence of a name means
    somebody is listening.
    """

    MULTITON_KIND = "view"

    def __init__(self, key: str, registry: Optional[MultitonRegistry] = None):
        self._registry = self._bind_multiton(key, registry)
        self._multiton_key = key
        self._mediator_map: Dict[str, IMediator] = {}
        self._observer_map: Dict[str, List[IObserver]] = {}

        self.initialize_view()

    def initialize_view(self) -> None:
        """Hook for subclasses; called once at the end of construction"""
        pass

    @property
    def multiton_key(self) -> str:
        return self._multiton_key

    # Observers -----------------------------------------------------------
    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        """Append observer to the list for notification_name"""
        observers = self._observer_map.get(notification_name)
        if observers is None:
            self._observer_map[notification_name] = [observer]
        else:
            observers.append(observer)

    def remove_observer(self, notification_name: str, notify_context: Any) -> None:
        """Remove the last observer registered with notify_context, if any"""
        observers = self._observer_map.get(notification_name)
        if observers is None:
            return

        for index in range(len(observers) - 1, -1, -1):
            if observers[index].compare_notify_context(notify_context):
                del observers[index]
                break

        if not observers:
            del self._observer_map[notification_name]

    def has_observers(self, notification_name: str) -> bool:
        return notification_name in self._observer_map

    async def notify_observers(self, notification: INotification) -> None:
        """
        Deliver notification to every observer of its name, one at a time.

        Observers added or removed while the notification is in flight do not
        change who receives it. An exception from an observer stops delivery
        and propagates to the caller.
        """
        observers = self._observer_map.get(notification.name)
        if observers is None:
            return

        snapshot = list(observers)
        logger.debug(f"Notifying {len(snapshot)} observer(s) of '{notification.name}'",
                     extra={'core': self._multiton_key})
        for observer in snapshot:
            await observer.notify_observer(notification)

    # Mediators -----------------------------------------------------------
    def register_mediator(self, mediator: IMediator) -> None:
        """Register mediator and subscribe it to its notification interests"""
        name = mediator.mediator_name

        # Re-registration requires remove_mediator first
        if name in self._mediator_map:
            logger.debug(f"Mediator '{name}' already registered, ignoring",
                         extra={'core': self._multiton_key})
            return

        mediator.initialize_notifier(self._multiton_key, self._registry)
        self._mediator_map[name] = mediator

        interests = mediator.list_notification_interests()
        if interests:
            # One shared observer so removal can match it under every interest
            observer = Observer(mediator.handle_notification, mediator)
            for interest in interests:
                self.register_observer(interest, observer)

        mediator.on_register()

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self._mediator_map.get(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return mediator_name in self._mediator_map

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        """Unsubscribe and drop the named mediator, returning it"""
        mediator = self._mediator_map.get(mediator_name)
        if mediator is None:
            return None

        for interest in mediator.list_notification_interests() or []:
            self.remove_observer(interest, mediator)

        del self._mediator_map[mediator_name]
        mediator.on_remove()
        return mediator

    @classmethod
    def remove_view(cls, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        """Forget the View for key"""
        cls._remove_instance(key, registry)
