"""
Facade - single entry point to one core and owner of its lifecycle.
CRITICAL: remove_core tears down Model, View and Controller before the Facade itself.
"""
from typing import Any, Optional
from core.interfaces.multicore_interfaces import (
    IFacade, IModel, IView, IController, IProxy, IMediator, INotification, CommandFactory
)
from core.registry import MultitonMixin, MultitonRegistry, get_registry
from core.model import Model
from core.view import View
from core.controller import Controller
from patterns.observer.notification import Notification
from patterns.observer.notifier import Notifier
from utils.logger import get_system_logger, log_core_event

logger = get_system_logger()


class Facade(MultitonMixin, Notifier, IFacade):
    """
    Composes the Model, View and Controller of one core.

    Subclasses register their commands, proxies and mediators by overriding
    the initializers below. Each initializer only creates its actor when the
    slot is still empty, so a subclass may assign its own implementation
    before delegating to the base version.
    """

    MULTITON_KIND = "facade"

    def __init__(self, key: str, registry: Optional[MultitonRegistry] = None):
        self._model: Optional[IModel] = None
        self._view: Optional[IView] = None
        self._controller: Optional[IController] = None

        registry = self._bind_multiton(key, registry)
        self.initialize_notifier(key, registry)

        log_core_event(logger, key, "Core created", facade=type(self).__name__)
        self.initialize_facade()

    def initialize_facade(self) -> None:
        self.initialize_model()
        self.initialize_controller()
        self.initialize_view()

    def initialize_model(self) -> None:
        if self._model is None:
            self._model = Model.get_instance(self.multiton_key, registry=self.registry)

    def initialize_controller(self) -> None:
        if self._controller is None:
            self._controller = Controller.get_instance(self.multiton_key, registry=self.registry)

    def initialize_view(self) -> None:
        if self._view is None:
            self._view = View.get_instance(self.multiton_key, registry=self.registry)

    @property
    def facade(self) -> "Facade":
        return self

    # Commands ------------------------------------------------------------
    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        self._controller.register_command(notification_name, command_factory)

    def remove_command(self, notification_name: str) -> None:
        self._controller.remove_command(notification_name)

    def has_command(self, notification_name: str) -> bool:
        return self._controller.has_command(notification_name)

    # Proxies -------------------------------------------------------------
    def register_proxy(self, proxy: IProxy) -> None:
        self._model.register_proxy(proxy)

    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        return self._model.retrieve_proxy(proxy_name)

    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        if self._model is None:
            return None
        return self._model.remove_proxy(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return self._model.has_proxy(proxy_name)

    # Mediators -----------------------------------------------------------
    def register_mediator(self, mediator: IMediator) -> None:
        if self._view is not None:
            self._view.register_mediator(mediator)

    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        return self._view.retrieve_mediator(mediator_name)

    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        if self._view is None:
            return None
        return self._view.remove_mediator(mediator_name)

    def has_mediator(self, mediator_name: str) -> bool:
        return self._view.has_mediator(mediator_name)

    # Notifications -------------------------------------------------------
    async def notify_observers(self, notification: INotification) -> None:
        if self._view is not None:
            await self._view.notify_observers(notification)

    async def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Create a notification and deliver it to this core's observers"""
        await self.notify_observers(Notification(name, body, type))

    # Core lifecycle ------------------------------------------------------
    @classmethod
    def has_core(cls, key: str, registry: Optional[MultitonRegistry] = None) -> bool:
        return get_registry(registry).has(cls.MULTITON_KIND, key)

    @classmethod
    def remove_core(cls, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        """Tear down every actor of the core for key; unknown keys are ignored"""
        registry = get_registry(registry)
        if not registry.has(cls.MULTITON_KIND, key):
            return

        Model.remove_model(key, registry)
        View.remove_view(key, registry)
        Controller.remove_controller(key, registry)
        registry.remove(cls.MULTITON_KIND, key)

        log_core_event(logger, key, "Core removed")
