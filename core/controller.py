"""
Controller - per-core mapping of notification names to command factories.
"""
from typing import Dict, Optional
from .interfaces.multicore_interfaces import IController, IView, INotification, CommandFactory
from .registry import MultitonMixin, MultitonRegistry
from .view import View
from patterns.observer.observer import Observer
from utils.async_utils import maybe_await
from utils.logger import get_command_logger

logger = get_command_logger()


class Controller(MultitonMixin, IController):
    """
    Turns notifications into command executions.

    The controller subscribes itself to the View once per mapped name and
    builds a fresh command from the registered factory for every dispatch.
    """

    MULTITON_KIND = "controller"

    def __init__(self, key: str, registry: Optional[MultitonRegistry] = None):
        self._registry = self._bind_multiton(key, registry)
        self._multiton_key = key
        self._command_map: Dict[str, CommandFactory] = {}
        self._view: Optional[IView] = None

        self.initialize_controller()

    def initialize_controller(self) -> None:
        """Attach to this core's View; override to substitute another View first"""
        if self._view is None:
            self._view = View.get_instance(self._multiton_key, registry=self._registry)

    @property
    def multiton_key(self) -> str:
        return self._multiton_key

    async def execute_command(self, notification: INotification) -> None:
        """Build and run the command mapped to the notification's name"""
        factory = self._command_map.get(notification.name)
        if factory is None:
            return

        command = factory()
        command.initialize_notifier(self._multiton_key, self._registry)
        logger.debug(f"Executing {type(command).__name__} for '{notification.name}'",
                     extra={'core': self._multiton_key})
        await maybe_await(command.execute(notification))

    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        """Map notification_name to command_factory, replacing any previous mapping"""
        if notification_name not in self._command_map:
            self._view.register_observer(
                notification_name, Observer(self.execute_command, self))

        self._command_map[notification_name] = command_factory

    def has_command(self, notification_name: str) -> bool:
        return notification_name in self._command_map

    def remove_command(self, notification_name: str) -> None:
        if notification_name not in self._command_map:
            return

        self._view.remove_observer(notification_name, self)
        del self._command_map[notification_name]

    @classmethod
    def remove_controller(cls, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        """Forget the Controller for key"""
        cls._remove_instance(key, registry)
