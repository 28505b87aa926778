"""
Multicore interfaces - contracts for every actor plugged into a core.
Methods that may suspend are coroutines; lookups return None when absent.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from core.registry import MultitonRegistry


class INotification(ABC):
    """A named message with optional body and type"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Notification name used for dispatch"""
        pass

    @property
    @abstractmethod
    def body(self) -> Any:
        """Payload, if any"""
        pass

    @property
    @abstractmethod
    def type(self) -> Optional[str]:
        """Optional type discriminator"""
        pass


class IObserver(ABC):
    """Subscription of a callback, on behalf of a context, to one notification name"""

    @property
    @abstractmethod
    def notify_method(self) -> Callable[[INotification], Any]:
        pass

    @property
    @abstractmethod
    def notify_context(self) -> Any:
        pass

    @abstractmethod
    async def notify_observer(self, notification: INotification) -> None:
        """Invoke the callback and wait for it to complete"""
        pass

    @abstractmethod
    def compare_notify_context(self, obj: Any) -> bool:
        """Identity comparison against the notify context"""
        pass


class INotifier(ABC):
    """Capability shared by proxies, mediators and commands"""

    @abstractmethod
    def initialize_notifier(self, key: str, registry: Optional["MultitonRegistry"] = None) -> None:
        """Bind to the core identified by key"""
        pass

    @abstractmethod
    async def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Publish a notification through the bound core's facade"""
        pass


class ICommand(INotifier):
    """Unit of work instantiated fresh for each dispatch"""

    @abstractmethod
    async def execute(self, notification: INotification) -> None:
        pass


# Anything that builds a command without arguments; command classes qualify.
CommandFactory = Callable[[], ICommand]


class IProxy(INotifier):
    """Named data holder"""

    @property
    @abstractmethod
    def proxy_name(self) -> str:
        pass

    @abstractmethod
    def on_register(self) -> None:
        pass

    @abstractmethod
    def on_remove(self) -> None:
        pass


class IMediator(INotifier):
    """Named view adapter with notification interests"""

    @property
    @abstractmethod
    def mediator_name(self) -> str:
        pass

    @abstractmethod
    def list_notification_interests(self) -> List[str]:
        """Current interests; queried again when the mediator is removed"""
        pass

    @abstractmethod
    async def handle_notification(self, notification: INotification) -> None:
        pass

    @abstractmethod
    def on_register(self) -> None:
        pass

    @abstractmethod
    def on_remove(self) -> None:
        pass


class IModel(ABC):
    """Per-core proxy registry"""

    @abstractmethod
    def register_proxy(self, proxy: IProxy) -> None:
        pass

    @abstractmethod
    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        pass

    @abstractmethod
    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        pass

    @abstractmethod
    def has_proxy(self, proxy_name: str) -> bool:
        pass


class IView(ABC):
    """Per-core mediator registry and notification bus"""

    @abstractmethod
    def register_observer(self, notification_name: str, observer: IObserver) -> None:
        pass

    @abstractmethod
    def remove_observer(self, notification_name: str, notify_context: Any) -> None:
        pass

    @abstractmethod
    async def notify_observers(self, notification: INotification) -> None:
        pass

    @abstractmethod
    def register_mediator(self, mediator: IMediator) -> None:
        pass

    @abstractmethod
    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        pass

    @abstractmethod
    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        pass

    @abstractmethod
    def has_mediator(self, mediator_name: str) -> bool:
        pass


class IController(ABC):
    """Per-core notification name to command factory registry"""

    @abstractmethod
    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        pass

    @abstractmethod
    async def execute_command(self, notification: INotification) -> None:
        pass

    @abstractmethod
    def remove_command(self, notification_name: str) -> None:
        pass

    @abstractmethod
    def has_command(self, notification_name: str) -> bool:
        pass


class IFacade(INotifier):
    """Single entry point to one core's Model, View and Controller"""

    @abstractmethod
    def register_command(self, notification_name: str, command_factory: CommandFactory) -> None:
        pass

    @abstractmethod
    def remove_command(self, notification_name: str) -> None:
        pass

    @abstractmethod
    def has_command(self, notification_name: str) -> bool:
        pass

    @abstractmethod
    def register_proxy(self, proxy: IProxy) -> None:
        pass

    @abstractmethod
    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        pass

    @abstractmethod
    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        pass

    @abstractmethod
    def has_proxy(self, proxy_name: str) -> bool:
        pass

    @abstractmethod
    def register_mediator(self, mediator: IMediator) -> None:
        pass

    @abstractmethod
    def retrieve_mediator(self, mediator_name: str) -> Optional[IMediator]:
        pass

    @abstractmethod
    def remove_mediator(self, mediator_name: str) -> Optional[IMediator]:
        pass

    @abstractmethod
    def has_mediator(self, mediator_name: str) -> bool:
        pass

    @abstractmethod
    async def notify_observers(self, notification: INotification) -> None:
        pass
