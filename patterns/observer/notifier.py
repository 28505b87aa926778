"""
Notifier - the capability every proxy, mediator and command is built on.
"""
from typing import Any, Optional, TYPE_CHECKING
from core.interfaces.multicore_interfaces import INotifier
from core.exceptions.multicore_exceptions import NotifierNotInitializedError
from core.registry import MultitonRegistry

if TYPE_CHECKING:
    from patterns.facade.facade import Facade


class Notifier(INotifier):
    """
    Base for actors that publish notifications through their core's facade.

    A notifier learns its multiton key from the registry it is registered
    with (or the controller that built it), so the facade is unavailable
    from inside a constructor. Override initialize_notifier to act as soon
    as the key is known.
    """

    _multiton_key: Optional[str] = None
    _registry: Optional[MultitonRegistry] = None

    def initialize_notifier(self, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        self._multiton_key = key
        self._registry = registry

    @property
    def multiton_key(self) -> Optional[str]:
        return self._multiton_key

    @property
    def registry(self) -> Optional[MultitonRegistry]:
        return self._registry

    @property
    def facade(self) -> "Facade":
        """Facade of the bound core; raises until initialize_notifier has run"""
        if self._multiton_key is None:
            raise NotifierNotInitializedError(type(self).__name__)

        from patterns.facade.facade import Facade
        return Facade.get_instance(self._multiton_key, registry=self._registry)

    async def send_notification(self, name: str, body: Any = None, type: Optional[str] = None) -> None:
        """Create and send a notification through the bound core"""
        await self.facade.send_notification(name, body, type)
