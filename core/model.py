"""
Model - per-core registry of named proxies.
"""
from typing import Dict, Optional
from .interfaces.multicore_interfaces import IModel, IProxy
from .registry import MultitonMixin, MultitonRegistry
from utils.logger import get_bus_logger

logger = get_bus_logger()


class Model(MultitonMixin, IModel):
    """
    Holds the proxies of one core, looked up by name.

    Registering a proxy under a name already in use replaces the stored
    proxy; the displaced one is not notified.
    """

    MULTITON_KIND = "model"

    def __init__(self, key: str, registry: Optional[MultitonRegistry] = None):
        self._registry = self._bind_multiton(key, registry)
        self._multiton_key = key
        self._proxy_map: Dict[str, IProxy] = {}

        self.initialize_model()

    def initialize_model(self) -> None:
        """Hook for subclasses; called once at the end of construction"""
        pass

    @property
    def multiton_key(self) -> str:
        return self._multiton_key

    def register_proxy(self, proxy: IProxy) -> None:
        proxy.initialize_notifier(self._multiton_key, self._registry)

        name = proxy.proxy_name
        if name in self._proxy_map:
            logger.debug(f"Proxy '{name}' replaced",
                         extra={'core': self._multiton_key})
        self._proxy_map[name] = proxy
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> Optional[IProxy]:
        return self._proxy_map.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self._proxy_map

    def remove_proxy(self, proxy_name: str) -> Optional[IProxy]:
        proxy = self._proxy_map.pop(proxy_name, None)
        if proxy is not None:
            proxy.on_remove()
        return proxy

    @classmethod
    def remove_model(cls, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        """Forget the Model for key"""
        cls._remove_instance(key, registry)
