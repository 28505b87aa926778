"""
Proxy - base class for named data holders registered with the Model.
"""
from typing import Any, Optional
from core.interfaces.multicore_interfaces import IProxy
from patterns.observer.notifier import Notifier


class Proxy(Notifier, IProxy):
    """Named data holder; subclass and override on_register/on_remove as needed"""

    NAME = "Proxy"

    def __init__(self, proxy_name: Optional[str] = None, data: Any = None):
        self._proxy_name = proxy_name if proxy_name is not None else self.NAME
        self._data = data

    @property
    def proxy_name(self) -> str:
        return self._proxy_name

    @property
    def data(self) -> Any:
        return self._data

    @data.setter
    def data(self, data: Any):
        self._data = data

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass
