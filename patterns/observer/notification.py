"""
Notification - the message carried by the bus.
"""
from typing import Any, Optional
from core.interfaces.multicore_interfaces import INotification


class Notification(INotification):
    """
    A named message with an optional body and type.

    The name is fixed at construction; body and type can be replaced so a
    notification may be reused. The bus dispatches on the name only.
    """

    def __init__(self, name: str, body: Any = None, type: Optional[str] = None):
        self._name = name
        self._body = body
        self._type = type

    @property
    def name(self) -> str:
        return self._name

    @property
    def body(self) -> Any:
        return self._body

    @body.setter
    def body(self, body: Any):
        self._body = body

    @property
    def type(self) -> Optional[str]:
        return self._type

    @type.setter
    def type(self, type: Optional[str]):
        self._type = type

    def __str__(self) -> str:
        message = f"Notification Name: {self._name}"
        message += f"\nBody:{'None' if self._body is None else self._body}"
        message += f"\nType:{'None' if self._type is None else self._type}"
        return message

    def __repr__(self) -> str:
        return f"Notification(name={self._name!r}, body={self._body!r}, type={self._type!r})"
