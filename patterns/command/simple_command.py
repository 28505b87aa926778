"""
SimpleCommand - the leaf unit of work.
"""
from core.interfaces.multicore_interfaces import ICommand, INotification
from patterns.observer.notifier import Notifier


class SimpleCommand(Notifier, ICommand):
    """Override execute with the business logic; the base does nothing"""

    async def execute(self, notification: INotification) -> None:
        pass
