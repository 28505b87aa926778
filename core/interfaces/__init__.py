"""
Multicore interfaces module.
All contracts for core actors and their collaborators.
"""

from .multicore_interfaces import (
    INotification,
    IObserver,
    INotifier,
    ICommand,
    CommandFactory,
    IProxy,
    IMediator,
    IModel,
    IView,
    IController,
    IFacade
)

__all__ = [
    "INotification",
    "IObserver",
    "INotifier",
    "ICommand",
    "CommandFactory",
    "IProxy",
    "IMediator",
    "IModel",
    "IView",
    "IController",
    "IFacade"
]
