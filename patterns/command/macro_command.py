"""
MacroCommand - a command composed of an ordered list of sub-command factories.
CRITICAL: parallel mode settles every sub-command before reporting failures,
sequential mode stops at the first failure.
"""
import asyncio
from typing import List, Tuple
from core.interfaces.multicore_interfaces import ICommand, INotification, CommandFactory
from core.exceptions.multicore_exceptions import MacroCommandError
from patterns.observer.notifier import Notifier
from utils.async_utils import maybe_await
from utils.logger import get_command_logger, log_error_with_context

logger = get_command_logger()


class MacroCommand(Notifier, ICommand):
    """
    Runs its sub-commands against the same notification.

    Sub-commands are added in initialize_macro_command (or after construction
    with add_sub_command) and run in the order they were added. Every
    sub-command is built fresh from its factory and bound to this command's
    core before it runs.

    Parallel mode (the default) starts all sub-commands together and waits
    for all of them; if any failed, MacroCommandError is raised afterwards
    with every failure. Sequential mode awaits each sub-command before
    building the next and lets the first exception propagate.
    """

    def __init__(self, sequential: bool = False):
        self._sequential = sequential
        self._sub_commands: List[CommandFactory] = []
        self.initialize_macro_command()

    def initialize_macro_command(self) -> None:
        """Hook for subclasses to add their sub-commands"""
        pass

    @property
    def sequential(self) -> bool:
        return self._sequential

    @property
    def sub_commands(self) -> Tuple[CommandFactory, ...]:
        return tuple(self._sub_commands)

    def add_sub_command(self, command_factory: CommandFactory) -> None:
        self._sub_commands.append(command_factory)

    async def execute(self, notification: INotification) -> None:
        sub_commands = list(self._sub_commands)

        if self._sequential:
            await self._execute_sequential(sub_commands, notification)
        else:
            await self._execute_parallel(sub_commands, notification)

    async def _execute_sequential(self, sub_commands: List[CommandFactory], notification: INotification) -> None:
        for index, factory in enumerate(sub_commands):
            try:
                await self._run_sub_command(factory, notification)
            except Exception as e:
                logger.warning(
                    f"{type(self).__name__} aborted at sub-command {index + 1}/{len(sub_commands)}: {e}",
                    extra={'core': self.multiton_key})
                raise

    async def _execute_parallel(self, sub_commands: List[CommandFactory], notification: INotification) -> None:
        results = await asyncio.gather(
            *(self._run_sub_command(factory, notification) for factory in sub_commands),
            return_exceptions=True
        )

        failures = [(factory, result) for factory, result in zip(sub_commands, results)
                    if isinstance(result, BaseException)]
        if not failures:
            return

        for factory, error in failures:
            log_error_with_context(logger, error, {
                "macro_command": type(self).__name__,
                "sub_command": getattr(factory, '__qualname__', repr(factory)),
                "notification": notification.name,
                "core": self.multiton_key
            })
        raise MacroCommandError(failures, total=len(sub_commands))

    async def _run_sub_command(self, factory: CommandFactory, notification: INotification) -> None:
        command: ICommand = factory()
        command.initialize_notifier(self.multiton_key, self.registry)
        await maybe_await(command.execute(notification))
