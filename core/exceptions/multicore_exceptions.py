"""
Multicore exceptions - all custom exceptions raised by the framework.
Absent proxies, mediators and commands are not errors; lookups return None.
"""
from datetime import datetime, timezone
from typing import Dict, Any, List, Tuple, Callable


class MulticoreError(Exception):
    """Base exception for all framework errors"""

    def __init__(self, message: str, error_code: str = None, context: Dict[str, Any] = None):
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            return f"[{self.error_code}] {base_msg}"
        return base_msg


class ConfigurationError(MulticoreError):
    """Raised when a core is wired incorrectly"""

    def __init__(self, message: str, config_key: str = "", error_code: str = "CONFIGURATION_ERROR"):
        super().__init__(message, error_code=error_code,
                         context={"config_key": config_key})
        self.config_key = config_key


class MultitonKeyError(ConfigurationError):
    """Raised when a second Model, View, Controller or Facade is built for a key"""

    def __init__(self, kind: str, key: str):
        message = f"{kind.capitalize()} instance for multiton key '{key}' already constructed"
        super().__init__(message, config_key=key, error_code="MULTITON_KEY_IN_USE")
        self.kind = kind
        self.key = key


class NotifierNotInitializedError(MulticoreError):
    """Raised when a notifier reaches for its facade before being bound to a core"""

    def __init__(self, notifier_name: str = ""):
        target = f" for {notifier_name}" if notifier_name else ""
        message = f"Multiton key{target} not yet initialized"
        super().__init__(message, error_code="NOTIFIER_NOT_INITIALIZED")
        self.notifier_name = notifier_name


class MacroCommandError(MulticoreError):
    """Raised after a parallel macro command settles with failed sub-commands"""

    def __init__(self, failures: List[Tuple[Callable, BaseException]], total: int = 0):
        message = f"{len(failures)} of {total or len(failures)} sub-commands failed: " + \
            "; ".join(f"{_factory_name(factory)}: {error!r}" for factory, error in failures)
        super().__init__(message, error_code="MACRO_COMMAND_FAILED")
        self.failures = failures
        self.total = total or len(failures)

    @property
    def errors(self) -> List[BaseException]:
        return [error for _, error in self.failures]


def _factory_name(factory: Callable) -> str:
    return getattr(factory, '__qualname__', None) or repr(factory)
