"""
Multiton registry - the container holding every core's Model, View, Controller and Facade.
One instance per kind and key; a second registration for a key is a wiring error.
"""
from typing import Any, Dict, List, Optional
from .exceptions.multicore_exceptions import MultitonKeyError
from utils.logger import get_system_logger, log_core_event

logger = get_system_logger()


class MultitonRegistry:
    """Per-key instance maps for the four core actors"""

    KINDS = ("model", "view", "controller", "facade")

    def __init__(self):
        self._instances: Dict[str, Dict[str, Any]] = {
            kind: {} for kind in self.KINDS}

    def register(self, kind: str, key: str, instance: Any) -> None:
        """Store instance for key, refusing to replace an existing one"""
        instances = self._slot(kind)
        if key in instances:
            logger.error(f"Duplicate {kind} construction for key '{key}'")
            raise MultitonKeyError(kind, key)

        instances[key] = instance
        logger.debug(f"{kind} registered for key '{key}'")

    def retrieve(self, kind: str, key: str) -> Optional[Any]:
        return self._slot(kind).get(key)

    def has(self, kind: str, key: str) -> bool:
        return key in self._slot(kind)

    def remove(self, kind: str, key: str) -> Optional[Any]:
        """Drop the instance for key; unknown keys are ignored"""
        instance = self._slot(kind).pop(key, None)
        if instance is not None:
            logger.debug(f"{kind} removed for key '{key}'")
        return instance

    def keys(self, kind: str) -> List[str]:
        return list(self._slot(kind))

    def clear(self) -> None:
        """Forget every instance of every kind (for testing or reconfiguration)"""
        for kind, instances in self._instances.items():
            for key in list(instances):
                log_core_event(logger, key, f"{kind} discarded")
            instances.clear()

    def get_status(self) -> dict:
        """Number of live instances per kind"""
        return {kind: len(instances) for kind, instances in self._instances.items()}

    def _slot(self, kind: str) -> Dict[str, Any]:
        try:
            return self._instances[kind]
        except KeyError:
            raise ValueError(f"Unknown multiton kind: {kind}") from None


# Process-wide registry used when no explicit registry is passed
default_registry = MultitonRegistry()


def get_registry(registry: Optional[MultitonRegistry] = None) -> MultitonRegistry:
    """Return registry, falling back to the process-wide default"""
    return registry if registry is not None else default_registry


class MultitonMixin:
    """Construction and lookup shared by Model, View, Controller and Facade"""

    MULTITON_KIND: str = ""

    def _bind_multiton(self, key: str, registry: Optional[MultitonRegistry]) -> MultitonRegistry:
        """Claim key in registry for this instance; raises MultitonKeyError if taken"""
        registry = get_registry(registry)
        registry.register(self.MULTITON_KIND, key, self)
        return registry

    @classmethod
    def get_instance(cls, key: str, registry: Optional[MultitonRegistry] = None):
        """Return the instance for key, constructing it on first access"""
        registry = get_registry(registry)
        instance = registry.retrieve(cls.MULTITON_KIND, key)
        if instance is None:
            instance = cls(key, registry=registry)
        return instance

    @classmethod
    def _remove_instance(cls, key: str, registry: Optional[MultitonRegistry] = None) -> None:
        get_registry(registry).remove(cls.MULTITON_KIND, key)
