"""
Tests for the Model proxy registry.
"""
import pytest

from core.model import Model
from core.exceptions import MultitonKeyError, ConfigurationError
from patterns.proxy import Proxy


class TrackingProxy(Proxy):
    """Proxy that counts its lifecycle hooks"""

    def __init__(self, proxy_name=None, data=None):
        super().__init__(proxy_name, data)
        self.registered = 0
        self.removed = 0

    def on_register(self):
        self.registered += 1

    def on_remove(self):
        self.removed += 1


class TestModelMultiton:
    """Test one Model per key"""

    def test_get_instance_is_stable(self, registry, key):
        model = Model.get_instance(key, registry=registry)
        assert model is Model.get_instance(key, registry=registry)
        assert model.multiton_key == key

    def test_second_construction_fails(self, registry, key):
        """Constructing directly for a used key aborts"""
        Model.get_instance(key, registry=registry)
        with pytest.raises(MultitonKeyError) as exc_info:
            Model(key, registry=registry)
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.kind == "model"
        assert exc_info.value.key == key

    def test_remove_model_frees_key(self, registry, key):
        model = Model.get_instance(key, registry=registry)
        Model.remove_model(key, registry=registry)
        assert Model.get_instance(key, registry=registry) is not model

    def test_initialize_model_hook_runs(self, registry, key):
        class SeededModel(Model):
            def initialize_model(self):
                self.register_proxy(Proxy("seed", 1))

        model = SeededModel.get_instance(key, registry=registry)
        assert model.has_proxy("seed")


class TestProxyRegistration:
    """Test proxy register, retrieve and remove"""

    def test_score_proxy_lifecycle(self, registry, key):
        """Register, read back and remove a proxy holding 0"""
        model = Model.get_instance(key, registry=registry)
        proxy = TrackingProxy("score", 0)

        model.register_proxy(proxy)
        retrieved = model.retrieve_proxy("score")
        assert retrieved is proxy
        assert retrieved.data == 0
        assert proxy.registered == 1
        assert proxy.multiton_key == key

        removed = model.remove_proxy("score")
        assert removed is proxy
        assert model.retrieve_proxy("score") is None
        assert not model.has_proxy("score")
        assert proxy.removed == 1

    def test_absent_proxy_returns_none(self, registry, key):
        model = Model.get_instance(key, registry=registry)
        assert model.retrieve_proxy("missing") is None
        assert model.remove_proxy("missing") is None
        assert not model.has_proxy("missing")

    def test_reregistration_overwrites_without_remove_hook(self, registry, key):
        """The displaced proxy is replaced silently"""
        model = Model.get_instance(key, registry=registry)
        first = TrackingProxy("data", "first")
        second = TrackingProxy("data", "second")

        model.register_proxy(first)
        model.register_proxy(second)

        assert model.retrieve_proxy("data") is second
        assert first.removed == 0
        assert second.registered == 1

    def test_default_proxy_name(self, registry, key):
        model = Model.get_instance(key, registry=registry)
        model.register_proxy(Proxy())
        assert model.has_proxy(Proxy.NAME)
