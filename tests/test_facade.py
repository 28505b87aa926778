"""
Tests for the Facade: forwarding, core lifecycle and end-to-end scenarios.
"""
import pytest
from unittest.mock import Mock

from core.model import Model
from core.view import View
from core.controller import Controller
from core.registry import MultitonRegistry, default_registry
from core.exceptions import MultitonKeyError
from patterns.facade import Facade
from patterns.command import SimpleCommand
from patterns.mediator import Mediator
from patterns.proxy import Proxy


class ScoreProxy(Proxy):
    NAME = "score"

    def __init__(self, data=0):
        super().__init__(self.NAME, data)
        self.removed = 0

    def on_remove(self):
        self.removed += 1


class GameOverMediator(Mediator):
    NAME = "GameOverMediator"

    def __init__(self):
        super().__init__(self.NAME)
        self.received = []

    def list_notification_interests(self):
        return ["GAME_OVER"]

    async def handle_notification(self, notification):
        self.received.append(notification)


class AddPointsCommand(SimpleCommand):
    """Adds the notification body to the score proxy"""

    async def execute(self, notification):
        proxy = self.facade.retrieve_proxy(ScoreProxy.NAME)
        proxy.data += notification.body
        if proxy.data >= 10:
            await self.send_notification("GAME_OVER", {"score": proxy.data})


class TestFacadeMultiton:
    """Test facade construction and core lifecycle"""

    def test_get_instance_builds_whole_core(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)

        assert facade is Facade.get_instance(key, registry=registry)
        assert facade.multiton_key == key
        assert Facade.has_core(key, registry=registry)
        assert registry.has("model", key)
        assert registry.has("view", key)
        assert registry.has("controller", key)

    def test_second_construction_fails(self, registry, key):
        Facade.get_instance(key, registry=registry)
        with pytest.raises(MultitonKeyError):
            Facade(key, registry=registry)

    def test_cores_are_independent(self, registry):
        first = Facade.get_instance("first", registry=registry)
        second = Facade.get_instance("second", registry=registry)
        first.register_proxy(Proxy("only-first"))

        assert first is not second
        assert first.has_proxy("only-first")
        assert not second.has_proxy("only-first")

    def test_registries_are_independent(self, key):
        one, two = MultitonRegistry(), MultitonRegistry()
        assert Facade.get_instance(key, registry=one) is not Facade.get_instance(key, registry=two)

    def test_default_registry_is_used_without_argument(self):
        key = "default-registry-core"
        try:
            facade = Facade.get_instance(key)
            assert default_registry.retrieve("facade", key) is facade
        finally:
            Facade.remove_core(key)
        assert not Facade.has_core(key)

    def test_remove_unknown_core_is_noop(self, registry):
        Facade.remove_core("unknown", registry=registry)
        assert not Facade.has_core("unknown", registry=registry)

    def test_remove_core_then_get_instance_gives_empty_core(self, registry, key):
        """No proxies, mediators or commands survive teardown"""
        facade = Facade.get_instance(key, registry=registry)
        facade.register_proxy(ScoreProxy())
        facade.register_mediator(GameOverMediator())
        facade.register_command("ADD_POINTS", AddPointsCommand)

        Facade.remove_core(key, registry=registry)
        assert not Facade.has_core(key, registry=registry)
        assert registry.get_status() == {"model": 0, "view": 0, "controller": 0, "facade": 0}

        fresh = Facade.get_instance(key, registry=registry)
        assert fresh is not facade
        assert not fresh.has_proxy(ScoreProxy.NAME)
        assert not fresh.has_mediator(GameOverMediator.NAME)
        assert not fresh.has_command("ADD_POINTS")

    def test_remove_core_order(self, registry, key, monkeypatch):
        """Model, View and Controller go before the Facade"""
        Facade.get_instance(key, registry=registry)
        removed = []
        original_remove = registry.remove

        def tracking_remove(kind, k):
            removed.append(kind)
            return original_remove(kind, k)

        monkeypatch.setattr(registry, "remove", tracking_remove)
        Facade.remove_core(key, registry=registry)

        assert removed == ["model", "view", "controller", "facade"]

    def test_subclass_can_substitute_actors(self, registry, key):
        """Pre-assigned slots are kept by the base initializers"""

        class CustomModel(Model):
            pass

        class CustomFacade(Facade):
            def initialize_model(self):
                self._model = CustomModel.get_instance(self.multiton_key, registry=self.registry)
                super().initialize_model()

        facade = CustomFacade.get_instance(key, registry=registry)

        assert isinstance(facade, CustomFacade)
        assert isinstance(Model.get_instance(key, registry=registry), CustomModel)
        assert Facade.get_instance(key, registry=registry) is facade

    def test_subclass_initializer_registers_wiring(self, registry, key):
        class AppFacade(Facade):
            def initialize_controller(self):
                super().initialize_controller()
                self.register_command("ADD_POINTS", AddPointsCommand)

        facade = AppFacade.get_instance(key, registry=registry)
        assert facade.has_command("ADD_POINTS")


class TestFacadeForwarding:
    """Test that the facade forwards to Model, View and Controller"""

    def test_proxy_forwarding(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)
        proxy = ScoreProxy()

        facade.register_proxy(proxy)

        assert Model.get_instance(key, registry=registry).retrieve_proxy("score") is proxy
        assert facade.retrieve_proxy("score") is proxy
        assert facade.remove_proxy("score") is proxy
        assert not facade.has_proxy("score")
        assert facade.remove_proxy("score") is None

    def test_mediator_forwarding(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)
        mediator = GameOverMediator()

        facade.register_mediator(mediator)

        assert View.get_instance(key, registry=registry).has_mediator(mediator.NAME)
        assert facade.retrieve_mediator(mediator.NAME) is mediator
        assert facade.remove_mediator(mediator.NAME) is mediator
        assert not facade.has_mediator(mediator.NAME)

    def test_command_forwarding(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)

        facade.register_command("TEST", SimpleCommand)
        assert Controller.get_instance(key, registry=registry).has_command("TEST")

        facade.remove_command("TEST")
        assert not facade.has_command("TEST")


class TestScenarios:
    """End-to-end flows through one core"""

    def test_score_proxy(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)
        facade.register_proxy(ScoreProxy(0))

        proxy = facade.retrieve_proxy("score")
        assert proxy.data == 0

        facade.remove_proxy("score")
        assert facade.retrieve_proxy("score") is None
        assert proxy.removed == 1

    @pytest.mark.asyncio
    async def test_game_over_reaches_mediator(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)
        mediator = GameOverMediator()
        facade.register_mediator(mediator)

        await facade.send_notification("GAME_OVER", {"score": 42})

        assert len(mediator.received) == 1
        assert mediator.received[0].name == "GAME_OVER"
        assert mediator.received[0].body["score"] == 42

    @pytest.mark.asyncio
    async def test_command_updates_proxy_and_notifies_mediator(self, registry, key):
        """Command, proxy and mediator cooperate only through the bus"""
        facade = Facade.get_instance(key, registry=registry)
        facade.register_proxy(ScoreProxy(0))
        mediator = GameOverMediator()
        facade.register_mediator(mediator)
        facade.register_command("ADD_POINTS", AddPointsCommand)

        await facade.send_notification("ADD_POINTS", 4)
        assert mediator.received == []

        await facade.send_notification("ADD_POINTS", 6)
        assert facade.retrieve_proxy("score").data == 10
        assert [n.body for n in mediator.received] == [{"score": 10}]

    @pytest.mark.asyncio
    async def test_mediator_and_command_share_a_name(self, registry, key):
        """Both are notified in subscription order"""
        facade = Facade.get_instance(key, registry=registry)
        calls = []

        class Handler(Mediator):
            def list_notification_interests(self):
                return ["SHARED"]

            async def handle_notification(self, notification):
                calls.append("mediator")

        class SharedCommand(SimpleCommand):
            async def execute(self, notification):
                calls.append("command")

        facade.register_command("SHARED", SharedCommand)
        facade.register_mediator(Handler())
        await facade.send_notification("SHARED")

        assert calls == ["command", "mediator"]

    @pytest.mark.asyncio
    async def test_send_notification_without_listeners(self, registry, key):
        facade = Facade.get_instance(key, registry=registry)
        await facade.send_notification("NOBODY_LISTENS", Mock())
