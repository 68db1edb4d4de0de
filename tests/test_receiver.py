from collections.abc import Callable
from typing import Any
from unittest.mock import Mock

import pytest
from typing_extensions import override

from deferjob import ObjectReceiver, PerformableMethod, Receiver
from deferjob._internal.persistence import Persistable, is_unsaved
from deferjob._internal.receiver import as_receiver
from tests.models import Story


class _Hidden:
    def __private(self) -> str:
        return "base"


class Child(_Hidden):
    pass


class RegistryReceiver(Receiver):
    def __init__(
        self,
        target: Any,
        registry: dict[str, Callable[..., Any]],
    ) -> None:
        self.target = target
        self.registry = registry

    @override
    def can_invoke(self, name: str) -> bool:
        return name in self.registry

    @override
    def resolve(self, name: str) -> Callable[..., Any]:
        return self.registry[name]

    @override
    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        return self.registry[name](*args, **kwargs)


def test_object_receiver_public_and_private() -> None:
    receiver = ObjectReceiver(Story())

    assert receiver.can_invoke("tell")
    assert receiver.can_invoke("_whisper")
    assert receiver.can_invoke("__secret")
    assert not receiver.can_invoke("text")
    assert not receiver.can_invoke("missing")
    assert receiver.invoke("__secret") == "hidden"


def test_object_receiver_mangled_name_from_base_class() -> None:
    receiver = ObjectReceiver(Child())
    assert receiver.invoke("__private") == "base"


def test_object_receiver_resolve_errors() -> None:
    receiver = ObjectReceiver(Story())

    with pytest.raises(AttributeError, match="not callable"):
        _ = receiver.resolve("text")
    with pytest.raises(AttributeError):
        _ = receiver.resolve("missing")


def test_as_receiver() -> None:
    story = Story()
    wrapped = as_receiver(story)
    assert isinstance(wrapped, ObjectReceiver)
    assert wrapped.target is story
    assert repr(wrapped) == (
        "ObjectReceiver(target=Story(text='once upon a time'))"
    )

    registry = RegistryReceiver(story, {})
    assert as_receiver(registry) is registry


def test_performable_method_with_custom_receiver() -> None:
    story = Story()
    shout = Mock(return_value="HEY")
    method = PerformableMethod(
        RegistryReceiver(story, {"shout": shout}),
        "shout",
        ["a"],
        {"b": 1},
    )

    assert method.target is story
    assert method.display_name == "Story#shout"
    assert method.perform() == "HEY"
    shout.assert_called_once_with("a", b=1)
    assert method.responds_to("shout")
    assert not method.responds_to("tell")


def test_custom_receiver_without_method() -> None:
    with pytest.raises(AttributeError, match="'tell'"):
        _ = PerformableMethod(RegistryReceiver(Story(), {}), "tell")


def test_custom_receiver_still_checks_persistence() -> None:
    story = Story(saved=False)
    with pytest.raises(ValueError, match="non-persisted"):
        _ = PerformableMethod(RegistryReceiver(story, {"x": print}), "x")


@pytest.mark.parametrize(
    ("obj", "expected"),
    [
        pytest.param(Story(), False, id="saved"),
        pytest.param(Story(saved=False), True, id="unsaved"),
        pytest.param(Story, False, id="class"),
        pytest.param("foo", False, id="not_persistable"),
    ],
)
def test_is_unsaved(obj: Any, expected: bool) -> None:  # noqa: FBT001
    assert is_unsaved(obj) is expected


def test_persistable_protocol() -> None:
    assert isinstance(Story(), Persistable)
    assert not isinstance(object(), Persistable)


class Command:
    """Has the attribute names of a receiver without being one."""

    def __init__(self) -> None:
        self.target = "db"

    def can_invoke(self, name: str) -> bool:
        return False

    def resolve(self, name: str) -> Callable[..., Any]:
        raise KeyError(name)

    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        raise KeyError(name)

    def run(self) -> str:
        return "ran"


def test_lookalike_object_is_wrapped() -> None:
    command = Command()

    wrapped = as_receiver(command)
    assert isinstance(wrapped, ObjectReceiver)
    assert wrapped.target is command
    assert not isinstance(command, Receiver)

    method = PerformableMethod(command, "run")
    assert method.target is command
    assert method.display_name == "Command#run"
    assert method.perform() == "ran"


def test_bare_mock_target_is_invoked() -> None:
    target = Mock()
    method = PerformableMethod(target, "count", ["o"])

    _ = method.perform()

    assert method.target is target
    target.count.assert_called_once_with("o")
