# ruff: noqa: ANN401
from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, final

from typing_extensions import override

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


class Receiver(metaclass=ABCMeta):
    """Capability object a deferred call dispatches through.

    Only explicit subclasses count as receivers; any other object is
    wrapped in ``ObjectReceiver``, whatever attributes it happens to have.

    Implementations decide how a name maps to a callable: by reflection,
    by a static registry, or anything else. Visibility must never make
    ``can_invoke`` return false for a name ``resolve`` can find.
    """

    target: Any

    @abstractmethod
    def can_invoke(self, name: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def resolve(self, name: str) -> Callable[..., Any]:
        raise NotImplementedError

    @abstractmethod
    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError


def _mangled_names(target: Any, name: str) -> Iterator[str]:
    if not name.startswith("__") or name.endswith("__"):
        return
    cls = target if isinstance(target, type) else type(target)
    for klass in cls.__mro__:
        owner = klass.__name__.lstrip("_")
        if owner:
            yield f"_{owner}{name}"


@final
class ObjectReceiver(Receiver):
    __slots__: tuple[str, ...] = ("target",)

    def __init__(self, target: Any) -> None:
        self.target = target

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(target={self.target!r})"

    def lookup(self, name: str) -> Any:
        try:
            return getattr(self.target, name)
        except AttributeError:
            for mangled in _mangled_names(self.target, name):
                try:
                    return getattr(self.target, mangled)
                except AttributeError:
                    continue
            raise

    @override
    def can_invoke(self, name: str) -> bool:
        try:
            return callable(self.lookup(name))
        except AttributeError:
            return False

    @override
    def resolve(self, name: str) -> Callable[..., Any]:
        attr = self.lookup(name)
        if not callable(attr):
            msg = (
                f"{type(self.target).__name__!r} object attribute "
                f"{name!r} is not callable"
            )
            raise AttributeError(msg)
        return attr

    @override
    def invoke(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        return self.resolve(name)(*args, **kwargs)


def as_receiver(obj: Any) -> Receiver:
    if isinstance(obj, Receiver):
        return obj
    return ObjectReceiver(obj)
