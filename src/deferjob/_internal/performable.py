# ruff: noqa: ANN401
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import override

from deferjob._internal.common.constants import CallStyle
from deferjob._internal.exceptions import InvalidStateError, NotCallableError
from deferjob._internal.persistence import is_unsaved
from deferjob._internal.receiver import ObjectReceiver, as_receiver

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from deferjob._internal.receiver import Receiver

logger = logging.getLogger("deferjob.performable")


class PerformableMethod:
    """A method call captured now and performed later by a worker.

    Holds the target, the method name and the arguments. Any attribute
    not defined here is looked up on the target, so hook methods such as
    ``before`` or ``failure`` implemented by the target are reachable
    through the deferred call itself.
    """

    def __init__(
        self,
        target: Any,
        method_name: str,
        args: Iterable[Any] = (),
        kwargs: Mapping[str, Any] | None = None,
        *,
        call_style: CallStyle = CallStyle.KEYWORDS,
    ) -> None:
        receiver = as_receiver(target)
        if is_unsaved(receiver.target):
            raise InvalidStateError(receiver.target)
        if not receiver.can_invoke(method_name):
            raise NotCallableError(method_name, receiver.target)

        self._receiver: Receiver | None = receiver
        self._method_name: str = method_name
        self._args: tuple[Any, ...] = tuple(args)
        self._kwargs: dict[str, Any] = dict(kwargs or {})
        self.call_style: CallStyle = call_style

    @property
    def target(self) -> Any:
        if self._receiver is None:
            return None
        return self._receiver.target

    @property
    def method_name(self) -> str:
        return self._method_name

    @property
    def args(self) -> tuple[Any, ...]:
        return self._args

    @property
    def kwargs(self) -> dict[str, Any]:
        return self._kwargs

    @property
    def orphaned(self) -> bool:
        return self._receiver is None

    @property
    def display_name(self) -> str:
        target = self.target
        if isinstance(target, type):
            return f"{target.__qualname__}.{self._method_name}"
        return f"{type(target).__qualname__}#{self._method_name}"

    @override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}("
            f"target={self.target!r}, "
            f"method_name={self._method_name!r}, "
            f"args={self._args!r}, "
            f"kwargs={self._kwargs!r})"
        )

    def orphan(self) -> None:
        """Drop the target once the referenced record is gone."""
        self._receiver = None

    def perform(self) -> Any:
        if self._receiver is None:
            logger.debug("Skipping %s: target is gone", self._method_name)
            return None

        args, kwargs = self._call_arguments()
        return self._receiver.invoke(self._method_name, *args, **kwargs)

    def _call_arguments(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        if not self._kwargs:
            return self._args, {}
        if self.call_style is CallStyle.TRAILING_MAPPING and self._args:
            return (*self._args, dict(self._kwargs)), {}
        return self._args, dict(self._kwargs)

    def method(self, name: str) -> Callable[..., Any]:
        return self._require_receiver(name).resolve(name)

    def forward(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        return self._require_receiver(name).invoke(name, *args, **kwargs)

    def responds_to(self, name: str) -> bool:
        if hasattr(type(self), name):
            return True
        return self._receiver is not None and self._receiver.can_invoke(name)

    def _require_receiver(self, name: str) -> Receiver:
        if self._receiver is None:
            msg = f"cannot forward {name!r}: target is gone"
            raise AttributeError(msg)
        return self._receiver

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing on the instance and the class.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        receiver = self.__dict__.get("_receiver")
        if receiver is None:
            msg = (
                f"{self.__class__.__name__!r} object has no attribute "
                f"{name!r} and its target is gone"
            )
            raise AttributeError(msg)
        return receiver.resolve(name)

    def __getstate__(self) -> dict[str, Any]:
        target: Any = self._receiver
        if isinstance(target, ObjectReceiver):
            target = target.target
        return {
            "target": target,
            "method_name": self._method_name,
            "args": self._args,
            "kwargs": self._kwargs,
            "call_style": self.call_style,
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        target = state["target"]
        self._receiver = None if target is None else as_receiver(target)
        self._method_name = state["method_name"]
        self._args = tuple(state.get("args", ()))
        # Payloads queued before keyword arguments were stored lack "kwargs".
        self._kwargs = dict(state.get("kwargs") or {})
        self.call_style = CallStyle(
            state.get("call_style", CallStyle.KEYWORDS),
        )
