# ruff: noqa: ANN401
from __future__ import annotations

from typing import TYPE_CHECKING, Any, final

from typing_extensions import override

from deferjob._internal.performable import PerformableMethod

if TYPE_CHECKING:
    from collections.abc import Callable

    from deferjob._internal.job import Job
    from deferjob.deferjob import Deferjob


@final
class DelayProxy:
    """Turns ``proxy.method(*args, **kwargs)`` into an enqueued job."""

    __slots__: tuple[str, ...] = ("_app", "_target")

    def __init__(self, app: Deferjob, target: Any) -> None:
        self._app = app
        self._target = target

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(target={self._target!r})"

    def __getattr__(self, method_name: str) -> Callable[..., Job]:
        if method_name.startswith("__") and method_name.endswith("__"):
            raise AttributeError(method_name)

        def enqueue(*args: Any, **kwargs: Any) -> Job:
            payload = PerformableMethod(
                self._target,
                method_name,
                args,
                kwargs,
                call_style=self._app.config.call_style,
            )
            return self._app.enqueue(payload)

        enqueue.__name__ = method_name
        return enqueue
