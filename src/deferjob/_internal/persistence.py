# ruff: noqa: ANN401
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Persistable(Protocol):
    def is_persisted(self) -> bool: ...


def is_unsaved(obj: Any) -> bool:
    if isinstance(obj, type) or not isinstance(obj, Persistable):
        return False
    return not obj.is_persisted()
