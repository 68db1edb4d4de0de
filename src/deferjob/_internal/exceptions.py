# ruff: noqa: ANN401
from typing import Any


class BaseDeferjobError(Exception):
    pass


class NotCallableError(BaseDeferjobError, AttributeError):
    """Raised when the target has no callable with the requested name."""

    def __init__(self, method_name: str, target: Any) -> None:
        self.method_name: str = method_name
        self.target: Any = target
        super().__init__(f"undefined method {method_name!r} for {target!r}")


class InvalidStateError(BaseDeferjobError, ValueError):
    """Raised when a job references a record that was never saved."""

    def __init__(self, target: Any) -> None:
        self.target: Any = target
        super().__init__(
            f"job cannot be created for non-persisted record: {target!r}"
        )


class InvalidPayloadError(BaseDeferjobError, TypeError):
    def __init__(self, payload: Any) -> None:
        self.payload: Any = payload
        super().__init__(
            "Cannot enqueue items which do not respond to perform: "
            f"{payload!r}"
        )


class DeserializationError(BaseDeferjobError):
    """Raised when a queued job handler can no longer be loaded."""

    def __init__(self, job_id: str, reason: str) -> None:
        self.job_id: str = job_id
        self.reason: str = reason
        super().__init__(f"job_id: {job_id}, deserialization failed: {reason}")
