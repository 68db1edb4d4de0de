# ruff: noqa: ANN401
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, final
from uuid import uuid4

from typing_extensions import override

from deferjob._internal.common.constants import EMPTY, Hook, JobStatus
from deferjob._internal.exceptions import DeserializationError
from deferjob._internal.queue.abc import QueuedJob

if TYPE_CHECKING:
    from deferjob._internal.serializers.base import Serializer

logger = logging.getLogger("deferjob.job")


def responds_to(payload: Any, name: str) -> bool:
    check = getattr(type(payload), "responds_to", None)
    if check is not None:
        return bool(payload.responds_to(name))
    return callable(getattr(payload, name, None))


@final
class Job:
    __slots__: tuple[str, ...] = (
        "_handler",
        "_payload",
        "_serializer",
        "_status",
        "exception",
        "id",
    )

    def __init__(
        self,
        *,
        serializer: Serializer,
        payload_object: Any = EMPTY,
        handler: bytes | None = None,
        job_id: str | None = None,
        status: JobStatus = JobStatus.PENDING,
    ) -> None:
        if payload_object is EMPTY and handler is None:
            msg = "Job needs either a payload_object or a handler"
            raise ValueError(msg)
        self._serializer = serializer
        self._payload: Any = payload_object
        self._handler = handler
        self._status = status
        self.id = job_id or uuid4().hex
        self.exception: Exception | None = None

    @classmethod
    def from_queued(cls, queued: QueuedJob, serializer: Serializer) -> Job:
        return cls(
            serializer=serializer,
            handler=queued.handler,
            job_id=queued.job_id,
            status=queued.status,
        )

    @property
    def status(self) -> JobStatus:
        return self._status

    @property
    def payload_object(self) -> Any:
        if self._payload is EMPTY:
            try:
                self._payload = self._serializer.loadb(self.handler)
            except Exception as exc:
                raise DeserializationError(self.id, reason=repr(exc)) from exc
        return self._payload

    @property
    def handler(self) -> bytes:
        if self._handler is None:
            self._handler = self._serializer.dumpb(self._payload)
        return self._handler

    @property
    def name(self) -> str:
        payload = self.payload_object
        display_name = getattr(payload, "display_name", None)
        if isinstance(display_name, str):
            return display_name
        return type(payload).__qualname__

    @override
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}("
            f"id={self.id!r}, status={self._status.value!r})"
        )

    def to_queued(self) -> QueuedJob:
        return QueuedJob(
            job_id=self.id,
            name=self.name,
            handler=self.handler,
            status=self._status,
        )

    def hook(self, hook: Hook, *args: Any) -> None:
        payload = self.payload_object
        if not responds_to(payload, hook.value):
            return
        getattr(payload, hook.value)(self, *args)

    def invoke_job(self) -> Any:
        payload = self.payload_object
        logger.debug("Running job %s", self.id)
        try:
            self.hook(Hook.BEFORE)
            self._status = JobStatus.RUNNING
            result = payload.perform()
            self._status = JobStatus.SUCCESS
            self.hook(Hook.SUCCESS)
        except Exception as exc:
            self._status = JobStatus.FAILED
            self.exception = exc
            logger.warning("Job %s failed: %r", self.id, exc)
            self.hook(Hook.ERROR, exc)
            raise
        else:
            return result
        finally:
            self.hook(Hook.AFTER)

    def fail(self) -> None:
        """Give up on the job for good and notify the payload."""
        self._status = JobStatus.PERMANENTLY_FAILED
        logger.warning("Job %s permanently failed", self.id)
        self.hook(Hook.FAILURE)
