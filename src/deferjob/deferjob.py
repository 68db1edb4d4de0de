# ruff: noqa: ANN401
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from deferjob._internal.common.constants import CallStyle, Hook
from deferjob._internal.configuration import DeferjobConfiguration
from deferjob._internal.exceptions import InvalidPayloadError
from deferjob._internal.job import Job
from deferjob._internal.proxy import DelayProxy
from deferjob._internal.queue.memory import InMemoryQueue
from deferjob._internal.serializers.pickle_unsafe import UnsafePickleSerializer

if TYPE_CHECKING:
    from deferjob._internal.configuration import DelayPolicy
    from deferjob._internal.queue.abc import JobQueue, QueuedJob
    from deferjob._internal.serializers.base import Serializer

logger = logging.getLogger("deferjob.app")


class Deferjob:
    def __init__(
        self,
        *,
        queue: JobQueue | None = None,
        serializer: Serializer | None = None,
        delay_jobs: DelayPolicy = True,
        call_style: CallStyle = CallStyle.KEYWORDS,
    ) -> None:
        self.config: DeferjobConfiguration = DeferjobConfiguration(
            queue=queue if queue is not None else InMemoryQueue(),
            serializer=serializer or UnsafePickleSerializer(),
            delay_jobs=delay_jobs,
            call_style=call_style,
        )

    @property
    def queue(self) -> JobQueue:
        return self.config.queue

    def delay(self, target: Any) -> DelayProxy:
        return DelayProxy(self, target)

    def enqueue(self, payload_object: Any) -> Job:
        if not callable(getattr(payload_object, "perform", None)):
            raise InvalidPayloadError(payload_object)

        job = Job(
            serializer=self.config.serializer,
            payload_object=payload_object,
        )
        if not self.config.should_delay(job):
            logger.debug("Running %s inline, delaying is disabled", job.name)
            _ = job.invoke_job()
            return job

        job.hook(Hook.ENQUEUE)
        self.config.queue.push(job.to_queued())
        logger.debug("Enqueued job %s (%s)", job.id, job.name)
        return job

    def load(self, queued: QueuedJob) -> Job:
        return Job.from_queued(queued, self.config.serializer)
