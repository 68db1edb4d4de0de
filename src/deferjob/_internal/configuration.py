from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from deferjob._internal.common.constants import CallStyle

if TYPE_CHECKING:
    from collections.abc import Callable

    from deferjob._internal.job import Job
    from deferjob._internal.queue.abc import JobQueue
    from deferjob._internal.serializers.base import Serializer

DelayPolicy: TypeAlias = "bool | Callable[[Job], bool]"


@dataclass(slots=True, kw_only=True)
class DeferjobConfiguration:
    queue: JobQueue
    serializer: Serializer
    delay_jobs: DelayPolicy = True
    call_style: CallStyle = CallStyle.KEYWORDS

    def should_delay(self, job: Job) -> bool:
        if callable(self.delay_jobs):
            return bool(self.delay_jobs(job))
        return self.delay_jobs
