from collections.abc import Iterator

from typing_extensions import override

from deferjob._internal.queue.abc import JobQueue, QueuedJob


class InMemoryQueue(JobQueue):
    def __init__(self) -> None:
        self._jobs: dict[str, QueuedJob] = {}

    @override
    def push(self, queued: QueuedJob) -> None:
        self._jobs[queued.job_id] = queued

    @override
    def get(self, job_id: str) -> QueuedJob | None:
        return self._jobs.get(job_id)

    @override
    def delete(self, job_id: str) -> None:
        _ = self._jobs.pop(job_id, None)

    @override
    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[QueuedJob]:
        return iter(list(self._jobs.values()))

    def clear(self) -> None:
        self._jobs.clear()
