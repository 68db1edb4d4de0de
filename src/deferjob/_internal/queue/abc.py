from abc import ABCMeta, abstractmethod
from typing import NamedTuple, Protocol

from deferjob._internal.common.constants import JobStatus


class QueuedJob(NamedTuple):
    job_id: str
    name: str
    handler: bytes
    status: JobStatus


class JobQueue(Protocol, metaclass=ABCMeta):
    @abstractmethod
    def push(self, queued: QueuedJob) -> None:
        raise NotImplementedError

    @abstractmethod
    def get(self, job_id: str) -> QueuedJob | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, job_id: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
