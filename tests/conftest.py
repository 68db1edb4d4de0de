import pytest

from deferjob import Deferjob
from deferjob.queue import InMemoryQueue
from tests.models import Story


@pytest.fixture
def queue() -> InMemoryQueue:
    return InMemoryQueue()


@pytest.fixture
def app(queue: InMemoryQueue) -> Deferjob:
    return Deferjob(queue=queue)


@pytest.fixture
def inline_app(queue: InMemoryQueue) -> Deferjob:
    return Deferjob(queue=queue, delay_jobs=False)


@pytest.fixture
def story() -> Story:
    return Story()
