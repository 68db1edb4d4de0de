from enum import Enum, unique
from typing import Any

from deferjob._internal.common.datastructures import EmptyPlaceholder

EMPTY: Any = EmptyPlaceholder()


@unique
class JobStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"
    PERMANENTLY_FAILED = "permanently_failed"


@unique
class Hook(str, Enum):
    ENQUEUE = "enqueue"
    BEFORE = "before"
    AFTER = "after"
    SUCCESS = "success"
    ERROR = "error"
    FAILURE = "failure"


@unique
class CallStyle(str, Enum):
    """How stored keyword arguments reach the target method.

    ``KEYWORDS`` passes them as ``**kwargs``. ``TRAILING_MAPPING`` appends
    them as one extra positional ``dict`` whenever positional arguments
    are present, for targets written against the older calling convention.
    """

    KEYWORDS = "keywords"
    TRAILING_MAPPING = "trailing_mapping"
