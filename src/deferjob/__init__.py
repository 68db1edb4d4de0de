"""Deferred method calls for background jobs.

A ``PerformableMethod`` captures a target, a method name and the call
arguments so the call can be serialized, queued and performed later by a
worker. ``Deferjob`` ties it to a queue and a serializer and exposes the
``delay()`` proxy used to enqueue calls.
"""

from importlib.metadata import version as get_version

from deferjob._internal.common.constants import CallStyle, Hook, JobStatus
from deferjob._internal.job import Job
from deferjob._internal.performable import PerformableMethod
from deferjob._internal.persistence import Persistable
from deferjob._internal.proxy import DelayProxy
from deferjob._internal.receiver import ObjectReceiver, Receiver
from deferjob.deferjob import Deferjob

__version__ = get_version("deferjob")
__all__ = (
    "CallStyle",
    "Deferjob",
    "DelayProxy",
    "Hook",
    "Job",
    "JobStatus",
    "ObjectReceiver",
    "PerformableMethod",
    "Persistable",
    "Receiver",
)
