# pyright: reportExplicitAny=false

import pickle  # nosec B403
from typing import Any

from typing_extensions import override

from deferjob._internal.serializers.base import Serializer


class UnsafePickleSerializer(Serializer):
    """Serializes payloads with pickle, so queued targets keep their type.

    Loading runs arbitrary code: only point it at queues you trust.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self.protocol: int = protocol

    @override
    def dumpb(self, data: Any) -> bytes:
        # nosemgrep: python.lang.security.deserialization.pickle.avoid-pickle
        return pickle.dumps(data, protocol=self.protocol)

    @override
    def loadb(self, data: bytes) -> Any:
        # nosemgrep: python.lang.security.deserialization.pickle.avoid-pickle
        return pickle.loads(data)  # noqa: S301 # nosec B301
