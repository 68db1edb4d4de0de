"""Serializers for deferred job payloads.

Classes:
    Serializer: Abstract base protocol defining serializer interface
    UnsafePickleSerializer: Pickle-based serializer (use with caution)

Protocol Interface:
    dumpb(value: Any) -> bytes: Serialize object to bytes
    loadb(value: bytes) -> Any: Deserialize bytes to object

Security Notes:
    - UnsafePickleSerializer: UNSAFE for untrusted data - allows arbitrary code execution
"""  # noqa: E501

from deferjob._internal.serializers.base import Serializer
from deferjob._internal.serializers.pickle_unsafe import UnsafePickleSerializer

__all__ = (
    "Serializer",
    "UnsafePickleSerializer",
)
