"""
Codec interface (Abstract Base Class).

Defines the contract for converting record values to bytes and back,
independent of the serialization format.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

V = TypeVar("V")


class Codec(ABC, Generic[V]):
    """
    Abstract encode/decode pair for record payloads.

    Implementations must satisfy ``decode(encode(v)) == v`` for every
    valid value of the declared type and must not have side effects.
    """

    @abstractmethod
    def encode(self, value: V) -> bytes:
        """
        Serialize a value.

        Args:
            value: Payload to serialize

        Returns:
            Serialized bytes

        Raises:
            EncodeException: If the value cannot be serialized
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> V:
        """
        Deserialize bytes produced by ``encode``.

        Args:
            data: Serialized bytes

        Returns:
            The decoded value

        Raises:
            DecodeException: If the bytes are malformed or of the wrong type
        """
        pass
