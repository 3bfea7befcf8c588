"""
Pickle codec for arbitrary Python payloads.

Only use it with stores whose contents are trusted: unpickling runs
arbitrary code.
"""

import pickle
from typing import Any, Optional

from recordstore.codecs.base import Codec
from recordstore.domain.exceptions import DecodeException, EncodeException


class PickleCodec(Codec[Any]):
    """Codec serializing any picklable object."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL, value_type: Optional[type] = None):
        """
        Initialize the codec.

        Args:
            protocol: Pickle protocol version
            value_type: If given, decoded values must be instances of it
        """
        self.protocol = protocol
        self.value_type = value_type

    def encode(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self.protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodeException(str(e)) from e

    def decode(self, data: bytes) -> Any:
        try:
            value = pickle.loads(data)
        except (
            pickle.UnpicklingError,
            EOFError,
            AttributeError,
            ImportError,
            IndexError,
            TypeError,
            ValueError,
        ) as e:
            raise DecodeException(str(e)) from e

        if self.value_type is not None and not isinstance(value, self.value_type):
            raise DecodeException(
                f"expected {self.value_type.__name__}, got {type(value).__name__}"
            )
        return value
