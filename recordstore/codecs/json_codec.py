"""
JSON codec backed by pydantic type adapters.

Values are validated against the declared payload type on decode, so a
codec built for ``list[Client]`` returns ``Client`` instances rather than
raw dictionaries.
"""

import math
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from recordstore.codecs.base import Codec
from recordstore.domain.exceptions import DecodeException, EncodeException
from recordstore.logging_config import get_logger

logger = get_logger(__name__)

V = TypeVar("V")


class JSONCodec(Codec[V]):
    """
    UTF-8 JSON codec for a declared payload type.

    Attributes:
        value_type: Payload type values are validated against
    """

    def __init__(self, value_type: Any = Any):
        """
        Initialize the codec.

        Args:
            value_type: Payload type (pydantic model, dataclass, builtin or
                generic alias). Defaults to plain JSON values.
        """
        self.value_type = value_type
        self._adapter: TypeAdapter = TypeAdapter(value_type)

    def encode(self, value: V) -> bytes:
        try:
            # JSON has no inf/nan; pydantic would silently write null
            if _has_non_finite(self._adapter.dump_python(value, warnings="error")):
                raise ValueError("Out of range float values are not JSON compliant")
            return self._adapter.dump_json(value, warnings="error")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            logger.debug(f"JSON encode failed for {type(value).__name__}: {e}")
            raise EncodeException(str(e)) from e

    def decode(self, data: bytes) -> V:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as e:
            logger.debug(f"JSON decode failed: {e}")
            raise DecodeException(str(e)) from e

    def __repr__(self) -> str:
        return f"JSONCodec({self.value_type!r})"


def _has_non_finite(obj: Any) -> bool:
    if isinstance(obj, float):
        return not math.isfinite(obj)
    if isinstance(obj, dict):
        return any(_has_non_finite(k) or _has_non_finite(v) for k, v in obj.items())
    if isinstance(obj, (list, tuple, set, frozenset)):
        return any(_has_non_finite(item) for item in obj)
    return False
