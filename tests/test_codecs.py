"""
Tests for codecs.

Covers:
- JSON codec typed round-trips (models, collections, plain JSON)
- Encode and decode failures
- Pickle codec
"""

import pickle
from dataclasses import dataclass
from typing import Any, Dict, List

import pytest

from conftest import Client
from recordstore.codecs.json_codec import JSONCodec
from recordstore.codecs.pickle_codec import PickleCodec
from recordstore.domain.exceptions import DecodeException, EncodeException


@dataclass
class Address:
    street: str
    number: int


class TestJSONCodec:
    """Test the JSON codec."""

    @pytest.mark.parametrize(
        "value_type, value",
        [
            (Client, Client(name="Steve Buscemi")),
            (List[Client], [Client(name="Steve Buscemi"), Client(name="Willem Dafoe")]),
            (Dict[str, str], {"name": "Steve Buscemi"}),
            (Address, Address(street="Main St", number=7)),
            (Any, {"nested": [1, 2.5, None, True, "x"]}),
        ],
    )
    def test_round_trip(self, value_type, value):
        """Test decode(encode(v)) == v."""
        codec = JSONCodec(value_type)

        assert codec.decode(codec.encode(value)) == value

    def test_encode_produces_utf8_json(self):
        """Test encoded bytes are JSON."""
        codec = JSONCodec(Client)

        assert codec.encode(Client(name="Zoë")) == '{"name":"Zoë"}'.encode("utf-8")

    def test_default_type_decodes_plain_json(self):
        """Test untyped codec returns plain JSON values."""
        codec = JSONCodec()

        assert codec.decode(b'{"name": "Steve Buscemi"}') == {"name": "Steve Buscemi"}

    def test_encode_unserializable_value(self):
        """Test encoding an unsupported object raises EncodeException."""
        codec = JSONCodec()

        with pytest.raises(EncodeException):
            codec.encode(object())

    def test_decode_malformed_bytes(self):
        """Test decoding invalid JSON raises DecodeException."""
        codec = JSONCodec(Client)

        with pytest.raises(DecodeException):
            codec.decode(b"{not json")

    def test_decode_incompatible_shape(self):
        """Test decoding JSON of the wrong shape raises DecodeException."""
        codec = JSONCodec(List[Client])

        with pytest.raises(DecodeException):
            codec.decode(b'{"name": "Steve Buscemi"}')

    def test_decode_exception_chains_cause(self):
        """Test the pydantic error is kept as cause."""
        codec = JSONCodec(Client)

        with pytest.raises(DecodeException) as exc_info:
            codec.decode(b'{"nickname": "Steve"}')

        assert exc_info.value.__cause__ is not None


class TestPickleCodec:
    """Test the pickle codec."""

    def test_round_trip(self):
        """Test arbitrary objects survive a round-trip."""
        codec = PickleCodec()
        value = {"clients": [Client(name="Steve Buscemi")], "ids": (1, 2)}

        assert codec.decode(codec.encode(value)) == value

    def test_encode_unpicklable(self):
        """Test lambdas cannot be encoded."""
        codec = PickleCodec()

        with pytest.raises(EncodeException):
            codec.encode(lambda: None)

    def test_decode_garbage(self):
        """Test non-pickle bytes raise DecodeException."""
        codec = PickleCodec()

        with pytest.raises(DecodeException):
            codec.decode(b"definitely not a pickle")

    def test_decode_wrong_type(self):
        """Test value_type is enforced on decode."""
        codec = PickleCodec(value_type=Client)

        with pytest.raises(DecodeException, match="expected Client, got str"):
            codec.decode(pickle.dumps("Steve Buscemi"))


class TestJSONCodecNonFiniteFloats:
    """Test floats without a JSON representation are refused."""

    @pytest.mark.parametrize("number", [float("inf"), float("-inf"), float("nan")])
    def test_typed_float_rejected(self, number):
        """Test a bare non-finite float cannot be encoded."""
        with pytest.raises(EncodeException, match="not JSON compliant"):
            JSONCodec(float).encode(number)

    def test_nested_value_rejected(self):
        """Test non-finite floats inside containers are found."""
        with pytest.raises(EncodeException):
            JSONCodec().encode({"x": [1.0, {"y": float("inf")}]})

    def test_finite_floats_round_trip(self):
        """Test ordinary floats are unaffected."""
        codec = JSONCodec()
        value = {"x": 1.5, "y": [-0.25, 1e300]}

        assert codec.decode(codec.encode(value)) == value
