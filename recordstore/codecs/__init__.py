"""Codec module initialization."""

from recordstore.codecs.base import Codec
from recordstore.codecs.json_codec import JSONCodec
from recordstore.codecs.pickle_codec import PickleCodec

__all__ = ["Codec", "JSONCodec", "PickleCodec"]
