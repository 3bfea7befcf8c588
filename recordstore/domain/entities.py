"""
Domain entities for repository records.

Items are the envelope a repository persists: a caller-supplied identifier
paired with an arbitrary payload value.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

V = TypeVar("V")

ItemIdentifier = str


@dataclass(frozen=True)
class Item(Generic[V]):
    """
    Value object pairing an identifier with a payload.

    Immutable so a repository can never alter an item handed to it.
    """

    identifier: ItemIdentifier
    value: V

    def __post_init__(self):
        """Validate the identifier on creation."""
        if not isinstance(self.identifier, str):
            raise ValueError(f"Item identifier must be a string: {self.identifier!r}")
        if not self.identifier:
            raise ValueError("Item identifier must not be empty")
