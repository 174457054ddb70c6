"""Library entries and directory listings over a flat key space."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from nr_storage.exceptions import LibraryEntryDecodeError
from nr_storage.keys import SEPARATOR


class LibraryEntry(BaseModel):
    """Stored form of a library leaf: opaque metadata plus the body text."""

    meta: Any = Field(default_factory=dict)
    body: str

    def encode(self) -> bytes:
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def decode(cls, key: str, raw: bytes) -> LibraryEntry:
        """Parse a stored value, raising :class:`LibraryEntryDecodeError` on bad data."""
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise LibraryEntryDecodeError(key, str(exc)) from exc


@dataclass(frozen=True)
class SubDirectory:
    """Listing marker for a path segment that has deeper entries below it."""

    name: str


@dataclass(frozen=True)
class LibraryFile:
    """Listing marker for a leaf at the listed level.

    Attributes:
        fn: File name relative to the listed directory.
    """

    fn: str


ListingItem = SubDirectory | LibraryFile


def listing_item(key: str, prefix: str) -> ListingItem:
    """Classify one matched *key* relative to the listing *prefix*."""
    suffix = key[len(prefix) :]
    if suffix.startswith(SEPARATOR):
        suffix = suffix[1:]
    if SEPARATOR in suffix:
        return SubDirectory(suffix.split(SEPARATOR, 1)[0])
    return LibraryFile(suffix)


def build_listing(keys: Iterable[str], prefix: str) -> list[ListingItem]:
    """Turn the keys matching *prefix* into listing markers.

    Order follows *keys*.  Markers are not de-duplicated: two leaves below
    the same sub-directory produce two equal :class:`SubDirectory` items.
    """
    return [listing_item(key, prefix) for key in keys]
