"""NodeRedStorage — application state and library content on a document store."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from nr_storage import keys
from nr_storage.config import StorageSettings
from nr_storage.exceptions import StorageError, StorageNotInitializedError, StoreError
from nr_storage.library import LibraryEntry, ListingItem, build_listing
from nr_storage.stores.factory import create_store

if TYPE_CHECKING:
    from types import TracebackType

    from nr_storage.stores.base import DocumentStore

logger = logging.getLogger(__name__)


class NodeRedStorage:
    """Storage adapter exposing flows, credentials, settings, sessions and the library.

    One instance owns one store connection, opened by :meth:`init` and
    released by :meth:`close`.

    Documents are read leniently: a missing, unreadable or corrupt document
    yields its fallback and a logged warning.  Writes and library reads are
    strict and raise on any failure.

    Parameters:
        store: Backend to use instead of building one from the settings
               passed to :meth:`init`.  An injected store is never closed
               by the adapter.
    """

    def __init__(self, store: DocumentStore | None = None) -> None:
        self._injected_store = store
        self._store: DocumentStore | None = None
        self._settings: StorageSettings | None = None
        self._saved_log_level: int | None = None

    # ── lifecycle ────────────────────────────────────────────

    async def init(self, settings: StorageSettings | dict[str, Any] | None = None) -> None:
        """Validate *settings* and connect the store."""
        if self._store is not None:
            raise StorageError("Storage is already initialized")
        if not isinstance(settings, StorageSettings):
            settings = StorageSettings.model_validate(settings or {})
        store = self._injected_store
        if store is None:
            store = create_store(settings)
        try:
            await store.connect()
        except BaseException:
            if store is not self._injected_store:
                await store.close()
            raise
        if settings.debug:
            package_logger = logging.getLogger("nr_storage")
            self._saved_log_level = package_logger.level
            package_logger.setLevel(logging.DEBUG)
        self._settings = settings
        self._store = store
        logger.debug("Initialized with %s store", settings.store.type)

    async def close(self) -> None:
        store, self._store = self._store, None
        if self._saved_log_level is not None:
            logging.getLogger("nr_storage").setLevel(self._saved_log_level)
            self._saved_log_level = None
        if store is not None and store is not self._injected_store:
            await store.close()

    async def __aenter__(self) -> NodeRedStorage:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def settings(self) -> StorageSettings | None:
        return self._settings

    def _require_store(self, operation: str) -> DocumentStore:
        if self._store is None:
            raise StorageNotInitializedError(operation)
        return self._store

    # ── generic documents ────────────────────────────────────

    async def save_json(self, key: str, value: Any) -> None:
        """Serialize *value* and write it under *key*.  Failures propagate."""
        store = self._require_store("save_json")
        data = json.dumps(value).encode("utf-8")
        await store.set(key, data)

    async def fetch_json(self, key: str, fallback: Any) -> Any:
        """Read the document at *key*, or return *fallback*.

        *fallback* is returned as-is when the key is absent, when the store
        fails, or when the stored value cannot be decoded.  Calling it
        before :meth:`init` still raises.
        """
        store = self._require_store("fetch_json")
        try:
            raw = await store.get(key)
            if raw is None:
                return fallback
            return json.loads(raw)
        except (StoreError, ValueError, TypeError, RecursionError) as exc:
            logger.warning("Error fetching JSON for key %s: %s", key, exc)
            return fallback

    async def get_flows(self) -> Any:
        logger.debug("get_flows called")
        return await self.fetch_json(keys.FLOWS_KEY, [])

    async def save_flows(self, flows: Any) -> None:
        logger.debug("save_flows called")
        await self.save_json(keys.FLOWS_KEY, flows)

    async def get_credentials(self) -> Any:
        logger.debug("get_credentials called")
        return await self.fetch_json(keys.CREDENTIALS_KEY, {})

    async def save_credentials(self, credentials: Any) -> None:
        logger.debug("save_credentials called")
        await self.save_json(keys.CREDENTIALS_KEY, credentials)

    async def get_settings(self) -> Any:
        logger.debug("get_settings called")
        return await self.fetch_json(keys.SETTINGS_KEY, {})

    async def save_settings(self, settings: Any) -> None:
        logger.debug("save_settings called")
        await self.save_json(keys.SETTINGS_KEY, settings)

    async def get_sessions(self) -> Any:
        logger.debug("get_sessions called")
        return await self.fetch_json(keys.SESSIONS_KEY, {})

    async def save_sessions(self, sessions: Any) -> None:
        logger.debug("save_sessions called")
        await self.save_json(keys.SESSIONS_KEY, sessions)

    # ── library ──────────────────────────────────────────────

    async def get_library_entry(self, type_: str, path: str) -> list[ListingItem] | str | None:
        """List a library directory or fetch a library entry's body.

        A *path* starting with ``/`` lists the directory below it and
        returns the markers in store order (empty when nothing matches).
        Any other *path* names an entry: its body is returned, or ``None``
        when it was never saved.

        Raises:
            LibraryEntryDecodeError: The stored entry is not a ``{meta, body}``
                document.
            StoreError: The store failed.
        """
        logger.debug("get_library_entry called with type=%s path=%s", type_, path)
        store = self._require_store("get_library_entry")

        if keys.is_listing_path(path):
            prefix = keys.library_prefix(type_, path[1:])
            return build_listing(await store.keys(prefix), prefix)

        key = keys.library_key(type_, path)
        raw = await store.get(key)
        if raw is None:
            return None
        return LibraryEntry.decode(key, raw).body

    async def save_library_entry(self, type_: str, path: str, meta: Any, body: str) -> None:
        """Store *meta* and *body* as the library entry *path*, replacing any previous one."""
        logger.debug("save_library_entry called with type=%s path=%s", type_, path)
        store = self._require_store("save_library_entry")
        entry = LibraryEntry(meta=meta, body=body)
        await store.set(keys.library_key(type_, path), entry.encode())
