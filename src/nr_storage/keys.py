"""Key-space layout.

Every key the adapter reads or writes is built here::

    nr:flows                  flows document
    nr:credentials            credentials document
    nr:settings               settings document
    nr:sessions               sessions document
    nr:lib:<type>:<path>      library entry
    nr:lib:<type>:<rel>       library listing prefix

Keys are plain concatenations, so distinct ``(type, path)`` pairs with a
``type`` free of ``:`` never share a key.
"""

from __future__ import annotations

FLOWS_KEY = "nr:flows"
CREDENTIALS_KEY = "nr:credentials"
SETTINGS_KEY = "nr:settings"
SESSIONS_KEY = "nr:sessions"

LIBRARY_NAMESPACE = "nr:lib"
SEPARATOR = "/"


def library_prefix(type_: str, rel: str = "") -> str:
    """Prefix shared by every library key under ``rel`` for ``type_``."""
    return f"{LIBRARY_NAMESPACE}:{type_}:{rel}"


def library_key(type_: str, path: str) -> str:
    """Key of the library entry ``path``.  The path is used verbatim."""
    return library_prefix(type_, path)


def is_listing_path(path: str) -> bool:
    return path.startswith(SEPARATOR)
