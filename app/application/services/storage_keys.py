"""Storage key and public URL derivation for uploaded objects."""

import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")

DEFAULT_FILENAME = "upload"


def sanitize_file_name(value: str) -> str:
    """Replace every character outside [A-Za-z0-9._-] with an underscore.

    >>> sanitize_file_name("my file?.png")
    'my_file_.png'
    """
    return _UNSAFE_FILENAME_CHARS.sub("_", value)


def build_storage_key(folder: str, email: str, timestamp_ms: int, filename: str) -> str:
    """Return "{folder}/{email}/{timestamp_ms}-{sanitized filename}".

    Not unique when the same owner uploads the same sanitized name twice in
    one millisecond; the later put overwrites the earlier object.
    """
    return f"{folder}/{email}/{timestamp_ms}-{sanitize_file_name(filename)}"


def build_public_url(base_url: str, key: str) -> str:
    """Join base_url (one trailing slash removed) and key with "/"."""
    base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{base}/{key}"
