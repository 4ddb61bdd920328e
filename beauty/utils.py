"""String helpers shared across the package: splitting, URL escaping, ids."""

from __future__ import annotations

import re
import secrets
import sys
import threading

_UNSAFE = re.compile(rb"[^A-Za-z0-9\-._~]")
_ESCAPED = re.compile(rb"%([0-9A-Fa-f]{2})")

# Linux limits thread names to 16 bytes including the terminating NUL.
_THREAD_NAME_MAX = 15


def split(text: str, sep: str = "/") -> list[str]:
    """Split ``text`` on ``sep``, keeping empty leading and trailing parts.

    An empty string gives one empty part, and a trailing separator gives a
    trailing empty part.
    """
    return text.split(sep)


def escape(text: str) -> str:
    """Percent-encode every byte outside ``A-Z a-z 0-9 - . _ ~``."""
    data = text.encode("utf-8", "surrogateescape")
    escaped = _UNSAFE.sub(lambda m: b"%%%02X" % m.group(0)[0], data)
    return escaped.decode("ascii")


def unescape(text: str) -> str:
    """Decode ``%XX`` sequences and turn ``+`` into a space, in one pass."""
    data = text.encode("utf-8", "surrogateescape").replace(b"+", b" ")
    unescaped = _ESCAPED.sub(lambda m: bytes([int(m.group(1), 16)]), data)
    return unescaped.decode("utf-8", "surrogateescape")


def make_uuid() -> str:
    """Return 32 random upper-case hexadecimal digits."""
    return secrets.token_hex(16).upper()


def thread_set_name(name: str) -> None:
    """Name the calling thread, truncated to the length the OS allows."""
    threading.current_thread().name = name[:_THREAD_NAME_MAX]


def fail(error: object, what: str) -> None:
    """Report a failure on standard error."""
    print(f"{what}: {error}", file=sys.stderr)