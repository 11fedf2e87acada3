"""Stdio framing: ``Content-Length`` headers, a blank line, then a JSON body.

:class:`FrameReader` and :class:`FrameWriter` wrap binary streams. The reader
returns ``None`` on a clean end of stream and raises :class:`FramingError`
for frames that should be skipped.
"""

from __future__ import annotations

import json
import re
from typing import Any, BinaryIO

from inertia_rails_mcp.protocol.errors import FramingError

CONTENT_LENGTH = "content-length"

_HEADER_RE = re.compile(r"^([^:]+):\s*(.+)$")


class FrameReader:
    """Decodes framed JSON-RPC messages from a binary input stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def read(self) -> dict[str, Any] | None:
        """Read one frame and return its decoded body.

        Returns ``None`` when the stream ends before a complete body is
        available.

        Raises:
            FramingError: The headers carry no usable ``Content-Length`` or the
                body is not a JSON object.
        """
        headers = self._read_headers()
        if headers is None:
            return None

        raw_length = headers.get(CONTENT_LENGTH)
        if raw_length is None:
            raise FramingError("missing Content-Length header")
        try:
            length = int(raw_length)
        except ValueError as exc:
            raise FramingError(f"invalid Content-Length header: {raw_length!r}") from exc
        if length < 0:
            raise FramingError(f"negative Content-Length header: {length}")

        body = self._stream.read(length)
        if len(body) < length:
            return None

        try:
            decoded = json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise FramingError(f"Failed to parse JSON: {exc}") from exc

        if not isinstance(decoded, dict):
            raise FramingError("top-level JSON-RPC payload must be an object")
        return decoded

    def _read_headers(self) -> dict[str, str] | None:
        headers: dict[str, str] = {}
        while True:
            line = self._stream.readline()
            if not line:
                return None
            text = line.decode("latin-1").strip()
            if not text:
                return headers
            match = _HEADER_RE.match(text)
            if match:
                headers[match.group(1).strip().lower()] = match.group(2).strip()


class FrameWriter:
    """Encodes JSON-RPC messages onto a binary output stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, payload: dict[str, Any]) -> None:
        """Write one framed message and flush it."""
        self._stream.write(encode_frame(payload))
        self._stream.flush()


def encode_frame(payload: dict[str, Any]) -> bytes:
    """Serialize *payload* into a complete frame.

    ``Content-Length`` counts bytes of the UTF-8 body, not characters. Text
    that UTF-8 cannot carry (lone surrogates) is written as ``\\u`` escapes.
    """
    try:
        body = json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError:
        body = json.dumps(payload).encode("ascii")
    header = f"Content-Length: {len(body)}\r\n\r\n".encode("ascii")
    return header + body
