from __future__ import annotations

import re

# RFC 7230 token characters.
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9a-z]+"
_MIME_RE = re.compile(f"^{_TOKEN}/{_TOKEN}$")


def parse_mime(content_type: str | None) -> str | None:
    """
    Return the lower-cased ``type/subtype`` of a Content-Type value.

    Parameters such as ``charset`` are dropped. ``None`` is returned when the
    header is missing or does not have a ``type/subtype`` shape.
    """
    if content_type is None:
        return None
    mime = content_type.lower().split(";")[0].strip()
    if not _MIME_RE.match(mime):
        return None
    return mime


def quote_header_value(value: str) -> str:
    """
    Render a header value as a double-quoted string.

    Visible ASCII and tabs are kept as they are. Double quotes are
    backslash-escaped and every other byte of the UTF-8 encoding is written
    as ``\\x`` followed by its lower-case hex value.
    """
    escaped = []
    for byte in value.encode("utf-8"):
        if byte == 0x22:
            escaped.append('\\"')
        elif byte == 0x09 or 0x20 <= byte < 0x7F:
            escaped.append(chr(byte))
        else:
            escaped.append(f"\\x{byte:x}")
    return '"' + "".join(escaped) + '"'
