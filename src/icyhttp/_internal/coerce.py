"""Single-value extraction and strict unsigned integer parsing.

A raw header value is the list of byte strings a host HTTP layer
collected for one header name, one entry per occurrence on the wire.
The ICY headers are single-valued: anything other than exactly one
occurrence is unusable.
"""

import logging
import re
from collections.abc import Sequence

logger = logging.getLogger("icyhttp.headers")

U32_MAX = 2**32 - 1
USIZE_MAX = 2**64 - 1

type RawHeaderValue = Sequence[bytes]

# ASCII digits only: no sign, no whitespace, no underscores.
_UNSIGNED = re.compile(rb"[0-9]+")


def one_raw_value(raw: RawHeaderValue) -> bytes | None:
    """Return the only entry of *raw*, or ``None`` unless there is exactly one."""
    # A bare string is a single value, not a list of occurrences.
    if isinstance(raw, (str, bytes, bytearray)):
        logger.debug("Rejecting raw header value: not a sequence of occurrences %r", raw)
        return None
    if len(raw) != 1:
        logger.debug("Rejecting raw header value: multiplicity %d", len(raw))
        return None
    value = raw[0]
    if isinstance(value, str):
        try:
            return value.encode("ascii")
        except UnicodeEncodeError:
            logger.debug("Rejecting raw header value: syntax %r", value)
            return None
    return bytes(value)


def parse_unsigned(value: bytes, *, max_value: int) -> int | None:
    """Parse *value* as a base-10 unsigned integer no larger than *max_value*."""
    if _UNSIGNED.fullmatch(value) is None:
        logger.debug("Rejecting raw header value: syntax %r", value)
        return None
    # Bound the digit count first; int() refuses very long digit strings.
    digits = value.lstrip(b"0") or b"0"
    if len(digits) > len(str(max_value)):
        logger.debug("Rejecting raw header value: overflow %d digits", len(digits))
        return None
    number = int(digits)
    if number > max_value:
        logger.debug("Rejecting raw header value: overflow %d > %d", number, max_value)
        return None
    return number


def from_one_raw_str(raw: RawHeaderValue, *, max_value: int) -> int | None:
    """Reduce *raw* to one unsigned integer, or ``None`` if it is unusable.

    Absent, repeated, malformed and overflowing values all come back as
    ``None``; the caller treats every one of them as a missing header.
    """
    value = one_raw_value(raw)
    if value is None:
        return None
    return parse_unsigned(value, max_value=max_value)
