"""MongoDB-style identifier strings.

Identifiers are 24 lowercase hex characters: an 8 character timestamp
(seconds since the epoch) followed by 16 random characters. They are not
checked for collisions before insert; the primary key constraint is the
only guard.
"""

import random
import re
import time

OBJECT_ID_LENGTH = 24

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")


def generate_object_id(now: float | None = None) -> str:
    """Generate a new 24 character hex identifier.

    Args:
        now: Unix timestamp to embed (defaults to the current time)

    Returns:
        Identifier string
    """
    if now is None:
        now = time.time()
    timestamp = format(int(now), "08x")
    random_part = format(random.getrandbits(64), "016x")
    return (timestamp + random_part)[:OBJECT_ID_LENGTH].ljust(OBJECT_ID_LENGTH, "0")


def is_object_id(value: str) -> bool:
    """Check whether a string has the identifier shape."""
    return bool(_OBJECT_ID_RE.match(value))
