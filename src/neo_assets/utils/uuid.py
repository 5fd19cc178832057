"""UUID utilities for neo-assets."""

import time
import uuid


def generate_uuid_v7() -> str:
    """Generate a UUIDv7 with time-based ordering.

    Time-ordered identifiers keep the assets primary key index append-mostly.

    Returns:
        String representation of UUIDv7
    """
    # 48 bits of millisecond timestamp followed by 80 random bits
    timestamp_bytes = int(time.time() * 1000).to_bytes(6, byteorder="big")
    uuid_bytes = timestamp_bytes + uuid.uuid4().bytes[6:]

    # version 7
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0F) | 0x70]) + uuid_bytes[7:]
    # RFC 4122 variant
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3F) | 0x80]) + uuid_bytes[9:]

    return str(uuid.UUID(bytes=uuid_bytes))


def is_valid_uuid(value: str) -> bool:
    """Check whether a string parses as a UUID."""
    try:
        uuid.UUID(str(value))
        return True
    except (ValueError, TypeError, AttributeError):
        return False
