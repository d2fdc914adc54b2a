"""UUID utilities for clinic-management."""

import time
import uuid


def generate_uuid_v7() -> uuid.UUID:
    """
    Generate a UUIDv7 with time-based ordering.
    
    Time-ordered keys keep b-tree inserts append-mostly on the primary key.
    
    Returns:
        UUIDv7 instance
    """
    # 48-bit millisecond timestamp followed by 80 random bits
    timestamp_ms = int(time.time() * 1000)
    uuid_bytes = timestamp_ms.to_bytes(6, byteorder='big') + uuid.uuid4().bytes[6:]
    
    # Version 7
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0f) | 0x70]) + uuid_bytes[7:]
    
    # RFC 4122 variant
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3f) | 0x80]) + uuid_bytes[9:]
    
    return uuid.UUID(bytes=uuid_bytes)


def generate_concurrency_stamp() -> str:
    """Generate a fresh optimistic concurrency stamp (32 hex chars)."""
    return uuid.uuid4().hex
