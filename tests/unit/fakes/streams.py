from typing import AsyncIterator


async def as_chunks(*parts: bytes) -> AsyncIterator[bytes]:
    """Async byte stream shaped like Request.stream()."""
    for part in parts:
        yield part
