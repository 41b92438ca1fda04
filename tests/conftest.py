import io
from typing import List, Optional, Tuple

import pytest

DATA = bytes(range(100))


class CountingStream(object):
    """In-memory stream recording every seek it receives."""

    def __init__(self, data: bytes = b'') -> None:
        self._buffer = io.BytesIO(data)
        self.seeks: List[Tuple[int, int]] = []
        self.flushes = 0
        self.fail_with: Optional[Exception] = None

    def readinto(self, buffer):
        if self.fail_with is not None:
            raise self.fail_with
        return self._buffer.readinto(buffer)

    def write(self, buffer):
        if self.fail_with is not None:
            raise self.fail_with
        return self._buffer.write(buffer)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self.seeks.append((offset, whence))
        return self._buffer.seek(offset, whence)

    def tell(self) -> int:
        return self._buffer.tell()

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()


@pytest.fixture
def data() -> bytes:
    return DATA


@pytest.fixture
def counting() -> CountingStream:
    return CountingStream(DATA)


class PendingStream(CountingStream):
    """Non-blocking stream with no data available and no room for writes."""

    def readinto(self, buffer):
        return None

    def write(self, buffer):
        return None


@pytest.fixture
def pending() -> PendingStream:
    return PendingStream(DATA)
