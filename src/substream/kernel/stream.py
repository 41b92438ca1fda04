import io
from typing import Optional, Protocol, Union

SEEK_SET = io.SEEK_SET
SEEK_CUR = io.SEEK_CUR
SEEK_END = io.SEEK_END

BufferLike = Union[bytes, bytearray, memoryview]


class Stream(Protocol):
    """Random access byte stream.

    Both plain binary streams (io.BytesIO, files opened with 'r+b')
    and windows over them satisfy this.
    """

    def readinto(self, buffer: Union[bytearray, memoryview]) -> Optional[int]:
        ...

    def write(self, buffer: BufferLike) -> Optional[int]:
        ...

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        ...

    def flush(self) -> None:
        ...


def tell(stream: Stream) -> int:
    """Query current absolute position of given stream."""
    query = getattr(stream, 'tell', None)
    if query is not None:
        return query()
    return stream.seek(0, SEEK_CUR)


def capable(stream: Stream, capability: str) -> bool:
    """Check stream capability, assume capable when stream cannot tell."""
    query = getattr(stream, capability, None)
    return query() if callable(query) else True
