import io
import functools
from typing import Callable, Iterator, Optional

from substream.kernel.stream import BufferLike


class TruncatedCopyError(EOFError):
    def __init__(self, copied: int, remaining: int) -> None:
        super().__init__(
            f'Target stream stopped accepting data after {copied} bytes, {remaining} bytes left'
        )
        self.copied = copied
        self.remaining = remaining


def buffered(
    source: Callable[[int], bytes], buffer_size: int = io.DEFAULT_BUFFER_SIZE
) -> Iterator[bytes]:
    return iter(functools.partial(source, buffer_size), b'')


def write_all(write: Callable[[BufferLike], Optional[int]], data: BufferLike) -> int:
    """Write whole buffer, retrying partial writes."""
    view = memoryview(data).cast('B')
    written = 0
    while written < len(view):
        count = write(view[written:])
        if not count:
            raise TruncatedCopyError(written, len(view) - written)
        written += count
    return written


def copy(source, target, buffer_size: int = io.DEFAULT_BUFFER_SIZE) -> int:
    """Copy everything readable from source to target, return number of bytes copied."""
    total = 0
    for buffer in buffered(source.read, buffer_size):
        try:
            total += write_all(target.write, buffer)
        except TruncatedCopyError as exc:
            raise TruncatedCopyError(total + exc.copied, exc.remaining) from exc
    return total
