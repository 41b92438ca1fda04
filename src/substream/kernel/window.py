import io
from contextlib import nullcontext
from typing import ContextManager, List, Optional, Union

from .offset import MAX_OFFSET, OffsetOverflowError, absolute, clamp, relative_end, relative_target
from .preset import preset
from .settings import _WindowSetting
from .shared import SharedStream
from .stream import SEEK_CUR, SEEK_END, SEEK_SET, BufferLike, Stream, capable


class Window(object):
    """View over a byte range of a stream with its own zero based positions.

    stream: underlying stream, or a SharedStream when other windows use it too

    start: absolute offset of position 0 in the underlying stream

    bound: length of the window, None extends it to the end of the stream

    Nothing is read or sought at construction.
    Reads stop at the bound and writes are cut at it,
    exhausted windows report 0 bytes as ordinary streams do at EOF.
    """

    def __init__(
        self,
        stream: Union[Stream, SharedStream],
        start: int = 0,
        bound: Optional[int] = None,
        setting: _WindowSetting = preset,
    ) -> None:
        if start < 0:
            raise ValueError(f'negative window start: {start}')
        if start > MAX_OFFSET:
            raise OffsetOverflowError(start)
        if bound is not None:
            if bound < 0:
                raise ValueError(f'negative window bound: {bound}')
            absolute(start, bound)
        self._stream = stream
        self._start = start
        self._bound = bound
        self._pos = 0
        self._end: Optional[int] = None
        self._setting = setting
        self._cursor = setting.cursor(shared=isinstance(stream, SharedStream))
        self._closed = False

    @classmethod
    def from_current(
        cls,
        stream: Union[Stream, SharedStream],
        bound: Optional[int] = None,
        setting: _WindowSetting = preset,
    ) -> 'Window':
        """Create window starting at current position of given stream."""
        return cls.from_seek(stream, 0, SEEK_CUR, bound=bound, setting=setting)

    @classmethod
    def from_seek(
        cls,
        stream: Union[Stream, SharedStream],
        offset: int,
        whence: int = SEEK_SET,
        bound: Optional[int] = None,
        setting: _WindowSetting = preset,
    ) -> 'Window':
        """Seek given stream and create window starting at resulting position."""
        start = stream.seek(offset, whence)
        return cls(stream, start, bound, setting=setting)

    @property
    def start(self) -> int:
        return self._start

    @property
    def bound(self) -> Optional[int]:
        return self._bound

    @property
    def raw(self) -> Union[Stream, SharedStream]:
        return self._stream

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_closed(self) -> None:
        if self._closed:
            raise ValueError('I/O operation on closed window')

    def _access(self) -> ContextManager[Stream]:
        if isinstance(self._stream, SharedStream):
            return self._stream.lock()
        return nullcontext(self._stream)

    def _sync(self, stream: Stream) -> int:
        offset = absolute(self._start, self._pos)
        if self._cursor.sync(stream, offset):
            self._setting.logger.debug(f'synced stream cursor to {offset}')
        return offset

    def _limit(self, size: int, operation: str) -> int:
        limit = clamp(size, self._pos, self._bound)
        if limit < size:
            self._setting.logger.debug(
                f'{operation} of {size} bytes at {self._pos} cut to {limit} by bound {self._bound}'
            )
        return limit

    def readinto(self, buffer: Union[bytearray, memoryview]) -> Optional[int]:
        """Read bytes into given buffer, return number of bytes read."""
        self._check_closed()
        view = memoryview(buffer).cast('B')
        size = self._limit(len(view), 'read')
        if not size:
            return 0
        with self._access() as stream:
            try:
                offset = self._sync(stream)
                count = stream.readinto(view[:size])
            except Exception:
                self._cursor.forget()
                raise
            if count is None:
                # non-blocking stream has no data yet
                self._cursor.moved(offset)
                return None
            self._cursor.moved(offset + count)
        self._pos += count
        return count

    def read(self, size: Optional[int] = -1) -> Optional[bytes]:
        """Read up to size bytes, negative or None size reads to end of window."""
        if size is None or size < 0:
            return self.readall()
        buffer = bytearray(clamp(size, self._pos, self._bound))
        count = self.readinto(buffer)
        if count is None:
            return None
        return bytes(buffer[:count])

    def readall(self) -> Optional[bytes]:
        """Read until end of window, None if a non-blocking stream has no data yet."""
        chunks: List[bytes] = []
        while True:
            chunk = self.read(io.DEFAULT_BUFFER_SIZE)
            if chunk is None and not chunks:
                return None
            if not chunk:
                return b''.join(chunks)
            chunks.append(chunk)

    def write(self, buffer: BufferLike) -> Optional[int]:
        """Write bytes from given buffer, return number of bytes written."""
        self._check_closed()
        view = memoryview(buffer).cast('B')
        size = len(view) if self._setting.write_beyond else self._limit(len(view), 'write')
        if not size:
            return 0
        with self._access() as stream:
            try:
                offset = self._sync(stream)
                absolute(offset, size)
                count = stream.write(view[:size])
            except Exception:
                self._cursor.forget()
                raise
            if count is None:
                self._cursor.moved(offset)
                return None
            self._cursor.moved(offset + count)
        self._pos += count
        self._grow()
        return count

    def _grow(self) -> None:
        if self._bound is not None and self._pos > self._bound:
            self._setting.logger.warning(
                f'window at {self._start} grown from {self._bound} to {self._pos} bytes'
            )
            self._bound = self._pos
        if self._end is not None and self._pos > self._end:
            self._end = self._pos

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        """Change window position, return the new position.

        Seeking past the bound is allowed. The underlying stream
        is not touched until the next read or write.
        """
        self._check_closed()
        if whence == SEEK_SET:
            base = 0
        elif whence == SEEK_CUR:
            base = self._pos
        elif whence == SEEK_END:
            base = self._find_end()
        else:
            raise ValueError(
                f'invalid whence ({whence}, should be {SEEK_SET}, {SEEK_CUR} or {SEEK_END})'
            )
        target = relative_target(base, offset)
        absolute(self._start, target)
        self._pos = target
        return self._pos

    def _find_end(self) -> int:
        if self._bound is not None:
            return self._bound
        if self._setting.cache_end and self._end is not None:
            return self._end
        with self._access() as stream:
            try:
                end = stream.seek(0, SEEK_END)
            except Exception:
                self._cursor.forget()
                raise
            self._cursor.moved(end)
        self._setting.logger.debug(f'probed stream end at {end}')
        rel_end = relative_end(end, self._start)
        if self._setting.cache_end:
            self._end = rel_end
        return rel_end

    def tell(self) -> int:
        self._check_closed()
        return self._pos

    def flush(self) -> None:
        self._check_closed()
        with self._access() as stream:
            stream.flush()

    def readable(self) -> bool:
        self._check_closed()
        return capable(self._stream, 'readable')

    def writable(self) -> bool:
        self._check_closed()
        return capable(self._stream, 'writable')

    def seekable(self) -> bool:
        self._check_closed()
        return capable(self._stream, 'seekable')

    def close(self) -> None:
        """Close the window, the underlying stream stays open."""
        self._closed = True

    def detach(self) -> Union[Stream, SharedStream]:
        """Close the window and return the underlying stream."""
        self._check_closed()
        self.close()
        return self._stream

    def __enter__(self) -> 'Window':
        self._check_closed()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __len__(self) -> int:
        if self._bound is None:
            raise TypeError('unbounded window has no length')
        return self._bound

    def __repr__(self) -> str:
        bound = '' if self._bound is None else self._bound
        return f'Window<{self._start}+{bound}>[{self._pos}]'
