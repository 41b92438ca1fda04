import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional, Union

from .preset import preset
from .settings import _WindowSetting
from .stream import SEEK_SET, BufferLike, Stream, capable, tell

if TYPE_CHECKING:
    from .window import Window


class SharedStream(object):
    """Stream handle shared by several windows.

    Every operation runs under one lock, so only one window
    (or external caller) touches the stream cursor at a time.
    """

    def __init__(self, stream: Stream) -> None:
        self._stream = stream
        self._lock = threading.RLock()

    @property
    def raw(self) -> Stream:
        return self._stream

    @contextmanager
    def lock(self) -> Iterator[Stream]:
        """Hold exclusive access to the underlying stream."""
        with self._lock:
            yield self._stream

    def readinto(self, buffer: Union[bytearray, memoryview]) -> Optional[int]:
        with self._lock:
            return self._stream.readinto(buffer)

    def write(self, buffer: BufferLike) -> Optional[int]:
        with self._lock:
            return self._stream.write(buffer)

    def seek(self, offset: int, whence: int = SEEK_SET) -> int:
        with self._lock:
            return self._stream.seek(offset, whence)

    def tell(self) -> int:
        with self._lock:
            return tell(self._stream)

    def flush(self) -> None:
        with self._lock:
            self._stream.flush()

    def readable(self) -> bool:
        return capable(self._stream, 'readable')

    def writable(self) -> bool:
        return capable(self._stream, 'writable')

    def seekable(self) -> bool:
        return capable(self._stream, 'seekable')

    def window(
        self,
        start: int = 0,
        bound: Optional[int] = None,
        setting: _WindowSetting = preset,
    ) -> 'Window':
        """Create window over given range of the shared stream."""
        from .window import Window

        return Window(self, start, bound, setting=setting)

    def __repr__(self) -> str:
        return f'SharedStream<{self._stream!r}>'
