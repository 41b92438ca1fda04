"""Policies for positioning the underlying stream cursor before an operation.

The cursor of a stream is state shared by everyone holding that stream,
so a window cannot assume the stream is still where it left it.
"""

from typing import Dict, Optional, Protocol, Type

from .stream import SEEK_SET, Stream, tell


class Cursor(Protocol):
    def sync(self, stream: Stream, offset: int) -> bool:
        """Make sure stream is positioned at offset.
        Return True if the stream had to be sought.
        """
        ...

    def moved(self, offset: int) -> None:
        """Record that stream cursor is now known to be at offset."""
        ...

    def forget(self) -> None:
        """Drop knowledge about stream cursor (e.g. after an error)."""
        ...


class EagerCursor(object):
    """Seek before every operation.

    Required when other windows or code may use the stream in between.
    """

    def sync(self, stream: Stream, offset: int) -> bool:
        stream.seek(offset, SEEK_SET)
        return True

    def moved(self, offset: int) -> None:
        pass

    def forget(self) -> None:
        pass


class TrackedCursor(object):
    """Seek only when the last position this window left the stream at differs.

    Only valid when the window exclusively owns the stream.
    """

    def __init__(self) -> None:
        self._offset: Optional[int] = None

    def sync(self, stream: Stream, offset: int) -> bool:
        if self._offset == offset:
            return False
        self._offset = stream.seek(offset, SEEK_SET)
        return True

    def moved(self, offset: int) -> None:
        self._offset = offset

    def forget(self) -> None:
        self._offset = None


class VerifyingCursor(object):
    """Ask the stream where it is and seek only if it is elsewhere."""

    def sync(self, stream: Stream, offset: int) -> bool:
        if tell(stream) == offset:
            return False
        stream.seek(offset, SEEK_SET)
        return True

    def moved(self, offset: int) -> None:
        pass

    def forget(self) -> None:
        pass


CURSORS: Dict[str, Type[Cursor]] = {
    'eager': EagerCursor,
    'tracked': TrackedCursor,
    'verify': VerifyingCursor,
}
