import logging
from dataclasses import dataclass

from .cursor import CURSORS, Cursor

SYNC_POLICIES = ('auto', *CURSORS)


@dataclass(frozen=True)
class _WindowSetting(object):
    """Setting for stream windows

    sync: str (default 'auto') -
        cursor synchronization policy, one of 'auto', 'eager', 'tracked', 'verify'.
        'auto' picks 'eager' for shared streams and 'tracked' otherwise.

    cache_end: bool (default False) -
        remember end of unbounded window after first probe instead of
        probing the stream on every seek from end.

    write_beyond: bool (default False) -
        allow writes past the bound, growing the window.

    logger: logger for window events
    """

    sync: str = 'auto'
    cache_end: bool = False
    write_beyond: bool = False
    logger: logging.Logger = logging.getLogger('substream')

    def __post_init__(self) -> None:
        if self.sync not in SYNC_POLICIES:
            raise ValueError(
                f'unknown sync policy {self.sync!r}, expected one of {SYNC_POLICIES}'
            )

    def cursor(self, shared: bool) -> Cursor:
        """Create cursor synchronization policy for a new window."""
        policy = self.sync
        if policy == 'auto':
            policy = 'eager' if shared else 'tracked'
        if shared and policy == 'tracked':
            raise ValueError('tracked cursor requires exclusive ownership of the stream')
        return CURSORS[policy]()
