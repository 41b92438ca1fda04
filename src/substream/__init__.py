from .kernel.offset import MAX_OFFSET, InvalidSeekError, OffsetOverflowError
from .kernel.preset import eager, preset
from .kernel.shared import SharedStream
from .kernel.stream import SEEK_CUR, SEEK_END, SEEK_SET, Stream
from .kernel.window import Window

__all__ = [
    'MAX_OFFSET',
    'InvalidSeekError',
    'OffsetOverflowError',
    'SEEK_CUR',
    'SEEK_END',
    'SEEK_SET',
    'SharedStream',
    'Stream',
    'Window',
    'eager',
    'preset',
]
