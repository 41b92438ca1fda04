from typing import Optional

import deal

# off_t is a signed 64 bit integer
MAX_OFFSET = 2 ** 63 - 1


class InvalidSeekError(ValueError):
    def __init__(self, target: int) -> None:
        super().__init__(f'Seek position out of bounds: {target}')
        self.target = target


class OffsetOverflowError(OverflowError):
    def __init__(self, offset: int) -> None:
        super().__init__(f'Offset {offset} exceeds maximum stream offset {MAX_OFFSET}')
        self.offset = offset


@deal.chain(
    deal.pre(lambda _: _.start >= 0),
    deal.pre(lambda _: _.position >= 0),
    deal.raises(OffsetOverflowError),
    deal.reason(OffsetOverflowError, lambda _: _.start + _.position > MAX_OFFSET),
    deal.ensure(lambda _: _.result == _.start + _.position),
)
def absolute(start: int, position: int) -> int:
    """Translate window relative position to absolute stream offset."""
    offset = start + position
    if offset > MAX_OFFSET:
        raise OffsetOverflowError(offset)
    return offset


@deal.chain(
    deal.pre(lambda _: _.size >= 0),
    deal.pre(lambda _: _.position >= 0),
    deal.pre(lambda _: _.bound is None or _.bound >= 0),
    deal.ensure(lambda _: 0 <= _.result <= _.size),
    deal.ensure(lambda _: _.bound is None or _.position + _.result <= max(_.bound, _.position)),
    deal.safe,
)
def clamp(size: int, position: int, bound: Optional[int] = None) -> int:
    """Limit request size to the bytes left between position and bound.

    Unbounded windows pass the request through.
    """
    if bound is None:
        return size
    return max(0, min(size, bound - position))


@deal.chain(
    deal.raises(InvalidSeekError),
    deal.reason(InvalidSeekError, lambda _: _.base + _.offset < 0),
    deal.ensure(lambda _: _.result == _.base + _.offset),
)
def relative_target(base: int, offset: int) -> int:
    """Calculate seek target from base position and signed offset."""
    target = base + offset
    if target < 0:
        raise InvalidSeekError(target)
    return target


@deal.chain(
    deal.pre(lambda _: _.start >= 0),
    deal.raises(InvalidSeekError),
    deal.reason(InvalidSeekError, lambda _: _.end < _.start),
    deal.ensure(lambda _: _.result + _.start == _.end),
)
def relative_end(end: int, start: int) -> int:
    """Translate absolute end of stream to window relative end.

    A stream ending before the window start means the window is misplaced.
    """
    if end < start:
        raise InvalidSeekError(end - start)
    return end - start
