import io

import pytest

from substream import SEEK_END, SEEK_SET, SharedStream, Window, eager, preset


def test_repeated_seek_defers_to_single_stream_seek(counting, data):
    window = Window(counting, 10, 30)
    assert window.seek(5) == 5
    assert window.seek(5) == 5
    assert window.tell() == 5
    assert counting.seeks == []
    assert window.read(1) == data[15:16]
    assert counting.seeks == [(15, SEEK_SET)]


def test_tracked_cursor_skips_redundant_seeks(counting, data):
    window = Window(counting, 10, 30)
    assert window.read(5) == data[10:15]
    assert window.write(b'abc') == 3
    assert window.read(5) == data[18:23]
    assert counting.seeks == [(10, SEEK_SET)]


def test_eager_cursor_always_seeks(counting, data):
    window = Window(counting, 10, 30, setting=eager)
    assert window.read(5) == data[10:15]
    assert window.read(5) == data[15:20]
    assert counting.seeks == [(10, SEEK_SET), (15, SEEK_SET)]


def test_verifying_cursor_notices_external_moves(counting, data):
    window = Window(counting, 10, 30, setting=preset(sync='verify'))
    assert window.read(5) == data[10:15]
    assert window.read(5) == data[15:20]
    counting.seek(0)
    assert window.read(5) == data[20:25]
    assert counting.seeks == [(10, SEEK_SET), (0, SEEK_SET), (20, SEEK_SET)]


def test_tracked_cursor_forgets_position_after_error(counting, data):
    window = Window(counting, 10, 30)
    assert window.read(5) == data[10:15]
    counting.fail_with = OSError('boom')
    with pytest.raises(OSError):
        window.read(5)
    counting.fail_with = None
    assert window.read(5) == data[15:20]
    assert counting.seeks == [(10, SEEK_SET), (15, SEEK_SET)]


def test_end_probe_moves_tracked_cursor(data):
    window = Window(io.BytesIO(data[:10]), 5)
    assert window.seek(-2, SEEK_END) == 3
    assert window.read() == data[8:10]


def test_end_probe_is_recorded(counting):
    window = Window(counting, 5)
    assert window.seek(-2, SEEK_END) == 93
    window.read(1)
    assert counting.seeks == [(0, SEEK_END), (98, SEEK_SET)]


def test_shared_stream_defaults_to_eager(counting, data):
    window = SharedStream(counting).window(10, 30)
    assert window.read(5) == data[10:15]
    assert window.read(5) == data[15:20]
    assert counting.seeks == [(10, SEEK_SET), (15, SEEK_SET)]


def test_shared_stream_rejects_tracked_cursor(counting):
    with pytest.raises(ValueError):
        Window(SharedStream(counting), 10, 30, setting=preset(sync='tracked'))


def test_shared_stream_allows_verifying_cursor(counting, data):
    window = SharedStream(counting).window(10, 30, setting=preset(sync='verify'))
    assert window.read(5) == data[10:15]
    assert window.read(5) == data[15:20]
    assert counting.seeks == [(10, SEEK_SET)]


def test_unknown_sync_policy():
    with pytest.raises(ValueError):
        preset(sync='lazy')
