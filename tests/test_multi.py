import os

import pytest

from fdlines.multi import MultiLineReader, get_next_line


@pytest.fixture
def open_fd(tmp_path):
    opened = []

    def _open(content: bytes, name: str) -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_interleaved_descriptors_keep_own_lines(open_fd):
    fd_a = open_fd(b"one\ntwo\nthree", "a.txt")
    fd_b = open_fd(b"x\ny\n", "b.txt")
    reader = MultiLineReader()
    assert reader.next_line(fd_a) == b"one\n"
    assert reader.next_line(fd_b) == b"x\n"
    assert reader.next_line(fd_a) == b"two\n"
    assert reader.next_line(fd_b) == b"y\n"
    assert reader.next_line(fd_b) is None
    assert reader.next_line(fd_a) == b"three"
    assert reader.next_line(fd_a) is None


@pytest.mark.parametrize("buffer_size", [1, 3, 1000])
def test_lines_rejoin_to_content(open_fd, buffer_size):
    content = b"first\n\nthird line\nlast"
    fd = open_fd(content, "c.txt")
    lines = list(MultiLineReader(buffer_size).lines(fd))
    assert b"".join(lines) == content
    assert lines[1] == b"\n"


def test_fd_at_limit_rejected(open_fd):
    fd = open_fd(b"data\n", "d.txt")
    with pytest.raises(ValueError):
        MultiLineReader(max_fd=fd).next_line(fd)


def test_negative_fd_rejected():
    with pytest.raises(ValueError):
        MultiLineReader().next_line(-3)


@pytest.mark.parametrize("kwargs", [{"buffer_size": 0}, {"max_fd": 0}])
def test_bad_settings_rejected(kwargs):
    with pytest.raises(ValueError):
        MultiLineReader(**kwargs)


def test_module_get_next_line_interleaves(open_fd):
    fd_a = open_fd(b"a1\na2\n", "e.txt")
    fd_b = open_fd(b"b1\n", "f.txt")
    assert get_next_line(fd_a) == b"a1\n"
    assert get_next_line(fd_b) == b"b1\n"
    assert get_next_line(fd_a) == b"a2\n"
    assert get_next_line(fd_a) is None
    assert get_next_line(fd_b) is None