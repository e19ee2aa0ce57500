# fdlines

Read a file descriptor one line at a time and keep only what is needed
between calls.

Lines come back as `bytes`. Each line keeps its trailing `b"\n"`. The last
line of the input may not have one. When nothing is left to read, `None` is
returned.

## Installing

```
pip install fdlines
```

## Reading one descriptor

```python
import os
from fdlines.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
reader = LineReader(buffer_size=1000)

first = reader.next_line(fd)   # b"first line\n", or None at end of input
for line in reader.lines(fd):  # the remaining lines
    print(line.decode(), end="")
os.close(fd)
```

`LineReader` reads from the descriptor in chunks of `buffer_size` bytes. It
stops as soon as a chunk contains a newline. Any data read past the end of
the line is kept in one leftover buffer. The next call returns that data
first, whichever descriptor the call names. Use one `LineReader` for one
descriptor, from start to finish.

`fdlines.reader.get_next_line(fd)` does the same job. It uses one shared
reader with the default buffer size of 1000 bytes
(`fdlines.reader.DEFAULT_BUFFER_SIZE`).

## Reading several descriptors at once

```python
import os
from fdlines.multi import MultiLineReader

a = os.open("a.txt", os.O_RDONLY)
b = os.open("b.txt", os.O_RDONLY)
reader = MultiLineReader(buffer_size=1000, max_fd=1024)

print(reader.next_line(a))
print(reader.next_line(b))
print(reader.next_line(a))  # carries on where descriptor a stopped
```

`MultiLineReader` keeps a separate leftover buffer for each descriptor, so
you can switch between descriptors freely. `fdlines.multi.get_next_line(fd)`
uses one shared reader. That reader accepts descriptors below 1024
(`fdlines.multi.DEFAULT_MAX_FD`).

## Errors

The following raise `ValueError`:

- a negative descriptor;
- for `MultiLineReader`, a descriptor at or above `max_fd`;
- a `buffer_size` that is not positive;
- a `max_fd` that is not positive.

An operating-system error while reading propagates as `OSError`. Any leftover
data kept for that descriptor is then discarded.

## Scope

This is a library only. It has no command-line tool. It does not decode text,
so decode the returned bytes yourself where needed.

## Running the tests

```
pip install fdlines[test]
pytest
```