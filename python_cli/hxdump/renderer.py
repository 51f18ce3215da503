# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

from .constants import OFFSET_MASK

_HEX_TT = [f'{i:02x}'.encode('ascii') for i in range(256)]
_BIT_TT = [f'{i:08b}'.encode('ascii') for i in range(256)]
_PRN_TT = bytes(i if 32 <= i < 127 else ord('.') for i in range(256))

class LineRenderer:
    """
    Fills a pre-allocated line buffer from one block of input.

    The buffer is owned by the renderer and overwritten on every call; the
    returned string is decoded from it at the point of return.
    """

    def __init__(self, layout):
        self.layout = layout
        self.config = layout.config
        self.buffer = layout.allocate()
        self.cursor = 0
        self._units = _BIT_TT if self.config.bits else _HEX_TT

    def render(self, offset, data):
        data = memoryview(bytes(data))
        if len(data) > self.config.block_size:
            raise ValueError("Input of %d bytes exceeds block size %d" %
                             (len(data), self.config.block_size))
        self.cursor = 0
        self._write_offset(offset)
        self._seek(self.layout.body_pos)
        self._write_body(data)
        self._seek(self.layout.ascii_pos)
        self._write_ascii(data)
        return self.buffer.decode('utf-8')

    def _write_offset(self, offset):
        self._write(b'%08x' % (offset & OFFSET_MASK))

    def _write_body(self, data):
        width = self.config.width
        group = self.config.group
        padding = self.layout.padding
        n = len(data)
        start = self.cursor
        for i in range(0, n, width):
            j = min(i + width, n)
            g = 0
            for b in data[i:j]:
                if g >= group:
                    self._write(b' ')
                    g = 0
                self._write(self._units[b])
                g += 1
            if j < n:
                self._write(padding)
        self._fill(start + self.layout.size)

    def _write_ascii(self, data):
        width = self.config.width
        start = self.cursor
        text = bytes(data).translate(_PRN_TT)
        for i in range(0, len(text), width):
            if i > 0:
                self._write(b' ')
            self._write(text[i:i + width])
        self._fill(start + self.layout.ascii_size)

    def _seek(self, pos):
        # skips the spacer and delimiter written by Layout.allocate
        self.cursor = pos

    def _write(self, chunk):
        end = self.cursor + len(chunk)
        self.buffer[self.cursor:end] = chunk
        self.cursor = end

    def _fill(self, end):
        if self.cursor < end:
            self._write(b' ' * (end - self.cursor))
