# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

import logging
import zlib

from .config import DumpConfig
from .constants import REPEAT_MARKER
from .layout import Layout
from .renderer import LineRenderer

logger = logging.getLogger(__name__)


class Dumper:
    """
    Hex dump session: renders chunks of input into fixed width lines and
    elides a chunk identical to the one immediately before it.

    Not safe for concurrent use; use one Dumper per input stream. Call
    reset() before dumping an unrelated stream.
    """

    def __init__(self, config=None, **options):
        if config is None:
            config = DumpConfig(**options)
        elif options:
            config = config.replace(**options)
        self.config = config
        self.layout = Layout(config)
        self.renderer = LineRenderer(self.layout)
        self.reset()

    @property
    def block_size(self):
        return self.config.block_size

    @property
    def line_length(self):
        return self.layout.length

    def reset(self):
        logger.debug("Resetting dump state")
        self.written = 0
        self.digest = None
        self.emitted = False

    def dump(self, data) -> str:
        """
        Renders data starting at the running offset. Data longer than one
        block yields newline-joined lines; an exact repeat of the previous
        chunk yields "*" unless the config is verbose.
        """
        data = bytes(data)
        if not self.config.verbose:
            digest = zlib.adler32(data)
            if self.emitted and digest == self.digest:
                self.written += len(data)
                return REPEAT_MARKER
            self.digest = digest
        self.emitted = True

        width = self.block_size
        if not data:
            return self.renderer.render(self.written, data)
        lines = []
        for i in range(0, len(data), width):
            chunk = data[i:i + width]
            lines.append(self.renderer.render(self.written, chunk))
            self.written += len(chunk)
        return '\n'.join(lines)

    def dump_lines(self, chunks):
        """Yields dump() output for each chunk of an iterable."""
        for chunk in chunks:
            yield self.dump(chunk)


def dump(buf):
    return Dumper(verbose=True, columns=5).dump(buf)

def dump2(buf):
    return Dumper(verbose=True, columns=5, group=2).dump(buf)

def dump4(buf):
    return Dumper(verbose=True, columns=5, group=4).dump(buf)
