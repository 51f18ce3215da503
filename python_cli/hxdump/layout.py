# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

import logging

from .constants import OFFSET_LEN, SPACER_LEN, HEX_UNIT, BIT_UNIT

logger = logging.getLogger(__name__)


class Layout:
    """
    Fixed geometry of a rendered line, derived once from a DumpConfig.

    A line is laid out as:
        OFFSET ' ' DELIM ' ' BODY ' ' DELIM ' ' ASCII
    The spacer budget of 4 covers the four single spaces around the two
    delimiters. All lengths are in bytes of the UTF-8 encoded line.
    """

    def __init__(self, config):
        self.config = config
        self.delim = config.delim.encode('utf-8')
        self.padding = config.padding.encode('utf-8')
        self.unit = BIT_UNIT if config.bits else HEX_UNIT

        # group separators per column, none after the last full group
        between = config.width // config.group
        if config.width % config.group == 0:
            between -= 1
        self.between = between

        cols = config.columns
        self.size = (cols * config.width * self.unit) + (cols * between) + \
                ((cols - 1) * len(self.padding))
        self.ascii_size = (cols * config.width) + (cols - 1)
        self.length = OFFSET_LEN + SPACER_LEN + self.size + self.ascii_size + \
                (2 * len(self.delim))

        self.lead_delim_pos = OFFSET_LEN + 1
        self.trail_delim_pos = self.lead_delim_pos + len(self.delim) + self.size + 2
        self.body_pos = self.lead_delim_pos + len(self.delim) + 1
        self.ascii_pos = self.trail_delim_pos + len(self.delim) + 1

        logger.debug("Layout: body %d, ascii %d, line %d bytes", self.size,
                     self.ascii_size, self.length)

    def allocate(self):
        """Returns a blank line buffer with both delimiters already in place."""
        buffer = bytearray(b' ' * self.length)
        n = len(self.delim)
        buffer[self.lead_delim_pos:self.lead_delim_pos + n] = self.delim
        buffer[self.trail_delim_pos:self.trail_delim_pos + n] = self.delim
        return buffer
