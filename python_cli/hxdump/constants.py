# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

DEFAULT_COLUMN_COUNT = 2
DEFAULT_COLUMN_WIDTH = 8
DEFAULT_COLUMN_GROUP = 1
DEFAULT_PADDING = "   "
DEFAULT_DELIMITER = "|"

# fixed field widths of a rendered line
OFFSET_LEN = 8
SPACER_LEN = 4

# characters per rendered byte in the body
HEX_UNIT = 2
BIT_UNIT = 8

# placeholder emitted instead of a line repeating the previous one
REPEAT_MARKER = "*"

# offsets wrap at 32 bits
OFFSET_MASK = 0xFFFFFFFF
