"""Tests for the line geometry computed from dumper options."""

import pytest

from hxdump.config import DumpConfig
from hxdump.layout import Layout


@pytest.mark.unit
class TestLayout:
    """Body width, line length and delimiter placement."""

    def test_default_geometry(self):
        layout = Layout(DumpConfig())
        # 2 columns of "00 01 02 03 04 05 06 07" joined by 3 spaces
        assert layout.between == 7
        assert layout.size == 49
        assert layout.ascii_size == 17
        assert layout.length == 80

    @pytest.mark.parametrize("width,group,between", [
        (8, 1, 7),
        (8, 2, 3),
        (8, 3, 2),
        (8, 4, 1),
        (8, 8, 0),
        (6, 4, 1),
        (1, 1, 0),
    ])
    def test_group_separators(self, width, group, between):
        assert Layout(DumpConfig(width=width, group=group)).between == between

    def test_bit_mode_widens_body(self):
        hex_layout = Layout(DumpConfig(columns=1, width=4))
        bit_layout = Layout(DumpConfig(columns=1, width=4, bits=True))
        assert hex_layout.size == 4 * 2 + 3
        assert bit_layout.size == 4 * 8 + 3

    def test_padding_and_delimiter_lengths(self):
        layout = Layout(DumpConfig(columns=3, width=4, padding="-", delim="<>"))
        assert layout.size == 3 * 4 * 2 + 3 * 3 + 2 * 1
        assert layout.length == 8 + 4 + layout.size + (3 * 4 + 2) + 2 * 2

    def test_allocate_places_delimiters(self):
        layout = Layout(DumpConfig(delim="||"))
        buffer = layout.allocate()
        assert len(buffer) == layout.length
        assert buffer[9:11] == b"||"
        assert buffer[layout.trail_delim_pos:layout.trail_delim_pos + 2] == b"||"
        assert layout.trail_delim_pos == 9 + 2 + layout.size + 2
        others = buffer[:9] + buffer[11:layout.trail_delim_pos] + buffer[layout.trail_delim_pos + 2:]
        assert set(others) == {ord(" ")}

    def test_field_positions(self):
        layout = Layout(DumpConfig())
        assert layout.body_pos == 11
        assert layout.ascii_pos == 11 + 49 + 3
        assert layout.ascii_pos + layout.ascii_size == layout.length

    def test_clamped_group_matches_width(self):
        clamped = Layout(DumpConfig(width=8, group=100))
        exact = Layout(DumpConfig(width=8, group=8))
        assert (clamped.size, clamped.length) == (exact.size, exact.length)
