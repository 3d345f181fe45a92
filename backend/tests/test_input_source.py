"""
Tests for input_source.py - key decoding and the key reader.
"""

import logging
import sys
import os
from unittest.mock import MagicMock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.geometry import Direction
from input_source import Command, KeyReader, decode_key, raw_mode


class TestDecodeKey:
    """Tests for decode_key()."""

    @pytest.mark.parametrize("key,expected", [
        ("w", Command.UP), ("W", Command.UP),
        ("s", Command.DOWN), ("S", Command.DOWN),
        ("a", Command.LEFT), ("A", Command.LEFT),
        ("d", Command.RIGHT), ("D", Command.RIGHT),
        ("r", Command.RESTART), ("R", Command.RESTART),
        ("q", Command.QUIT), ("Q", Command.QUIT),
    ])
    def test_bound_keys(self, key, expected):
        """Bindings are case-insensitive."""
        assert decode_key(key) is expected

    @pytest.mark.parametrize("key", ["x", " ", "1", "\n", "", "\x1b[A", "ww"])
    def test_unbound_keys_are_ignored(self, key):
        assert decode_key(key) is None


class TestCommand:
    """Tests for the Command enum."""

    def test_directional_commands_map_to_directions(self):
        assert Command.UP.direction is Direction.UP
        assert Command.DOWN.direction is Direction.DOWN
        assert Command.LEFT.direction is Direction.LEFT
        assert Command.RIGHT.direction is Direction.RIGHT

    def test_other_commands_have_no_direction(self):
        assert Command.RESTART.direction is None
        assert Command.QUIT.direction is None


class TestKeyReader:
    """Tests for KeyReader and raw_mode()."""

    def test_keys_skips_empty_reads(self):
        """Empty reads are dropped; keys come out one at a time, in order."""
        term = MagicMock()
        term.inkey.side_effect = ["w", "", "a", "q"]

        keys = KeyReader(term).keys()

        assert [next(keys) for _ in range(3)] == ["w", "a", "q"]
        assert term.inkey.call_count == 4

    def test_keys_propagates_read_errors(self):
        term = MagicMock()
        term.inkey.side_effect = OSError("tty gone")

        with pytest.raises(OSError):
            next(KeyReader(term).keys())

    def test_raw_mode_restores_terminal_on_error(self):
        """cbreak and hidden cursor are released even when the body raises."""
        term = MagicMock()

        with pytest.raises(RuntimeError):
            with raw_mode(term):
                raise RuntimeError("boom")

        term.cbreak.return_value.__enter__.assert_called_once()
        term.cbreak.return_value.__exit__.assert_called_once()
        term.hidden_cursor.return_value.__exit__.assert_called_once()

    def test_raw_mode_logs_restore_after_release(self, caplog):
        """The restore record is written once blessed has released the terminal."""
        term = MagicMock()
        released = []

        def release(*exc_info):
            released.append(True)
            return False

        term.cbreak.return_value.__exit__.side_effect = release

        with caplog.at_level(logging.DEBUG, logger="input_source"):
            with raw_mode(term):
                assert "Terminal mode restored" not in caplog.text

        assert released == [True]
        assert "Terminal mode restored" in caplog.text
