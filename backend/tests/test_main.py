"""
Tests for main.py - argument parsing, logging setup and the play session.
"""

import logging
import sys
import os
from unittest.mock import MagicMock, patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import main
from input_source import InputError


class TestParseArgs:
    """Tests for parse_args()."""

    def test_defaults(self):
        args = main.parse_args([])
        assert args.seed is None
        assert args.log_file is None
        assert args.log_level == "INFO"

    def test_custom_values(self):
        args = main.parse_args(["--seed", "42", "--log-file", "snake.log", "--log-level", "DEBUG"])
        assert args.seed == 42
        assert args.log_file == "snake.log"
        assert args.log_level == "DEBUG"


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_without_file_drops_records(self):
        main.configure_logging(None)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_with_file_writes_records(self, tmp_path):
        log_file = tmp_path / "snake.log"
        main.configure_logging(str(log_file), "DEBUG")

        logging.getLogger("domain.game_state").info("food eaten")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "food eaten" in log_file.read_text()
        main.configure_logging(None)


class TestPlay:
    """Tests for play() and main()."""

    @patch("main.GameLoop")
    @patch("main.TerminalRenderer")
    def test_normal_quit_exits_zero(self, mock_renderer_cls, mock_loop_cls):
        """Quit restores the terminal, says goodbye and returns 0."""
        term = MagicMock()

        assert main.play(term, seed=1) == 0

        mock_loop_cls.return_value.run.assert_called_once()
        mock_renderer_cls.return_value.farewell.assert_called_once()
        term.cbreak.return_value.__exit__.assert_called_once()

    @patch("main.GameLoop")
    @patch("main.TerminalRenderer")
    def test_input_error_exits_one(self, mock_renderer_cls, mock_loop_cls, capsys):
        term = MagicMock()
        error = InputError("Reading keyboard input failed")
        error.__cause__ = OSError("tty gone")
        mock_loop_cls.return_value.run.side_effect = error

        assert main.play(term) == 1

        term.cbreak.return_value.__exit__.assert_called_once()
        mock_renderer_cls.return_value.farewell.assert_not_called()
        assert "tty gone" in capsys.readouterr().err

    @patch("main.GameLoop")
    @patch("main.TerminalRenderer")
    def test_output_error_exits_one(self, mock_renderer_cls, mock_loop_cls, capsys):
        """A broken screen ends the session cleanly instead of with a traceback."""
        term = MagicMock()
        mock_loop_cls.return_value.run.side_effect = BrokenPipeError("stdout closed")

        assert main.play(term) == 1

        term.cbreak.return_value.__exit__.assert_called_once()
        mock_renderer_cls.return_value.farewell.assert_not_called()
        assert "stdout closed" in capsys.readouterr().err

    @patch("main.play")
    def test_main_requires_tty(self, mock_play):
        with patch("sys.stdin") as mock_stdin:
            mock_stdin.isatty.return_value = False
            assert main.main([]) == 1
        mock_play.assert_not_called()
