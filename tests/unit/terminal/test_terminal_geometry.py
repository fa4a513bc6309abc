"""Tests for terminal width resolution and its fallbacks."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from lazyls.terminal import DEFAULT_COLUMNS, resolve_terminal_columns, stream_is_tty


class _FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 1


class TerminalGeometryTests(unittest.TestCase):
    def test_non_tty_stream_uses_default_width(self) -> None:
        query = mock.Mock()

        self.assertEqual(resolve_terminal_columns(io.StringIO(), get_terminal_size=query), DEFAULT_COLUMNS)
        query.assert_not_called()

    def test_tty_width_is_used(self) -> None:
        query = mock.Mock(return_value=os.terminal_size((132, 40)))

        self.assertEqual(resolve_terminal_columns(_FakeTty(), get_terminal_size=query), 132)
        query.assert_called_once_with(1)

    def test_failed_query_falls_back(self) -> None:
        query = mock.Mock(side_effect=OSError("not a terminal"))

        self.assertEqual(resolve_terminal_columns(_FakeTty(), get_terminal_size=query), DEFAULT_COLUMNS)

    def test_non_positive_width_falls_back(self) -> None:
        query = mock.Mock(return_value=os.terminal_size((0, 0)))

        self.assertEqual(resolve_terminal_columns(_FakeTty(), fallback=100, get_terminal_size=query), 100)

    def test_invalid_fallback_is_replaced_by_default(self) -> None:
        self.assertEqual(resolve_terminal_columns(io.StringIO(), fallback=0), DEFAULT_COLUMNS)

    def test_each_call_requeries(self) -> None:
        query = mock.Mock(side_effect=[os.terminal_size((40, 10)), os.terminal_size((90, 10))])
        stream = _FakeTty()

        self.assertEqual(resolve_terminal_columns(stream, get_terminal_size=query), 40)
        self.assertEqual(resolve_terminal_columns(stream, get_terminal_size=query), 90)

    def test_stream_is_tty_handles_closed_streams(self) -> None:
        stream = io.StringIO()
        stream.close()

        self.assertFalse(stream_is_tty(stream))


if __name__ == "__main__":
    unittest.main()
