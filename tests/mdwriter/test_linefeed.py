"""Tests for line separator selection."""

import sys

import pytest

from mdwriter import LineSeparator


class TestLineSeparator:
    def test_values(self) -> None:
        assert LineSeparator.CRLF.value == "\r\n"
        assert LineSeparator.LF.value == "\n"
        assert len(LineSeparator) == 2

    def test_windows(self) -> None:
        assert LineSeparator.for_platform("win32") is LineSeparator.CRLF

    @pytest.mark.parametrize("platform", ["linux", "darwin", "cygwin", "freebsd"])
    def test_other_platforms(self, platform: str) -> None:
        assert LineSeparator.for_platform(platform) is LineSeparator.LF

    def test_current_host(self) -> None:
        expected = "\r\n" if sys.platform == "win32" else "\n"
        assert LineSeparator.for_platform().value == expected

    def test_coerce(self) -> None:
        assert LineSeparator.coerce("\n") is LineSeparator.LF
        assert LineSeparator.coerce(LineSeparator.CRLF) is LineSeparator.CRLF
        assert LineSeparator.coerce(None) is LineSeparator.for_platform()

    def test_coerce_rejects_other_values(self) -> None:
        with pytest.raises(ValueError):
            LineSeparator.coerce("\r")

    def test_str(self) -> None:
        assert str(LineSeparator.CRLF) == "\r\n"
