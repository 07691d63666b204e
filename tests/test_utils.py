"""Unit tests for utility functions (new_component.utils).

Tests cover:
- make_dir / write_text (use tmp_path)
- Rich output helpers (log_intro, log_item_completion, log_conclusion, log_error)
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import patch

import pytest
from rich.console import Console

from new_component.errors import WriteError
from new_component.utils import (
    log_conclusion,
    log_error,
    log_intro,
    log_item_completion,
    make_dir,
    write_text,
)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestMakeDir:
    @pytest.mark.unit
    async def test_creates_directory(self, tmp_path: Path):
        target = tmp_path / "Avatar"
        result = await make_dir(target)
        assert result == target
        assert target.is_dir()

    @pytest.mark.unit
    async def test_existing_directory_raises(self, tmp_path: Path):
        target = tmp_path / "Avatar"
        target.mkdir()
        with pytest.raises(WriteError) as exc_info:
            await make_dir(target)
        assert exc_info.value.path == target

    @pytest.mark.unit
    async def test_missing_parent_raises(self, tmp_path: Path):
        with pytest.raises(WriteError):
            await make_dir(tmp_path / "missing" / "Avatar")
        assert not (tmp_path / "missing").exists()


class TestWriteText:
    @pytest.mark.unit
    async def test_writes_utf8(self, tmp_path: Path):
        target = tmp_path / "Avatar.md"
        result = await write_text(target, "# Avatar café\n")
        assert result == target
        assert target.read_text(encoding="utf-8") == "# Avatar café\n"

    @pytest.mark.unit
    async def test_missing_directory_raises(self, tmp_path: Path):
        target = tmp_path / "missing" / "Avatar.js"
        with pytest.raises(WriteError) as exc_info:
            await write_text(target, "")
        assert exc_info.value.path == target
        assert str(target) in str(exc_info.value)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_log_intro(self):
        with patch("new_component.utils.console") as mock_console:
            log_intro("Avatar", "src/components/Avatar")
            printed = " ".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)
            assert "Avatar" in printed
            assert "src/components/Avatar" in printed

    @pytest.mark.unit
    def test_log_item_completion(self):
        with patch("new_component.utils.console") as mock_console:
            log_item_completion("Story created.")
            mock_console.print.assert_called_once()
            assert "Story created." in mock_console.print.call_args[0][0]

    @pytest.mark.unit
    def test_log_conclusion(self):
        with patch("new_component.utils.console") as mock_console:
            log_conclusion()
            assert mock_console.print.called

    @pytest.mark.unit
    def test_log_error_goes_to_stderr_console(self):
        with patch("new_component.utils.error_console") as mock_err, patch(
            "new_component.utils.console"
        ) as mock_out:
            log_error("Something broke")
            printed = " ".join(str(c.args[0]) for c in mock_err.print.call_args_list if c.args)
            assert "Something broke" in printed
            assert not mock_out.print.called

    @pytest.mark.unit
    def test_log_error_does_not_wrap(self):
        with patch("new_component.utils.error_console") as mock_err:
            log_error("x" * 300)
        text_calls = [c for c in mock_err.print.call_args_list if c.args]
        assert text_calls
        assert all(c.kwargs.get("soft_wrap") is True for c in text_calls)

    @pytest.mark.unit
    def test_log_error_keeps_long_path_on_one_line(self):
        narrow = Console(file=io.StringIO(), width=20, no_color=True)
        path = "/very/long/path/to/src/components/Avatar"
        with patch("new_component.utils.error_console", narrow):
            log_error(f"There's already a component at {path}.")
        assert path in narrow.file.getvalue()
