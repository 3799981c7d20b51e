"""Unit tests for utility functions (gencomposer.utils and gencomposer.shell).

Tests cover:
- load_json / save_json (use tmp_path)
- Rich output helpers
- Shell implementations
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from gencomposer.shell import ConsoleShell, GenShell, NullShell, RecordingShell
from gencomposer.utils import (
    load_json,
    print_error,
    print_header,
    print_rows,
    print_success,
    print_summary_table,
    print_warning,
    save_json,
)


class TestJson:
    @pytest.mark.unit
    def test_save_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "data.json"
        written = save_json({"pages": ["Main"]}, target)
        assert written == target
        assert json.loads(target.read_text(encoding="utf-8")) == {"pages": ["Main"]}

    @pytest.mark.unit
    def test_load_dict(self, tmp_path: Path):
        path = tmp_path / "d.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert load_json(path) == {"a": 1}

    @pytest.mark.unit
    def test_load_list_is_wrapped(self, tmp_path: Path):
        path = tmp_path / "l.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == {"_root": [1, 2]}

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "nope.json")


class TestRichHelpers:
    @pytest.mark.unit
    def test_messages_go_through_console(self):
        with patch("gencomposer.utils.console") as console:
            print_success("done")
            print_error("failed")
            print_warning("careful")
        printed = [call.args[0] for call in console.print.call_args_list]
        assert printed == [
            "[bold green]done[/bold green]",
            "[bold red]failed[/bold red]",
            "[bold yellow]careful[/bold yellow]",
        ]

    @pytest.mark.unit
    def test_tables_and_header_render(self):
        with patch("gencomposer.utils.console") as console:
            print_header("Selection")
            print_summary_table({"Home page": "Main"})
            print_rows("Items", ["Name", "Type"], [["Main", "Page"]])
        assert console.print.call_count >= 4


class TestShells:
    @pytest.mark.unit
    def test_all_shells_satisfy_protocol(self):
        for shell in (NullShell(), ConsoleShell(), RecordingShell()):
            assert isinstance(shell, GenShell)

    @pytest.mark.unit
    def test_recording_shell(self):
        shell = RecordingShell()
        shell.write_status("s")
        shell.write_output("o")
        assert shell.status == ["s"]
        assert shell.output == ["o"]

    @pytest.mark.unit
    def test_console_shell_quiet_status(self):
        with patch("gencomposer.shell.console") as console:
            ConsoleShell(verbose=False).write_status("hidden")
            ConsoleShell(verbose=True).write_status("shown")
            ConsoleShell().write_output("always")
        printed = [call.args[0] for call in console.print.call_args_list]
        assert printed == ["  [dim]shown[/dim]", "  always"]
