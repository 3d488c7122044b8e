"""Tests for CLI console output helpers."""

from __future__ import annotations

import json

import pytest

from solbuild_cli import output


class TestCreateConsole:
    """Tests for create_console()."""

    def test_no_color(self) -> None:
        """no_color disables styling."""
        console = output.create_console(no_color=True)
        assert console.no_color is True

    def test_stderr_console(self) -> None:
        """stderr=True targets standard error."""
        assert output.create_console(stderr=True).stderr is True


class TestPrinting:
    """Tests for the print helpers."""

    def test_print_json_goes_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        """JSON is printed on stdout and parses back."""
        output.set_no_color(True)
        output.print_json({"contractName": "Token", "abi": []})

        captured = capsys.readouterr()
        assert json.loads(captured.out) == {"contractName": "Token", "abi": []}
        assert captured.err == ""

    def test_status_messages_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """success, warning and error never touch stdout."""
        output.set_no_color(True)
        output.success("done")
        output.warning("careful")
        output.error("failed")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "done" in captured.err
        assert "careful" in captured.err
        assert "failed" in captured.err
