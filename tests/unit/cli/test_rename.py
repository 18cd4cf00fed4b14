"""Unit tests for the bulkedit rename command."""

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

from bulkedit.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

UNDECODABLE = os.fsdecode(b"bad\xff")

EDITOR = "bulkedit.editing.workflow.open_in_editor"


def _write_config(tmp_path: Path) -> Path:
    """Write a config file using a private scratch dir."""
    path = tmp_path / "config.toml"
    path.write_text(f'tmp_dir = "{tmp_path / "scratch"}"\nauto_refresh = false\n')
    return path


def _replace(mapping: dict[str, str]) -> Callable[..., None]:
    """Stand-in editor that rewrites whole lines and saves."""

    def fake(path: Path, application: str | None = None, *, opener: str | None = None) -> None:
        text = path.read_text(encoding="utf-8", errors="surrogateescape")
        lines = [mapping.get(line, line) for line in text.splitlines()]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8", errors="surrogateescape")
        st = path.stat()
        os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))

    return fake


class TestRenameCommand:
    """Tests for bulkedit rename."""

    def test_no_paths_prints_usage(self, tmp_path: Path) -> None:
        """Without paths the usage is printed and the exit status is 0."""
        result = runner.invoke(app, ["rename"])

        assert result.exit_code == 0
        assert "Usage" in result.output

    def test_rename_with_yes(self, workdir: Path, tmp_path: Path) -> None:
        """--yes renames without asking."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f2": "g2"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", "f1", "f2", "f3"]
            )

        assert result.exit_code == 0, result.output
        assert "Pending Renames" in result.output
        assert "1 file(s) renamed" in result.output
        assert (workdir / "g2").exists()
        assert not (workdir / "f2").exists()

    def test_confirm_accepted(self, workdir: Path, tmp_path: Path) -> None:
        """Answering yes applies the renames."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "g1"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "f1", "f2"], input="y\n"
            )

        assert result.exit_code == 0, result.output
        assert "Continue?" in result.output
        assert (workdir / "g1").exists()

    def test_confirm_declined(self, workdir: Path, tmp_path: Path) -> None:
        """Answering no changes nothing."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "g1"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "f1", "f2"], input="n\n"
            )

        assert result.exit_code == 0
        assert "Aborted." in result.output
        assert (workdir / "f1").exists()
        assert not (workdir / "g1").exists()
        assert list((tmp_path / "scratch").iterdir()) == []

    def test_nothing_to_do(self, workdir: Path, tmp_path: Path) -> None:
        """Saving unchanged names prints "Nothing to do" without asking."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({})):
            result = runner.invoke(app, ["--config", str(config), "rename", "f1"])

        assert result.exit_code == 0
        assert "Nothing to do" in result.output
        assert "Continue?" not in result.output

    def test_line_mismatch(self, workdir: Path, tmp_path: Path) -> None:
        """Deleting a line exits with status 7."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f2": ""})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", "f1", "f2"]
            )

        assert result.exit_code == 7
        assert "Line mismatch" in result.output
        assert (workdir / "f1").exists()
        assert (workdir / "f2").exists()

    def test_missing_paths_skipped(self, workdir: Path, tmp_path: Path) -> None:
        """Missing paths are reported; the rest is still renamed."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "g1"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", "ghost", "f1"]
            )

        assert result.exit_code == 0, result.output
        assert "'ghost'" in result.output
        assert (workdir / "g1").exists()

    def test_no_valid_paths(self, workdir: Path, tmp_path: Path) -> None:
        """Only missing paths exits with status 4."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["--config", str(config), "rename", "ghost"])

        assert result.exit_code == 4
        assert "No valid file names" in result.output

    def test_rename_failure(self, workdir: Path, tmp_path: Path) -> None:
        """A failed rename exits with status 1 and shows the failure."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "nodir/g1", "f2": "g2"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", "f1", "f2"]
            )

        assert result.exit_code == 1
        assert "Failed Renames" in result.output
        assert "1 file(s) renamed, 1 failed" in result.output
        assert (workdir / "g2").exists()

    def test_dry_run(self, workdir: Path, tmp_path: Path) -> None:
        """--dry-run shows renames without applying or asking."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "g1"})):
            result = runner.invoke(app, ["--config", str(config), "rename", "-n", "f1"])

        assert result.exit_code == 0
        assert "would be renamed" in result.output
        assert (workdir / "f1").exists()

    def test_application_option(self, workdir: Path, tmp_path: Path) -> None:
        """--app selects the editor application."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({})) as mock_editor:
            runner.invoke(app, ["--config", str(config), "rename", "--app", "nano", "f1"])

        assert mock_editor.call_args.args[1] == "nano"

    def test_undecodable_name_renamed(self, workdir: Path, tmp_path: Path) -> None:
        """A name that is not valid UTF-8 can be renamed and is shown escaped."""
        config = _write_config(tmp_path)
        (workdir / UNDECODABLE).write_text("")

        with patch(EDITOR, side_effect=_replace({UNDECODABLE: "good"})):
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", UNDECODABLE]
            )

        assert result.exit_code == 0, result.output
        assert "bad\\xff" in result.output
        assert "1 file(s) renamed" in result.output
        assert (workdir / "good").exists()
        assert not os.path.lexists(workdir / UNDECODABLE)

    def test_duplicate_argument_reported(self, workdir: Path, tmp_path: Path) -> None:
        """A path given twice is listed once and the repeat is reported."""
        config = _write_config(tmp_path)

        with patch(EDITOR, side_effect=_replace({"f1": "g1"})) as mock_editor:
            result = runner.invoke(
                app, ["--config", str(config), "rename", "--yes", "f1", "./f1"]
            )

        assert result.exit_code == 0, result.output
        assert "Duplicate argument" in result.output
        assert mock_editor.call_count == 1
        assert (workdir / "g1").exists()
