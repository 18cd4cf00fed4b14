"""Unit tests for the bulkedit remove command."""

import os
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

from bulkedit.cli.main import app
from bulkedit.core.errors import EditorError
from typer.testing import CliRunner

runner = CliRunner()

UNDECODABLE = os.fsdecode(b"bad\xff")
WIDE = {"COLUMNS": "200"}


def _write_config(tmp_path: Path) -> Path:
    """Write a config file using a private scratch dir."""
    path = tmp_path / "config.toml"
    lines = [f'tmp_dir = "{tmp_path / "scratch"}"', "auto_refresh = false"]
    path.write_text("\n".join(lines) + "\n")
    return path


def _delete_lines(*names: str) -> Callable[..., None]:
    """Stand-in editor that deletes the given lines and saves."""

    def fake(path: Path, application: str | None = None, *, opener: str | None = None) -> None:
        text = path.read_text(encoding="utf-8", errors="surrogateescape")
        kept = [line for line in text.splitlines() if line not in names]
        path.write_text("\n".join(kept) + "\n", encoding="utf-8", errors="surrogateescape")
        st = path.stat()
        os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + 1_000_000_000))

    return fake


def _quit(path: Path, application: str | None = None, *, opener: str | None = None) -> None:
    """Stand-in editor that quits without saving."""


class TestRemoveCommand:
    """Tests for bulkedit remove."""

    def test_removes_deleted_entries(self, workdir: Path, tmp_path: Path) -> None:
        """Deleted lines are removed and summarized."""
        config = _write_config(tmp_path)

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines("f2")):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 0, result.output
        assert "1 file(s) removed" in result.output
        assert not (workdir / "f2").exists()
        assert (workdir / "f1").exists()

    def test_nothing_to_do(self, workdir: Path, tmp_path: Path) -> None:
        """Quitting the editor prints "Nothing to do"."""
        config = _write_config(tmp_path)

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_quit):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 0
        assert "Nothing to do" in result.output
        assert list(Path(tmp_path / "scratch").iterdir()) == []

    def test_quiet(self, workdir: Path, tmp_path: Path) -> None:
        """--quiet suppresses informational output."""
        config = _write_config(tmp_path)

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_quit):
            result = runner.invoke(app, ["--quiet", "--config", str(config), "remove"])

        assert result.exit_code == 0
        assert "Nothing to do" not in result.output

    def test_dry_run(self, workdir: Path, tmp_path: Path) -> None:
        """--dry-run reports without removing."""
        config = _write_config(tmp_path)

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines("f1")):
            result = runner.invoke(app, ["--config", str(config), "remove", "--dry-run"])

        assert result.exit_code == 0
        assert "would be removed" in result.output
        assert (workdir / "f1").exists()

    def test_invalid_target(self, workdir: Path, tmp_path: Path) -> None:
        """A missing target exits with status 2."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["--config", str(config), "remove", "no_such_entry_xyz_12345"]
        )

        assert result.exit_code == 2
        assert "No such file or directory" in result.output

    def test_invalid_application(self, workdir: Path, tmp_path: Path) -> None:
        """An unknown application exits with status 3."""
        config = _write_config(tmp_path)

        result = runner.invoke(
            app, ["--config", str(config), "remove", "sub", "nonexistent_editor_xyz"]
        )

        assert result.exit_code == 3

    def test_empty_target(self, workdir: Path, tmp_path: Path) -> None:
        """An empty directory exits with status 4."""
        config = _write_config(tmp_path)

        result = runner.invoke(app, ["--config", str(config), "remove", "sub"])

        assert result.exit_code == 4
        assert "Directory empty" in result.output

    def test_editor_failure(self, workdir: Path, tmp_path: Path) -> None:
        """A failing editor exits with status 6 and leaves no temp file."""
        config = _write_config(tmp_path)

        with patch(
            "bulkedit.editing.workflow.open_in_editor",
            side_effect=EditorError("'vim' exited with status 1"),
        ):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 6
        assert "exited with status 1" in result.output
        assert list(Path(tmp_path / "scratch").iterdir()) == []

    def test_per_entry_failure(self, workdir: Path, tmp_path: Path) -> None:
        """An entry that vanished while editing fails the command."""
        config = _write_config(tmp_path)
        delete_line = _delete_lines("f3")

        def fake(path: Path, application: str | None = None, *, opener: str | None = None) -> None:
            (workdir / "f3").unlink()
            delete_line(path)

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=fake):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 1
        assert "failed" in result.output

    def test_hidden_entries_with_all(self, workdir: Path, tmp_path: Path) -> None:
        """--all lists hidden entries of the working directory."""
        config = _write_config(tmp_path)
        (workdir / ".hidden").write_text("")

        with patch(
            "bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines(".hidden")
        ):
            result = runner.invoke(app, ["--config", str(config), "remove", "--all"])

        assert result.exit_code == 0, result.output
        assert not (workdir / ".hidden").exists()

    def test_refresh_after_change(self, workdir: Path, tmp_path: Path) -> None:
        """The working directory listing is printed after a change."""
        config = _write_config(tmp_path)
        config.write_text(config.read_text().replace("auto_refresh = false", ""))

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines("f1")):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 0
        assert "sub/" in result.output

    def test_invalid_config(self, workdir: Path, tmp_path: Path) -> None:
        """A broken config file exits with status 8."""
        config = tmp_path / "config.toml"
        config.write_text("stealth_mode = [")

        result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 8

    def test_undecodable_name_removed(self, workdir: Path, tmp_path: Path) -> None:
        """A name that is not valid UTF-8 is removed and shown escaped."""
        config = _write_config(tmp_path)
        (workdir / UNDECODABLE).write_text("")

        with patch(
            "bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines(UNDECODABLE)
        ):
            result = runner.invoke(
                app, ["--verbose", "--config", str(config), "remove"], env=WIDE
            )

        assert result.exit_code == 0, result.output
        assert "bad\\xff" in result.output
        assert "1 file(s) removed" in result.output
        assert not os.path.lexists(workdir / UNDECODABLE)

    def test_undecodable_name_in_refreshed_listing(self, workdir: Path, tmp_path: Path) -> None:
        """The refreshed listing shows names that are not valid UTF-8."""
        config = _write_config(tmp_path)
        config.write_text(config.read_text().replace("auto_refresh = false", ""))
        (workdir / UNDECODABLE).write_text("")

        with patch("bulkedit.editing.workflow.open_in_editor", side_effect=_delete_lines("f1")):
            result = runner.invoke(app, ["--config", str(config), "remove"])

        assert result.exit_code == 0, result.output
        assert "bad\\xff" in result.output
        assert (workdir / UNDECODABLE).exists()

    def test_empty_working_directory(self, tmp_path: Path) -> None:
        """An empty working directory exits with status 4."""
        config = _write_config(tmp_path)
        empty = tmp_path / "empty"
        empty.mkdir()
        previous = os.getcwd()
        os.chdir(empty)
        try:
            result = runner.invoke(app, ["--config", str(config), "remove"])
        finally:
            os.chdir(previous)

        assert result.exit_code == 4
        assert list(Path(tmp_path / "scratch").glob("*")) == []
