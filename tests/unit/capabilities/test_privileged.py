"""Unit tests for the osascript privileged executor."""

import shlex
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from zapctl.capabilities.privileged import (
    OsascriptPrivilegedExecutor,
    build_removal_script,
    parse_script_output,
)
from zapctl.utils.shell import CommandResult


class TestBuildRemovalScript:
    """Tests for build_removal_script."""

    def test_paths_quoted_and_indexed(self) -> None:
        """Each path is shell-quoted and tagged with its index."""
        paths = ["/Applications/Foo.app", "/Users/me/Library/Caches/it's here"]

        script = build_removal_script(paths)

        assert f"remove_path 0 {shlex.quote(paths[0])}" in script
        assert f"remove_path 1 {shlex.quote(paths[1])}" in script

    def test_always_exits_zero(self) -> None:
        """Per-path failures never turn into a script failure."""
        script = build_removal_script(["/a"])

        assert script.rstrip().endswith("exit 0")

    def test_injection_stays_inside_quotes(self) -> None:
        """Shell metacharacters in a path are not interpreted."""
        script = build_removal_script(["/tmp/x; rm -rf ~"])

        assert "remove_path 0 '/tmp/x; rm -rf ~'" in script


class TestParseScriptOutput:
    """Tests for parse_script_output."""

    def test_mixed_statuses(self) -> None:
        """Removed and absent paths succeed; failed paths are reported."""
        paths = ["/a", "/b", "/c"]

        removed, failed = parse_script_output("removed 0\nabsent 1\nfailed 2\n", paths)

        assert removed == 1
        assert failed == ("/c",)

    def test_missing_report_counts_as_failed(self) -> None:
        """A path with no report line is treated as failed."""
        removed, failed = parse_script_output("removed 0\r", ["/a", "/b"])

        assert removed == 1
        assert failed == ("/b",)

    def test_noise_ignored(self) -> None:
        """Unrelated and out-of-range lines are skipped."""
        removed, failed = parse_script_output("hello world\nremoved 7\nremoved 0\n", ["/a"])

        assert removed == 1
        assert failed == ()


class TestDeleteUnprivileged:
    """Tests for OsascriptPrivilegedExecutor.delete_unprivileged."""

    def test_removes_directory(self, tmp_path: Path) -> None:
        """Directories are removed recursively."""
        target = tmp_path / "Foo"
        (target / "nested").mkdir(parents=True)
        (target / "nested" / "file").write_text("x")

        assert OsascriptPrivilegedExecutor().delete_unprivileged(str(target))
        assert not target.exists()

    def test_removes_file(self, tmp_path: Path) -> None:
        """Files are unlinked."""
        target = tmp_path / "prefs.plist"
        target.write_text("x")

        assert OsascriptPrivilegedExecutor().delete_unprivileged(str(target))
        assert not target.exists()

    def test_removes_symlink_not_target(self, tmp_path: Path) -> None:
        """A symlink to a directory is removed without touching the target."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "keep").write_text("x")
        link = tmp_path / "link"
        link.symlink_to(real)

        assert OsascriptPrivilegedExecutor().delete_unprivileged(str(link))
        assert not link.is_symlink()
        assert (real / "keep").exists()

    def test_absent_path_is_success(self, tmp_path: Path) -> None:
        """Deleting an absent path succeeds."""
        assert OsascriptPrivilegedExecutor().delete_unprivileged(str(tmp_path / "gone"))

    def test_permission_error_is_failure(self, tmp_path: Path) -> None:
        """An OSError reports failure instead of raising."""
        target = tmp_path / "locked"
        target.write_text("x")

        with patch("zapctl.capabilities.privileged.Path.unlink", side_effect=PermissionError):
            assert not OsascriptPrivilegedExecutor().delete_unprivileged(str(target))


class TestDeleteBatchElevated:
    """Tests for OsascriptPrivilegedExecutor.delete_batch_elevated."""

    def test_empty_batch(self) -> None:
        """An empty batch never prompts."""
        with patch("zapctl.capabilities.privileged.run_command") as mock_run:
            result = OsascriptPrivilegedExecutor().delete_batch_elevated([])

        mock_run.assert_not_called()
        assert result.success

    @patch("zapctl.capabilities.privileged.run_command")
    def test_success(self, mock_run: MagicMock) -> None:
        """Script output is parsed into the batch result."""
        mock_run.return_value = CommandResult(
            stdout="removed 0\nremoved 1\n", stderr="", returncode=0
        )

        result = OsascriptPrivilegedExecutor().delete_batch_elevated(["/a", "/b"])

        assert result.removed_count == 2
        assert result.failed_paths == ()
        assert not result.declined

        args = mock_run.call_args.args[0]
        assert args[:2] == ["osascript", "-e"]
        assert "with administrator privileges" in args[2]
        assert mock_run.call_args.kwargs["timeout"] is None

    @patch("zapctl.capabilities.privileged.run_command")
    def test_user_declined(self, mock_run: MagicMock) -> None:
        """Error -128 is reported as a declined prompt."""
        mock_run.return_value = CommandResult(
            stdout="", stderr="execution error: User canceled. (-128)", returncode=1
        )

        result = OsascriptPrivilegedExecutor().delete_batch_elevated(["/a"])

        assert result.declined
        assert result.removed_count == 0

    @patch("zapctl.capabilities.privileged.run_command")
    def test_other_failure_fails_all_paths(self, mock_run: MagicMock) -> None:
        """Any other osascript failure marks every path failed."""
        mock_run.return_value = CommandResult(stdout="", stderr="boom", returncode=1)

        result = OsascriptPrivilegedExecutor().delete_batch_elevated(["/a", "/b"])

        assert not result.declined
        assert result.failed_paths == ("/a", "/b")
        assert result.error == "boom"

    @patch("zapctl.capabilities.privileged.run_command")
    def test_failure_keeps_reported_removals(self, mock_run: MagicMock) -> None:
        """Paths the script reported before osascript failed still count as removed."""
        mock_run.return_value = CommandResult(stdout="removed 0\n", stderr="boom", returncode=1)

        result = OsascriptPrivilegedExecutor().delete_batch_elevated(["/a", "/b"])

        assert not result.declined
        assert result.removed_count == 1
        assert result.failed_paths == ("/b",)
        assert result.error == "boom"

    @patch("zapctl.capabilities.privileged.run_command")
    def test_missing_osascript_is_declined(self, mock_run: MagicMock) -> None:
        """Without osascript, escalation is treated as not granted."""
        mock_run.side_effect = FileNotFoundError("osascript")

        result = OsascriptPrivilegedExecutor().delete_batch_elevated(["/a"])

        assert result.declined

    @patch("zapctl.capabilities.privileged.run_command")
    def test_script_written_and_removed(self, mock_run: MagicMock) -> None:
        """The temporary script exists during the call and is deleted afterwards."""
        seen: dict[str, str] = {}

        def fake_run(args: list[str], **kwargs: object) -> CommandResult:
            script_path = args[2].split('quoted form of "', 1)[1].split('"', 1)[0]
            seen["path"] = script_path
            seen["body"] = Path(script_path).read_text()
            return CommandResult(stdout="removed 0\n", stderr="", returncode=0)

        mock_run.side_effect = fake_run

        OsascriptPrivilegedExecutor().delete_batch_elevated(["/a"])

        assert "remove_path 0 /a" in seen["body"]
        assert not Path(seen["path"]).exists()

    @patch("zapctl.capabilities.privileged.run_command")
    def test_script_removed_on_error(self, mock_run: MagicMock) -> None:
        """The temporary script is deleted even if the call raises."""
        seen: dict[str, str] = {}

        def fake_run(args: list[str], **kwargs: object) -> CommandResult:
            seen["path"] = args[2].split('quoted form of "', 1)[1].split('"', 1)[0]
            raise RuntimeError("unexpected")

        mock_run.side_effect = fake_run

        with pytest.raises(RuntimeError):
            OsascriptPrivilegedExecutor().delete_batch_elevated(["/a"])

        assert not Path(seen["path"]).exists()
