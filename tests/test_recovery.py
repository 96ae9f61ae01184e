"""Tests for project directory rollback."""
from unittest.mock import patch

from ngstandards.core.recovery import RecoveryManager


class TestRecoveryManager:
    """Test rollback of the project directory."""

    def test_removes_project_tree(self, tmp_path, console):
        root = tmp_path / "demo-app"
        (root / "src" / "app").mkdir(parents=True)
        (root / "package.json").write_text("{}")

        assert RecoveryManager(console).rollback(root) is True

        assert not root.exists()
        assert tmp_path.exists()
        assert "Deleted incomplete project folder: demo-app" in console.export_text()

    def test_missing_directory_is_fine(self, tmp_path, console):
        assert RecoveryManager(console).rollback(tmp_path / "never-created") is True

    def test_removal_failure_reported(self, tmp_path, console):
        """A failing delete is reported, not raised."""
        root = tmp_path / "demo-app"
        root.mkdir()

        with patch('shutil.rmtree', side_effect=PermissionError(13, "Permission denied")):
            assert RecoveryManager(console).rollback(root) is False

        assert root.exists()
        assert "Failed to delete project folder" in console.export_text()
