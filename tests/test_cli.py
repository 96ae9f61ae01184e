"""Tests for the ngstandards command line."""
from pathlib import Path

from typer.testing import CliRunner

from ngstandards.cli import app
from ngstandards.core.errors import ProjectExistsError
from ngstandards.scaffold.core import CreationResult, ProjectCreator

runner = CliRunner()


class TestMainHelp:
    """Test top-level CLI output."""

    def test_main_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "create" in result.stdout
        assert "templates" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.startswith("ngstandards ")

    def test_templates_listing(self):
        result = runner.invoke(app, ["templates"])

        assert result.exit_code == 0
        assert "Dockerfile" in result.stdout
        assert "github-cd.yml" in result.stdout


class TestCreateCommand:
    """Test exit codes of `create`."""

    def test_success_exit_code(self, monkeypatch):
        calls = []

        def fake_create(self, project_name, output_dir=None):
            calls.append((project_name, output_dir))
            return CreationResult(project_root=Path("/tmp") / project_name, success=True)

        monkeypatch.setattr(ProjectCreator, 'create', fake_create)

        result = runner.invoke(app, ["create", "demo-app"])

        assert result.exit_code == 0
        assert calls == [("demo-app", None)]

    def test_failure_exit_code(self, monkeypatch):
        """A rolled back run exits non-zero."""
        def fake_create(self, project_name, output_dir=None):
            return CreationResult(
                project_root=Path("/tmp") / project_name,
                success=False,
                failed_step="docker",
                error="boom",
                rolled_back=True,
            )

        monkeypatch.setattr(ProjectCreator, 'create', fake_create)

        result = runner.invoke(app, ["create", "demo-app"])

        assert result.exit_code == 1

    def test_interrupted_exit_code(self, monkeypatch):
        def fake_create(self, project_name, output_dir=None):
            return CreationResult(
                project_root=Path("/tmp") / project_name,
                success=False,
                rolled_back=True,
                interrupted=True,
            )

        monkeypatch.setattr(ProjectCreator, 'create', fake_create)

        assert runner.invoke(app, ["create", "demo-app"]).exit_code == 130

    def test_existing_directory_error(self, monkeypatch):
        def fake_create(self, project_name, output_dir=None):
            raise ProjectExistsError(Path("/tmp") / project_name)

        monkeypatch.setattr(ProjectCreator, 'create', fake_create)

        result = runner.invoke(app, ["create", "demo-app"])

        assert result.exit_code == 1
        assert "already exists" in result.stdout

    def test_output_dir_option(self, monkeypatch, tmp_path):
        calls = []

        def fake_create(self, project_name, output_dir=None):
            calls.append(output_dir)
            return CreationResult(project_root=output_dir / project_name, success=True)

        monkeypatch.setattr(ProjectCreator, 'create', fake_create)

        result = runner.invoke(app, ["create", "demo-app", "--output-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert calls == [tmp_path]

    def test_mock_mode_notice(self, monkeypatch):
        monkeypatch.setenv('NGSTD_MOCK', '1')
        monkeypatch.setattr(
            ProjectCreator, 'create',
            lambda self, name, output_dir=None: CreationResult(project_root=Path(name), success=True),
        )

        result = runner.invoke(app, ["create", "demo-app"])

        assert result.exit_code == 0
        assert "Mock mode" in result.stdout

    def test_mock_mode_end_to_end(self, monkeypatch, tmp_path):
        """Mock mode runs every step without an Angular CLI on the machine."""
        monkeypatch.setenv('NGSTD_MOCK', '1')

        result = runner.invoke(
            app, ["create", "demo-app", "-o", str(tmp_path)], input="n\nGitHub\n"
        )

        assert result.exit_code == 0, result.stdout
        assert "created successfully" in result.stdout
        root = tmp_path / "demo-app"
        assert (root / ".github" / "workflows" / "ci.yml").exists()
        assert (root / "Dockerfile").exists()
        assert not (root / "package.json").exists()
