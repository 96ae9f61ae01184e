"""Tests for folder layout creation."""
import pytest

from ngstandards.core.errors import ConfigParseFailure
from ngstandards.scaffold.tree import DECLARATIONS_PLACEHOLDER, FolderSpec, ProjectTreeBuilder


def files_under(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


class TestFolderSpec:
    """Test loading folder specifications."""

    def test_default_spec(self):
        """Bundled layout keeps its order and declarations stub."""
        spec = FolderSpec.load()

        assert len(spec.folders) == 18
        assert spec.folders[0] == "src/assets"
        assert spec.folders[-1] == "src/assets/images"
        assert "src/app/core/interceptors" in spec.folders
        assert spec.marker == ".gitkeep"
        assert spec.declarations_path == "src/declarations"
        assert spec.declarations_content == DECLARATIONS_PLACEHOLDER

    def test_malformed_spec(self, tmp_path):
        spec_file = tmp_path / "folders.yml"
        spec_file.write_text("folders: not-a-list\n")

        with pytest.raises(ConfigParseFailure):
            FolderSpec.load(spec_file)

    def test_missing_spec(self, tmp_path):
        with pytest.raises(ConfigParseFailure):
            FolderSpec.load(tmp_path / "absent.yml")


class TestProjectTreeBuilder:
    """Test directory creation and marker files."""

    def test_every_directory_non_empty(self, tmp_path):
        spec = FolderSpec.load()
        created = ProjectTreeBuilder().build(tmp_path, spec)

        assert len(created) == len(spec.folders)
        for folder in spec.folders:
            directory = tmp_path / folder
            assert directory.is_dir()
            assert any(directory.iterdir()), folder

    def test_markers(self, tmp_path):
        """Ordinary folders get .gitkeep, declarations get the stub."""
        spec = FolderSpec(folders=["src/app/core/guards", "src/declarations"])
        ProjectTreeBuilder().build(tmp_path, spec)

        assert (tmp_path / "src/app/core/guards/.gitkeep").read_text() == ""
        assert not (tmp_path / "src/declarations/.gitkeep").exists()
        stub = tmp_path / "src/declarations/scripts.d.ts"
        assert stub.read_text() == "// Declaration file for external scripts"

    def test_rebuild_is_idempotent(self, tmp_path):
        """Re-running leaves existing markers untouched."""
        spec = FolderSpec.load()
        builder = ProjectTreeBuilder()
        builder.build(tmp_path, spec)
        before = files_under(tmp_path)

        edited = tmp_path / "src/declarations/scripts.d.ts"
        edited.write_text("declare const gtag: any;\n")

        builder.build(tmp_path, spec)

        assert files_under(tmp_path) == before
        assert edited.read_text() == "declare const gtag: any;\n"

    def test_existing_directories_kept(self, tmp_path):
        (tmp_path / "src/assets").mkdir(parents=True)
        (tmp_path / "src/assets/logo.svg").write_text("<svg/>")

        ProjectTreeBuilder().build(tmp_path, FolderSpec(folders=["src/assets"]))

        assert (tmp_path / "src/assets/logo.svg").read_text() == "<svg/>"
        assert (tmp_path / "src/assets/.gitkeep").exists()
