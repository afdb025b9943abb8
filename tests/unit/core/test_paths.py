"""
test_paths.py
-------------
Unit tests for project root discovery.
"""
from folio.core.paths import _get_project_root


class TestProjectRoot:
    """Tests for _get_project_root."""

    def test_source_checkout(self, project_root):
        """In a checkout the root is the directory holding content/."""
        assert _get_project_root() == project_root

    def test_installed_package_uses_cwd(self, tmp_dir, monkeypatch):
        """An installed package has no content/ beside it; the cwd is used."""
        package_file = tmp_dir / "site-packages" / "folio" / "core" / "paths.py"
        package_file.parent.mkdir(parents=True)
        package_file.touch()
        monkeypatch.chdir(tmp_dir)
        assert _get_project_root(package_file) == tmp_dir.resolve()

    def test_checkout_found_from_file(self, tmp_dir):
        """A package file inside a tree with content/ resolves to that tree."""
        package_file = tmp_dir / "folio" / "core" / "paths.py"
        package_file.parent.mkdir(parents=True)
        (tmp_dir / "content").mkdir()
        assert _get_project_root(package_file) == tmp_dir.resolve()
