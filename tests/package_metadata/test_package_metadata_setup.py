import pytest
from unittest.mock import patch
import importlib
from importlib.metadata import PackageNotFoundError
import mindat_api.package_metadata
from mindat_api.package_metadata import directories, get_default_writable_directory


@pytest.fixture
def restore_package_metadata_version_defaults():
    """Restores package metadata version defaults after test completion."""
    yield
    importlib.reload(mindat_api.package_metadata)


def test_package_versioning(restore_package_metadata_version_defaults):
    """Verifies that importlib.metadata.version, when successful, sets `mindat_api.package_metadata.__version__`."""
    with patch("importlib.metadata.version", return_value="1.0.0t"):
        importlib.reload(mindat_api.package_metadata)
        from mindat_api.package_metadata import __version__

        assert __version__ == "1.0.0t"


def test_package_incorrect_versioning(restore_package_metadata_version_defaults):
    """Verifies that __version__ defaults to `0.0.0+local` when the distribution is not installed."""
    with patch("importlib.metadata.version", side_effect=PackageNotFoundError):
        importlib.reload(mindat_api.package_metadata)
        from mindat_api.package_metadata import __version__

        assert __version__ == "0.0.0+local"


def test_writable_directory_candidates(tmp_path, monkeypatch):
    """The first candidate that can be created is used"""

    def unwritable():
        raise PermissionError("read-only")

    monkeypatch.setattr(directories, "PARENT_DIRECTORY_CANDIDATES", [unwritable, lambda: tmp_path])
    assert get_default_writable_directory("logs") == tmp_path / "logs"
    assert (tmp_path / "logs").is_dir()
    assert get_default_writable_directory("logs", subdirectory="mindat") == tmp_path / "mindat"


def test_no_writable_directory(monkeypatch):
    def unwritable():
        raise PermissionError("read-only")

    monkeypatch.setattr(directories, "PARENT_DIRECTORY_CANDIDATES", [unwritable])
    with pytest.raises(RuntimeError):
        get_default_writable_directory("logs")


def test_unknown_directory_type():
    with pytest.raises(ValueError):
        get_default_writable_directory("cache")  # type: ignore[arg-type]
