from importlib.metadata import PackageNotFoundError

try:
    from importlib import metadata as _md

    __version__ = _md.version("mindat-api")
except (PackageNotFoundError, ImportError):
    __version__ = "0.0.0+local"

from mindat_api.package_metadata.directories import get_default_writable_directory

__all__ = ["__version__", "get_default_writable_directory"]
