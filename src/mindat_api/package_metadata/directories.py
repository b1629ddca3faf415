from pathlib import Path
from typing import Optional, Literal


PARENT_DIRECTORY_CANDIDATES = [
    lambda: Path(__file__).parent.parent,
    lambda: Path.home() / '.mindat_api'
]

def get_default_writable_directory(directory_type: Literal['logs'],
                                   subdirectory: Optional[str | Path] = None) -> Path:
    """
    Identifies a writable directory for package output (currently only rotating log files)
    when the caller does not specify one explicitly. The package directory is tried first,
    then a hidden directory in the user's home folder.

    Args:
        directory_type (Literal['logs']): The kind of directory to locate
        subdirectory (Optional[str | Path]): An optional name to use in place of `directory_type`

    Returns:
        Path: The path of a default writeable directory if found

    Raises:
        RuntimeError if a writeable directory cannot be identified
    """

    if directory_type not in ('logs',):
        raise ValueError("Received an incorrect directory_type when identifying writable directories.")

    for candidate_func in PARENT_DIRECTORY_CANDIDATES:
        try:
            base_path = candidate_func()
            full_path = base_path / (subdirectory or directory_type)

            # Test writeability
            full_path.mkdir(parents=True, exist_ok=True)
            return full_path

        except (PermissionError, OSError):
            continue

    raise RuntimeError(f"Could not locate a writable {directory_type} directory for mindat_api")
