"""Path validation and eml discovery utilities."""

from pathlib import Path

EML_SUFFIX = ".eml"


def ensure_file_path(value: str) -> Path:
    """
    Reject paths that name a directory rather than a file.

    Args:
        value: Raw path string from the command line

    Returns:
        The path as a Path

    Raises:
        ValueError: If the path ends with a path separator

    Examples:
        >>> ensure_file_path("archive.mbox")
        PosixPath('archive.mbox')
    """
    if value.endswith("/") or value.endswith("\\"):
        raise ValueError(f"'{value}' appears to be a directory, not a file")
    return Path(value)


def find_eml_files(root: Path) -> list[Path]:
    """
    Collect every ``.eml`` file below ``root``, sorted lexicographically.

    Walks the tree with an explicit work list. Directories reached twice
    through symlinks are only visited once.

    Raises:
        OSError: If a directory cannot be listed
    """
    found: list[Path] = []
    pending = [root]
    seen = {root.resolve()}

    while pending:
        directory = pending.pop()
        for entry in directory.iterdir():
            if entry.is_dir():
                resolved = entry.resolve()
                if resolved not in seen:
                    seen.add(resolved)
                    pending.append(entry)
            elif entry.suffix == EML_SUFFIX:
                found.append(entry)

    found.sort()
    return found
