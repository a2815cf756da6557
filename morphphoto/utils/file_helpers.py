# morphphoto/utils/file_helpers.py
"""
File Helper Functions

Common functions for file operations used by the organizer: collision-free
destination names, no-overwrite copies, relative path reporting and hashing.
"""

import base64
import hashlib
import shutil
from pathlib import Path
from typing import Union

from ..constants import COPY_CHUNK_SIZE, DUPLICATE_SUFFIX_FORMAT, HASH_CHUNK_SIZE
from ..exceptions import FileCopyError


def get_unique_file_path(file_path: Union[str, Path]) -> Path:
    """
    First free path of the form name.ext, name_001.ext, name_002.ext, ...

    Existence is re-checked after each increment, so names already taken are
    skipped and the first gap is reused.

    Args:
        file_path: Desired destination path

    Returns:
        A path that did not exist at the time of the call
    """
    path = Path(file_path)
    candidate = path
    counter = 1

    while candidate.exists():
        candidate = path.with_name(
            DUPLICATE_SUFFIX_FORMAT.format(
                stem=path.stem, counter=counter, suffix=path.suffix
            )
        )
        counter += 1

    return candidate


def copy_file_no_overwrite(
    source_path: Union[str, Path], destination_path: Union[str, Path]
) -> Path:
    """
    Copy a file, refusing to overwrite an existing destination.

    The destination is opened with exclusive creation, so two writers can never
    end up in the same file. File metadata (timestamps, mode) is copied after
    the contents. On any failure after creation the destination is removed.

    Raises:
        FileExistsError: If the destination already exists
        FileCopyError: For any other copy failure
    """
    source = Path(source_path)
    destination = Path(destination_path)

    created = False
    try:
        with source.open("rb") as src:
            with destination.open("xb") as dst:
                created = True
                shutil.copyfileobj(src, dst, COPY_CHUNK_SIZE)
    except FileExistsError:
        raise
    except OSError as e:
        # Do not leave a partial copy behind
        if created:
            destination.unlink(missing_ok=True)
        raise FileCopyError(f"Failed to copy {source} -> {destination}: {e}") from e

    try:
        shutil.copystat(source, destination)
    except OSError as e:
        # The file only counts as copied once its metadata is in place
        destination.unlink(missing_ok=True)
        raise FileCopyError(
            f"Could not preserve metadata of {source} on {destination}: {e}"
        ) from e

    return destination


def get_relative_path(base_path: Union[str, Path], full_path: Union[str, Path]) -> str:
    """Path of full_path relative to base_path; full_path as-is when outside it"""
    full = Path(full_path)
    try:
        return str(full.relative_to(Path(base_path)))
    except ValueError:
        return str(full)


def calculate_file_hash(file_path: Union[str, Path]) -> str:
    """SHA-256 of a file's contents, base64 encoded"""
    sha256 = hashlib.sha256()
    with Path(file_path).open("rb") as f:
        for chunk in iter(lambda: f.read(HASH_CHUNK_SIZE), b""):
            sha256.update(chunk)
    return base64.b64encode(sha256.digest()).decode("ascii")
