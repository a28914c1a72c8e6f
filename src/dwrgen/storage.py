"""Storage utilities for JSONL/JSON files and generated output."""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Generator
from pydantic import BaseModel

from .errors import OutputWriteError


def read_jsonl(path: Path) -> Generator[tuple[int, dict], None, None]:
    """Read records from a JSONL file.

    Args:
        path: Path to the JSONL file.

    Yields:
        (line number, parsed JSON object) for each non-blank line.
    """
    if not path.exists():
        return

    with open(path, 'r', encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path.name} line {lineno}: invalid JSON: {e.msg}") from e
            yield lineno, record


def write_jsonl(path: Path, records: list[dict | BaseModel]) -> None:
    """Write records to a JSONL file (overwrites existing).

    Args:
        path: Path to the JSONL file.
        records: List of dicts or Pydantic models to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        for record in records:
            if isinstance(record, BaseModel):
                f.write(record.model_dump_json(exclude_none=True) + '\n')
            else:
                f.write(json.dumps(record) + '\n')


def read_json(path: Path) -> dict:
    """Read a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed JSON object.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(path: Path, data: dict) -> None:
    """Write a JSON file.

    Args:
        path: Path to the JSON file.
        data: Dict to write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def _restore_previous(directory: Path, backup: Path, written: list[Path], moved: list[str]) -> bool:
    """Put back the outputs that were moved aside. Returns False if any could not be restored."""
    try:
        for target in written:
            target.unlink()
        for name in moved:
            os.replace(backup / name, directory / name)
    except OSError:
        return False
    return True


def write_outputs(directory: Path, files: dict[str, str]) -> list[Path]:
    """Write a set of generated files so they are replaced together.

    Every file is first written into a scratch directory next to the
    targets. The previous outputs are then moved aside and the new ones
    moved in; if any move fails, the previous outputs are put back so the
    directory never holds a mix of old and new files.

    Args:
        directory: Output directory (created if missing).
        files: Mapping of file name to full contents.

    Returns:
        Paths of the written files, in the order given.

    Raises:
        OutputWriteError: If the directory or any file cannot be written.
    """
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(f"Could not create output directory {directory}: {e}") from e

    try:
        scratch = Path(tempfile.mkdtemp(prefix=".dwrgen-", dir=directory))
    except OSError as e:
        raise OutputWriteError(f"Could not write to {directory}: {e}") from e

    backup = scratch / ".previous"
    written: list[Path] = []
    moved: list[str] = []
    restored = True
    try:
        blocked = [name for name in files if (directory / name).is_dir()]
        if blocked:
            raise OutputWriteError(
                f"Could not write generated files to {directory}: {', '.join(blocked)} is a directory"
            )

        for name, content in files.items():
            with open(scratch / name, 'w', encoding='utf-8', newline='\n') as f:
                f.write(content)

        backup.mkdir()
        for name in files:
            if (directory / name).exists():
                os.replace(directory / name, backup / name)
                moved.append(name)

        for name in files:
            target = directory / name
            os.replace(scratch / name, target)
            written.append(target)
    except OSError as e:
        restored = _restore_previous(directory, backup, written, moved)
        detail = "" if restored else f"; previous outputs left in {backup}"
        raise OutputWriteError(f"Could not write generated files to {directory}: {e}{detail}") from e
    finally:
        if restored:
            shutil.rmtree(scratch, ignore_errors=True)

    return written
