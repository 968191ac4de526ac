"""
Line-oriented flat files shared by the file adapters.

One record per line, fields separated by commas, no quoting.  Writes go
to a temporary file in the same directory which then replaces the target,
so a failed write leaves the previous file untouched.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from src.domain.errors import PersistenceError

log = logging.getLogger(__name__)

SEPARATOR = ","


def read_rows(path: Path) -> list[tuple[int, list[str]]]:
    """
    Return (line_number, fields) for every non-blank line. Missing file → [].

    Lines that are not valid UTF-8 are skipped with a warning.
    """
    if not path.exists():
        return []
    rows = []
    with path.open("rb") as fh:
        for line_number, raw in enumerate(fh, start=1):
            try:
                line = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError as exc:
                log.warning("%s:%d skipped: not valid UTF-8 (%s)", path, line_number, exc.reason)
                continue
            if not line.strip():
                continue
            rows.append((line_number, line.split(SEPARATOR)))
    return rows


def write_rows(path: Path, rows: list[list[str]]) -> None:
    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=f".{path.name}.",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            for row in rows:
                fh.write(SEPARATOR.join(row) + "\n")
        if path.exists():
            os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_name, path)
    except OSError as exc:
        log.error("Failed to write %s: %s", path, exc)
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise PersistenceError(f"could not write {path}: {exc}") from exc
