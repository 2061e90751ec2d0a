"""Contract file I/O: whole-file template reads, atomic output writes."""

import os
import shutil
import sys
import tempfile
from contextlib import contextmanager

import click


class ContractFileError(RuntimeError):
    """Reading the template or writing the generated contract failed."""

    def __init__(self, step: str, path: str, reason: str):
        self.step = step
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to {step} {path}: {reason}")


def _reason(exc) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _default_mode() -> int:
    # os.umask has no read-only form; the previous mask is restored at once.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def read_template(path: str) -> str:
    """Read the whole template file as UTF-8, keeping its line endings."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ContractFileError("read template", path, _reason(e)) from e


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
        if os.path.isfile(file_path):
            shutil.copymode(file_path, tmp_path)
        else:
            os.chmod(tmp_path, _default_mode())
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


def write_output(path: str, content: str) -> None:
    """Replace the output file with ``content``; never leaves it half-written."""
    try:
        atomic_write(path, content)
    except OSError as e:
        raise ContractFileError("write output", path, _reason(e)) from e


@contextmanager
def with_error_handling():
    try:
        yield
    except (ValueError, RuntimeError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)
