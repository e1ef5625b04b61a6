import logging
import os
from pathlib import Path

from . import templates

logger = logging.getLogger(__name__)


def _logical_path(directory):
    # Symlinks are kept so the day is named after the path the user gave.
    return Path(os.path.abspath(directory))


def _working_directory():
    cwd = os.getcwd()
    pwd = os.environ.get("PWD")
    if pwd and os.path.isabs(pwd) and os.path.isdir(pwd) and os.path.samefile(pwd, cwd):
        return pwd
    return cwd


def opam_filename(directory):
    return f"{_logical_path(directory).name}.opam"


def create(path):
    """Make the directory at ``path`` (and its parents) and scaffold a day in it."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return init(path)


def init(directory=None):
    """Write the dune project files for a day into ``directory``.

    Defaults to the current working directory, as reported by the shell when it
    entered it through a symlink. Existing files are overwritten.
    """
    if directory is None:
        directory = _working_directory()
    directory = _logical_path(directory)

    bindir = directory.joinpath(*templates.BIN_DIR)
    bindir.mkdir(parents=True, exist_ok=True)

    _write(directory / opam_filename(directory), "")
    _write(directory / "dune-project", templates.DUNE_PROJECT)
    _write(bindir / "dune", templates.DUNE_FILE)
    _write(bindir / "part1.ml", templates.PART1_ML)
    return directory


def _write(path, content):
    logger.debug("Writing %s", path)
    path.write_text(content)
