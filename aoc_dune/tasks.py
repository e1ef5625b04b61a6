from invoke import task

from . import scaffold


@task
def create(c, path):
    """Create a new day directory at PATH and set it up."""
    directory = scaffold.create(path)
    print(f"Setting up {directory.name}")


@task
def init(c):
    """Set up a new day in the current directory."""
    directory = scaffold.init()
    print(f"Setting up {directory.name}")
