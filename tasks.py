from aoc_dune.tasks import create, init  # noqa: F401
