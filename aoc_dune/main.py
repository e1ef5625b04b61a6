from invoke import Collection, Program

from . import __version__, tasks

# ``aoc-dune --debug ...`` turns on debug logging, which lists every file written.
program = Program(
    name="aoc-dune",
    binary="aoc-dune",
    namespace=Collection.from_module(tasks),
    version=__version__,
)


def main(argv=None):
    program.run(argv)
