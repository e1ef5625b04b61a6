"""Fixed file contents written into every new day."""

BIN_DIR = ("src", "bin")

DUNE_PROJECT = "(lang dune 1.2)\n"

DUNE_FILE = """\
(executables
\t(names part1)
\t(public_names part1)
\t(modes exe)
)
"""

PART1_ML = """\
open Scanf
exception Error of string

let file = Sys.argv.(1)
let scanner = Scanning.from_file file

let res = 42;;
Printf.printf "The res is %d\\n" res;;
"""
