#! /usr/bin/env python
import json
import sys
from inspect import signature
from pathlib import Path
from time import perf_counter_ns
from typing import IO, Union

from bourbaki.application.cli import CommandLineInterface, cli_spec  # type: ignore
from bourbaki.application.typed_io.cli_parse import cli_parser  # type: ignore

from crane import solve
from crane.errors import CraneError, ParseError

INPUT_FILE = Path("input.txt")

Param = Union[int, float, bool, str]


@cli_parser.register(Param, as_const=True, derive_nargs=True)
def parse_param(s: str):
    try:
        return json.loads(s)
    except json.JSONDecodeError:
        # bare strings like `--layout drawing`
        return s


def print_solution(solution):
    print(solution)


def get_input(path: Path) -> IO[str]:
    return open(path) if sys.stdin.isatty() else sys.stdin


cli = CommandLineInterface(
    prog="main",
    require_options=False,
    require_subcommand=True,
    implicit_flags=True,
    use_verbose_flag=True,
)


@cli.definition
class Crane:
    """Rearrange stacks of crates with a crane and report the crate on top of each stack"""

    @cli_spec.output_handler(print_solution)
    def run(self, input_file: Path = INPUT_FILE, **args: Param):
        """Run the crane over an input file. Input will be read from stdin if input is piped there.

        :param input_file: path to the stacks and instructions, separated by a blank line
        :param args: keyword arguments to pass to the solution, e.g. `--sequential false`.
          Run the `info` command to see the available parameters.
        """
        print(f"Running crane over {input_file}...", file=sys.stderr)
        tic = perf_counter_ns()
        try:
            with get_input(input_file) as input_:
                solution = solve.run(input_, **args)
        except (ParseError, CraneError) as e:
            print(f"{e.kind}: {e}", file=sys.stderr)
            sys.exit(1)
        toc = perf_counter_ns()
        print(f"Ran in {(toc - tic) / 1000000} ms", file=sys.stderr)
        return solution

    def test(self):
        """Run the self-check against the worked example"""
        solve.test()
        print("Tests pass!")

    def info(self):
        """Print the doc string for the solution, providing some details about methodology"""
        if solve.__doc__:
            print(solve.__doc__, end="\n\n")
        print("Signature:")
        print(signature(solve.run))


if __name__ == "__main__":
    cli.run()
