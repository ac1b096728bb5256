#!/usr/bin/env python3
"""
normdist CLI - score every `x<sep>y` record of a text stream
"""

import io
import logging
import sys
from contextlib import nullcontext
from typing import IO, Iterable, Optional

import typer

from normdist.formats import Atom
from normdist.metrics import Metric, Scorer, scorer

logger = logging.getLogger(__name__)

STDIO = "-"

app = typer.Typer(
    name="normdist",
    help="Normalized edit distance between two strings per line",
    add_completion=False,
)


def split_record(line: str, sep: str) -> Optional[tuple[str, str]]:
    """Split a record into its two fields, or None if it does not have exactly two."""
    fields = line.split(sep)
    if len(fields) != 2:
        return None
    return fields[0], fields[1]


def process_lines(lines: Iterable[str], output: IO[str], score_fn: Scorer, sep: str = "\t") -> int:
    """
    Write one score per valid record to `output`.

    Malformed records are reported and skipped.  Returns the number of
    scores written.
    """
    written = 0
    for linenum, line in enumerate(lines):
        line = line.removesuffix("\n").removesuffix("\r")
        record = split_record(line, sep)
        if record is None:
            logger.warning("Skipping invalid line #%d: %s", linenum, line)
            continue
        output.write(f"{score_fn(*record)!r}\n")
        written += 1
    return written


def _is_stdio(path: Optional[str]) -> bool:
    return path is None or path == STDIO


def _open(path: Optional[str], mode: str, stream: IO[str]):
    """
    Open `path`, or wrap `stream` without taking ownership of it.

    Records end at LF only; a bare CR stays inside the record.
    """
    if _is_stdio(path):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8", newline="\n")
        return nullcontext(stream)
    return open(path, mode, encoding="utf-8", newline="\n")


def _validate_sep(value: str) -> str:
    if len(value) != 1:
        raise typer.BadParameter("separator must be a single character")
    return value


@app.command()
def main(
    input: Optional[str] = typer.Argument(
        None,
        help="Input file ('-' or omitted for stdin)",
    ),
    output: Optional[str] = typer.Argument(
        None,
        help="Output file ('-' or omitted for stdout)",
    ),
    metric: Metric = typer.Option(
        Metric.LEVENSHTEIN,
        "--metric",
        "-m",
        help="Edit operation set",
    ),
    mode: Atom = typer.Option(
        Atom.CHAR,
        "--mode",
        help="Token granularity",
    ),
    sep: str = typer.Option(
        "\t",
        "--sep",
        help="Separator between the two strings",
        callback=_validate_sep,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    logger.info(
        "input: %s\toutput: %s",
        "<stdin>" if _is_stdio(input) else input,
        "<stdout>" if _is_stdio(output) else output,
    )

    score_fn = scorer(metric, mode)
    try:
        with _open(input, "r", sys.stdin) as ifs, _open(output, "w", sys.stdout) as ofs:
            written = process_lines(ifs, ofs, score_fn, sep)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        raise typer.Exit(1)

    logger.info("wrote %d scores", written)


if __name__ == "__main__":
    app()
