"""
Interactive ID3 program.

Loads a delimited file, trains a tree for the chosen target column, prints
the dataset summary and the tree, then answers ``feature=value,...`` queries
until ``quit``.
"""
from __future__ import annotations

import argparse
import logging
import sys

from .dataset import read_csv
from .exceptions import ID3Error
from .export import export_text, summary
from .model import train

logger = logging.getLogger(__name__)

QUIT = "quit"
QUERY_HINT = "Invalid input format. Use: feature1=value1,feature2=value2"


def parse_query(line: str, *, delimiter: str = ",") -> dict[str, str]:
    """Parse ``"f1=v1, f2=v2"`` into ``{"f1": "v1", "f2": "v2"}``.

    Keys and values are trimmed of spaces and tabs.  Pieces without ``=`` are
    ignored; a repeated key keeps its last value.
    """
    query: dict[str, str] = {}
    for piece in line.split(delimiter):
        if "=" not in piece:
            continue
        key, value = piece.split("=", 1)
        query[key.strip(" \t")] = value.strip(" \t")
    return query


def _prompt(text: str) -> str | None:
    try:
        return input(text)
    except EOFError:
        return None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="id3py",
        description="Train an ID3 decision tree on a CSV file and classify queries.",
    )
    parser.add_argument("csv", nargs="?", help="delimited file with a header row")
    parser.add_argument("target", nargs="?", help="name of the class column")
    parser.add_argument("-d", "--delimiter", default=",", help="field delimiter (default: ',')")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="log progress (-v) or every split (-vv) to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="[id3py] %(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Decision Tree Builder")
    print("====================")
    filename = args.csv or _prompt("Enter CSV filename: ")
    target = args.target or _prompt("Enter target column name: ")
    if not filename or not target:
        print("Error: a CSV filename and a target column are required", file=sys.stderr)
        return 1

    try:
        model = train(read_csv(filename, delimiter=args.delimiter), target.strip(" \t"))
    except ID3Error as exc:
        logger.debug("training failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(summary(model))
    print()
    print("Decision Tree Structure:")
    print("========================")
    print(export_text(model.root))

    print()
    print("Interactive Prediction Mode")
    print("===========================")
    print(f"Enter '{QUIT}' to exit")
    while True:
        line = _prompt("\nEnter feature values (format: feature1=value1,feature2=value2): ")
        if line is None or line.strip() == QUIT:
            break
        query = parse_query(line)
        if not query:
            print(QUERY_HINT)
            continue
        print(f"Prediction: {model.predict(query)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
