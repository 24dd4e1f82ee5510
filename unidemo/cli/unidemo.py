"""Unicode string demo CLI entrypoint."""

import argparse

from unidemo.core import TraceLogger, build_lines


def run_demo(_: argparse.Namespace) -> None:
    trace = TraceLogger()
    for line in build_lines(trace=trace):
        print(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show how precomposed, decomposed and supplementary strings "
        "differ when measured in UTF-16 code units"
    )
    parser.set_defaults(func=run_demo)
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
