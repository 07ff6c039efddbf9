import argparse
import sys

from .cli import MAIN_COMMANDS, run_main


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Identify the running Linux distribution")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("--debug", action="store_true", help="debugging output")
    subparsers = parser.add_subparsers(help="sub-command help", dest="command", required=True)
    for cmd in MAIN_COMMANDS:
        cmd.make_subparser(subparsers)
    return parser


def main() -> int | None:
    parser = make_parser()
    args = parser.parse_args(sys.argv[1:])
    handler = args.handler(args)
    return handler.run()


def script_main() -> None:
    run_main(main)


if __name__ == "__main__":
    script_main()
