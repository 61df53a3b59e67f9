"""Command line entry point for leetcode-fetch."""

import argparse
import asyncio
import sys

from loguru import logger

from application.orchestrator import FetchOrchestrator
from domain.exceptions import FilesystemConflict, LeetFetchError
from domain.languages import normalize
from domain.models import OutputOptions
from infrastructure.config import DEFAULT_LANGUAGE
from services import create_problem_service

__version__ = "0.1.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetcode-fetch",
        description="Fetch LeetCode problems and save them locally",
    )
    parser.add_argument(
        "problem_link",
        nargs="?",
        metavar="problem-link",
        help=(
            "Optional link to a specific LeetCode problem in the format "
            "https://leetcode.com/problems/problem-name/ (default: daily challenge)"
        ),
    )
    parser.add_argument(
        "--lang",
        "-l",
        metavar="language",
        default=DEFAULT_LANGUAGE,
        help=f"Programming language for the code snippet (default: {DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--slug",
        "-s",
        action="store_true",
        help="Use the problem's slug as the filename instead of its ID",
    )
    parser.add_argument(
        "--bare",
        "-b",
        action="store_true",
        help="Only include problem title, difficulty, and starter snippet",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
    )


def options_from_args(args: argparse.Namespace) -> OutputOptions:
    return OutputOptions(
        language=normalize(args.lang),
        use_slug_as_filename=args.slug,
        bare_mode=args.bare,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    options = options_from_args(args)
    orchestrator = FetchOrchestrator(create_problem_service())

    try:
        path = asyncio.run(orchestrator.run(args.problem_link, options))
    except FilesystemConflict as e:
        print(f"File already exists: {e.path.name}")
        return 0
    except LeetFetchError as e:
        logger.opt(exception=e).debug("Fetch failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"File created: {path.name}")
    return 0
