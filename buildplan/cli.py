"""CLI entrypoints for buildplan commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .manifest import ManifestError
from .orchestrator import Orchestrator, PlanOutcome


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildplan",
        description="Infer build steps for a project without explicit build configuration.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors to the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write a DEBUG-level log of the run to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser(
        "detect",
        help="Print the builders inferred for a project directory.",
    )
    _add_verbose_option(detect_parser, suppress_default=True)
    detect_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    detect_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the detection result as JSON.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for buildplan commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    orchestrator = Orchestrator()

    if args.command == "detect":
        try:
            outcome = orchestrator.run_detect(args.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, ManifestError) as exc:
            parser.exit(1, f"buildplan detect failed: {exc}\n")
        _print_outcome(outcome, as_json=bool(args.json))
        if outcome.result.errors:
            parser.exit(1)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _print_outcome(outcome: PlanOutcome, *, as_json: bool) -> None:
    result = outcome.result
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
    elif result.builders:
        for builder in result.builders:
            print(f"{builder.use}\t{builder.src}")
    elif result.errors is None:
        print("No builders needed")

    if result.errors:
        for error in result.errors:
            print(f"{error.code}: {error.message}", file=sys.stderr)


if __name__ == "__main__":
    main(sys.argv[1:])
