"""Command line interface for generating SCPs from scanner usage reports."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

from cli import config, output
from core.errors import MissingArgument, ScpGenError
from core.pipeline import ScpRun


def _existing_file(value: str) -> Path:
    path = Path(value)
    if not path.is_file():
        raise argparse.ArgumentTypeError(f"no such file: {value}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scpgen",
        description="Generate an AWS Service Control Policy from an AWS scanner usage report",
    )
    parser.add_argument("--config", type=Path, default=Path("scpgen.yml"), help="Path to CLI configuration file")
    parser.add_argument("-file", dest="file", type=_existing_file, help="Path to the AWS scanner output JSON")
    parser.add_argument("-type", dest="policy_type", help="Allow or Deny")
    parser.add_argument(
        "-threshold",
        dest="threshold",
        type=int,
        help="Call count which determines Action inclusion/exclusion",
    )
    parser.add_argument("--output", type=Path, help="Write the policy here instead of stdout")
    return parser


def app(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        required = (("-file", args.file), ("-type", args.policy_type), ("-threshold", args.threshold))
        missing = [flag for flag, value in required if value is None]
        if missing:
            raise MissingArgument(*missing)

        settings = config.load_settings(args.config).merge_cli(output=args.output)
        run = ScpRun(
            source=args.file,
            policy_type=args.policy_type,
            threshold=args.threshold,
            writer=partial(output.emit, output_path=settings.output, indent=settings.indent),
            warn_on_extra=settings.warn_on_extra_reports,
        )
        run.execute()
        if settings.output:
            print(f"Wrote {settings.output}", file=sys.stderr)
    except ScpGenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.usage_error:
            print(parser.format_help(), file=sys.stderr)
        return exc.exit_code
    except Exception as exc:  # pragma: no cover - unexpected errors bubble up
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    raise SystemExit(app())


if __name__ == "__main__":
    main()
