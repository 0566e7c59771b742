"""Command-line interface for html2rsx."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from .convert import convert
from .errors import MarkupParseError
from .io_utils import read_markup, warn, write_text_stable
from .models import ConversionJob, load_plan
from .snapshot import diff_output
from .wrap import wrap_output


def _convert_text(markup: str, *, label: str, wrap: str, component_name: Optional[str]) -> str:
    try:
        body = convert(markup)
    except MarkupParseError as exc:
        raise SystemExit(f"{label}: {exc}") from exc
    return wrap_output(body, wrap=wrap, component_name=component_name)


def _emit(output: Optional[Path], text: str, *, check: bool) -> bool:
    """Write or check one result; return False when a check found a difference."""
    if check:
        if output is None:
            raise SystemExit("--check needs an output file to compare against.")
        diff = diff_output(output, text)
        if diff:
            sys.stderr.write(diff)
            return False
        return True

    if output is None:
        sys.stdout.write(text)
    else:
        write_text_stable(output, text)
    return True


def _handle_convert(args: argparse.Namespace) -> None:
    if args.wrap == "component" and not args.component_name:
        raise SystemExit("--component-name is required with --wrap component.")

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            raise SystemExit(f"Input HTML not found: {input_path}")
        markup = read_markup(input_path)
        label = str(input_path)
    else:
        markup = sys.stdin.read()
        label = "<stdin>"

    output = Path(args.output) if args.output else None
    text = _convert_text(markup, label=label, wrap=args.wrap, component_name=args.component_name)
    if not _emit(output, text, check=args.check):
        sys.exit(1)


def _run_job(job: ConversionJob, input_path: Path, output_path: Path, *, check: bool) -> bool:
    if not input_path.exists():
        raise SystemExit(f"Input HTML not found: {input_path}")
    text = _convert_text(
        read_markup(input_path),
        label=str(input_path),
        wrap=job.wrap,
        component_name=job.component_name,
    )
    return _emit(output_path, text, check=check)


def _handle_batch(args: argparse.Namespace) -> None:
    plan = load_plan(Path(args.plan))
    if not plan.jobs:
        warn(f"{args.plan}: no jobs to run")
        return

    failures = 0
    for job in plan.jobs:
        ok = _run_job(job, plan.resolve(job.input), plan.resolve(job.output), check=args.check)
        if not ok:
            failures += 1
    if failures:
        warn(f"{failures} of {len(plan.jobs)} outputs differ")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="html2rsx",
        description="Convert HTML markup into rsx element blocks.",
    )
    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single HTML file (or stdin).",
        description="Convert HTML into rsx and print it or write it to a file.",
    )
    convert_parser.add_argument(
        "--in",
        dest="input",
        help="Path to the HTML file. Reads stdin when omitted.",
    )
    convert_parser.add_argument(
        "--out",
        dest="output",
        help="Path to write the rsx output. Prints to stdout when omitted.",
    )
    convert_parser.add_argument(
        "--wrap",
        choices=["none", "rsx", "component"],
        default="none",
        help="Wrap the output in rsx! {} or a component function.",
    )
    convert_parser.add_argument(
        "--component-name",
        dest="component_name",
        help="Function name used with --wrap component.",
    )
    convert_parser.add_argument(
        "--check",
        action="store_true",
        help="Compare with the existing --out file instead of writing; exit 1 on differences.",
    )
    convert_parser.set_defaults(func=_handle_convert)

    batch_parser = subparsers.add_parser(
        "batch",
        help="Run every conversion listed in a YAML plan.",
        description="Validate a YAML conversion plan and convert each job.",
    )
    batch_parser.add_argument(
        "--plan",
        required=True,
        help="Path to the conversion plan YAML file.",
    )
    batch_parser.add_argument(
        "--check",
        action="store_true",
        help="Compare outputs with the files on disk instead of writing them.",
    )
    batch_parser.set_defaults(func=_handle_batch)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main(sys.argv[1:])
