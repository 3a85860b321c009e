"""
feynsight-render: draw Feynman diagrams from the command line.

Usage:
  feynsight-render process.json                      # VisualData JSON, SVG to stdout
  feynsight-render process.json -o diagram.svg       # save the SVG
  feynsight-render folder/ -o output_folder/         # batch: every .json in folder
  feynsight-render --process "e- e+ -> mu- mu+"      # local theorist, no model call
  feynsight-render process.json --check              # also print an inspection summary
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional

from pydantic import ValidationError

from feynsight.engine.renderer import render_diagram
from feynsight.llm.local_theorist import run_local_theorist
from feynsight.models.diagram import TheoristResult, VisualData
from feynsight.svg.parser import SvgInspectionError, inspect_svg


class CliError(Exception):
    def __init__(self, message: str, exit_code: int = 2) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def load_visual_data(path: str) -> VisualData:
    """Read VisualData JSON, bare or wrapped in a theorist result."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise CliError(f"cannot read {path}: {e.strerror}") from e

    try:
        if '"visual_data"' in raw:
            return TheoristResult.model_validate_json(raw).visual_data
        return VisualData.model_validate_json(raw)
    except ValidationError as e:
        raise CliError(f"{path}: not a diagram description ({e.error_count()} errors)") from e


def render_to(data: VisualData, output_path: Optional[str], check: bool) -> None:
    result = render_diagram(data)
    if not result.supported:
        print(f"  warning: unsupported topology {result.topology!r}, diagram is empty", file=sys.stderr)

    if check:
        try:
            summary = inspect_svg(result.svg)
        except SvgInspectionError as e:
            raise CliError(str(e), exit_code=1) from e
        counts = ", ".join(f"{v} {k}" for k, v in sorted(summary.tag_counts.items())) or "empty"
        print(f"  {result.template or 'no template'}: {counts}", file=sys.stderr)
        if not summary.all_finite:
            raise CliError("diagram contains non-finite coordinates", exit_code=1)

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(result.svg)
        print(f"  → Saved: {output_path}", file=sys.stderr)
    else:
        print(result.svg)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="feynsight-render", description="Render Feynman diagrams to SVG")
    parser.add_argument("input", nargs="?", help="VisualData JSON file or folder of JSON files")
    parser.add_argument("-p", "--process", help="Process text, e.g. 'e- e+ -> mu- mu+'")
    parser.add_argument("-o", "--output", help="Output .svg file or folder")
    parser.add_argument("--check", action="store_true", help="Inspect the rendered SVG")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)

    try:
        if args.process:
            if args.input:
                raise CliError("--process cannot be combined with an input file")
            render_to(run_local_theorist(args.process).visual_data, args.output, args.check)
        elif not args.input:
            raise CliError("an input file, folder or --process is required")
        elif os.path.isdir(args.input):
            json_files = sorted(f for f in os.listdir(args.input) if f.lower().endswith(".json"))
            if not json_files:
                raise CliError("no .json files found in folder", exit_code=1)
            out_dir = args.output or args.input + "_svg"
            os.makedirs(out_dir, exist_ok=True)
            for fname in json_files:
                print(f"[{fname}]", file=sys.stderr)
                out_path = os.path.join(out_dir, fname.rsplit(".", 1)[0] + ".svg")
                render_to(load_visual_data(os.path.join(args.input, fname)), out_path, args.check)
        else:
            render_to(load_visual_data(args.input), args.output, args.check)
    except CliError as e:
        print(f"feynsight-render: error: {e}", file=sys.stderr)
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
