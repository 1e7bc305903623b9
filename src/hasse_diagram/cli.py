"""
Build a Hasse diagram from text input and print it as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Sequence

from hasse_diagram.analysis.report import analyze_diagram
from hasse_diagram.analysis.superset import format_superset_report, superset_report
from hasse_diagram.errors import PosetError
from hasse_diagram.graph.builders import generate_divisibility_poset, parse_input
from hasse_diagram.graph.examples import EXAMPLE_POSETS
from hasse_diagram.graph.ir import Diagram, Poset
from hasse_diagram.graph.reduction import compute_hasse_diagram
from hasse_diagram.layout.engine import bounding_box, compute_layout
from hasse_diagram.utils.config import LAYOUT_TYPES, config
from hasse_diagram.utils.logging import configure_logging, logger


def _read_relations(args: argparse.Namespace) -> str:
    if args.relations_file is not None:
        return Path(args.relations_file).read_text(encoding="utf-8")
    # Literal "\n" sequences let a single shell argument carry several lines.
    return (args.relations or "").replace("\\n", "\n")


def _add_poset_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--elements", required=True, help='Comma-separated elements, e.g. "a, b, c".')
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--relations", default="", help='Relations, one per line: "a < b" or "a,b".')
    group.add_argument("--relations-file", type=Path, default=None, help="File with one relation per line.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hasse-diagram", description=__doc__)
    parser.add_argument("--layout", choices=LAYOUT_TYPES, default=config.layout.layout_type)
    parser.add_argument("--level-height", type=float, default=config.layout.level_height)
    parser.add_argument("--report", action="store_true", help="Include a structural summary in the output.")
    parser.add_argument("--verbose", "-v", action="store_true")

    sub = parser.add_subparsers(dest="command", required=True)

    general = sub.add_parser("general", help="Diagram of a freeform poset.")
    _add_poset_args(general)

    divisibility = sub.add_parser("divisibility", help="Diagram of a divisibility poset.")
    divisibility.add_argument("--numbers", required=True, help='Comma-separated positive integers, e.g. "1, 2, 3, 4, 6, 12".')

    example = sub.add_parser("example", help="Diagram of a bundled example poset.")
    example.add_argument("index", type=int, choices=range(1, len(EXAMPLE_POSETS) + 1), help="1-based example number.")

    superset = sub.add_parser("superset", help="Check which bundled examples a poset contains.")
    _add_poset_args(superset)

    return parser


def _build_poset(args: argparse.Namespace) -> Poset:
    if args.command == "divisibility":
        return generate_divisibility_poset(args.numbers)
    if args.command == "example":
        return EXAMPLE_POSETS[args.index - 1].to_poset()
    return parse_input(args.elements, _read_relations(args))


def render_payload(diagram: Diagram, *, include_report: bool) -> Dict[str, object]:
    payload: Dict[str, object] = diagram.to_dict()
    payload["bounds"] = bounding_box(diagram)
    if include_report:
        report = analyze_diagram(diagram)
        payload["report"] = {
            "nodes": report.num_nodes,
            "edges": report.num_edges,
            "height": report.height,
            "width": report.width,
            "minimal": report.minimal,
            "maximal": report.maximal,
            "linear_extension": report.linear_extension,
        }
    return payload


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        config.debug = True
    if config.debug:
        configure_logging(logging.DEBUG)

    try:
        poset = _build_poset(args)
        if args.command == "superset":
            print(format_superset_report(superset_report(poset)))
            return 0
        diagram = compute_hasse_diagram(poset)
    except PosetError as exc:
        logger.debug("input rejected: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read relations file {args.relations_file}: {exc}", file=sys.stderr)
        return 1

    diagram = compute_layout(diagram, args.layout, args.level_height)
    print(json.dumps(render_payload(diagram, include_report=args.report), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
