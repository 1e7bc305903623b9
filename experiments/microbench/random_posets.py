"""
Generate synthetic posets and time the closure, reduction and layout stages.
"""

from __future__ import annotations

import argparse
import random
from time import perf_counter
from typing import Dict

from hasse_diagram.analysis import analyze_diagram
from hasse_diagram.graph.builders import generate_divisibility_poset
from hasse_diagram.graph.closure import compute_transitive_closure
from hasse_diagram.graph.ir import Poset
from hasse_diagram.graph.reduction import compute_hasse_diagram
from hasse_diagram.layout import compute_layout


PROFILES = {
    "small": {
        "elements": 24,
        "max_parents": 3,
    },
    "medium": {
        "elements": 96,
        "max_parents": 4,
    },
    "large": {
        "elements": 192,
        "max_parents": 6,
    },
}


def build_random_poset(num_elements: int, max_parents: int, *, seed: int) -> Poset:
    """Random DAG poset: element i only ever sits above elements with a lower index."""
    rng = random.Random(seed)
    elements = [f"e{idx}" for idx in range(num_elements)]
    relations = []

    for idx in range(1, num_elements):
        parent_candidates = list(range(idx))
        rng.shuffle(parent_candidates)
        num_parents = rng.randint(1, min(max_parents, idx))
        relations.extend((f"e{p}", f"e{idx}") for p in parent_candidates[:num_parents])

    poset = Poset(elements=elements, relations=relations)
    poset.validate()
    return poset


def time_pipeline(poset: Poset) -> Dict[str, float]:
    timings: Dict[str, float] = {}

    start = perf_counter()
    compute_transitive_closure(poset)
    timings["closure_ms"] = (perf_counter() - start) * 1e3

    start = perf_counter()
    diagram = compute_hasse_diagram(poset)
    timings["reduction_ms"] = (perf_counter() - start) * 1e3

    start = perf_counter()
    compute_layout(diagram, "hierarchical")
    timings["layout_ms"] = (perf_counter() - start) * 1e3

    report = analyze_diagram(diagram)
    timings["edges"] = float(report.num_edges)
    timings["height"] = float(report.height)
    return timings


def report(label: str, poset: Poset) -> None:
    timings = time_pipeline(poset)
    print(f"=== {label} ===")
    print(f"Elements: {len(poset.elements)}  declared relations: {len(poset.relations)}")
    print(f"Covering edges: {int(timings['edges'])}  height: {int(timings['height'])}")
    print(
        f"closure {timings['closure_ms']:.2f} ms | "
        f"reduction {timings['reduction_ms']:.2f} ms | "
        f"layout {timings['layout_ms']:.2f} ms"
    )


def _apply_profile(args: argparse.Namespace) -> argparse.Namespace:
    profile_cfg = PROFILES.get(args.profile)
    if not profile_cfg:
        return args
    for key, value in profile_cfg.items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--elements", type=int, default=None)
    parser.add_argument("--max-parents", type=int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()
    return _apply_profile(args)


def main() -> None:
    args = parse_args()
    report(
        "random DAG",
        build_random_poset(args.elements, args.max_parents, seed=args.seed),
    )
    numbers = ", ".join(str(n) for n in range(1, args.elements + 1))
    report("divisibility 1..n", generate_divisibility_poset(numbers))


if __name__ == "__main__":
    main()
