"""
Example 00: Collection and Argument-Pack Aggregations.

Goal:
    Run every aggregation once on small literal inputs and print the
    result next to the hand-computed expected value.

Usage:
    python examples/basic/00_aggregation_tour.py
"""
import sys
from pathlib import Path

# Add src/ to sys.path so the example runs from a source checkout
project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from agglib.core import CapabilityError
from agglib.ops import apply_operation

CASES = [
    ("sum", ([1, 2, 3, 4],), 10),
    ("sum", ([1.5, 2.0, 0.5],), 4.0),
    ("mean", ([1, 2, 3, 4],), 2),
    ("mean", ([1.0, 2.0, 3.0, 4.0],), 2.5),
    ("variance", ([1, 2, 3, 4],), 1.25),
    ("variance", ([1.0, 2.0, 3.0, 4.0],), 1.25),
    ("max", ([3, 9, 2, 7],), 9),
    ("max", ([1.2, 4.8, 3.1],), 4.8),
    ("transform_reduce", ([1.0, 2.0, 3.0], lambda x: x * x), 14.0),
    ("transform_reduce", ([1, 2, 3], lambda x: x + 10), 36),
    ("sum_variadic", (1, 2, 33, 4), 40),
    ("sum_variadic", (0.5, 1, 2.5), 4.0),
    ("mean_variadic", (0.1, 2, 3, 4), 2.275),
    ("mean_variadic", (1, 2, 3, 4), 2.5),
    ("variance_variadic", (1, 2, 3, 4), 1.25),
    ("variance_variadic", (0.1, 2, 3, 4), 2.070625),
    ("max_variadic", (1, 2.7, 3, 4), 4.0),
    ("max_variadic", (1, 2, 33, 4), 33),
]

# Calls that are rejected before any accumulation
REJECTED = [
    ("mean", (["a", "bb"],)),
    ("variance", (["a", "bb"],)),
    ("max", (["a", "zz"],)),
    ("sum_variadic", ("a", "b")),
]


def main():
    for name, args, expected in CASES:
        result = apply_operation(name, *args)
        print(f"{name:<18} -> {result!r:<22} expected {expected!r}")
    print("-" * 60)
    for name, args in REJECTED:
        try:
            apply_operation(name, *args)
        except CapabilityError as exc:
            print(f"{name:<18} rejected: {exc}")


if __name__ == "__main__":
    main()
