import argparse
import cProfile
import pstats
from typing import Callable

from presence_types import (
    OptionalCollection, OptionalMapping, OptionalString,
    Option, if_true,
)
from presence_types import config


def profile_operation(name: str, fn: Callable, runs: int):
    """Profile a specific operation with detailed breakdown."""
    print(f"\n{'='*70}")
    print(f"{name} ({runs} runs)")
    print('='*70)

    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(runs):
        fn()
    profiler.disable()

    stats = pstats.Stats(profiler)
    stats.strip_dirs()
    stats.sort_stats('cumulative')

    print("\nTop functions by cumulative time:")
    stats.print_stats(20)

    print("\nTop functions by total time:")
    stats.sort_stats('tottime')
    stats.print_stats(20)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=10000)
    parser.add_argument("--type", choices=["str", "seq", "dict", "option", "selector", "all"],
                        default="all", help="Which type to profile")
    parser.add_argument("--lenient", action="store_true", help="Disable strict validation")
    args = parser.parse_args()

    if args.lenient:
        config.set_strict_validate(False)

    # Profile strings
    if args.type in ["str", "all"]:
        profile_operation("OptionalString.of()", lambda: OptionalString.of("hello"), args.runs)
        profile_operation("OptionalString.of_nullable('')", lambda: OptionalString.of_nullable(""), args.runs)

        s = OptionalString.of("hello")
        profile_operation("OptionalString.map(len).or_else()", lambda: s.map(len).or_else(0), args.runs)

    # Profile collections
    if args.type in ["seq", "all"]:
        items = list(range(10))
        profile_operation("OptionalCollection.of(list(10))", lambda: OptionalCollection.of(items), args.runs)

        c = OptionalCollection.of(items)
        profile_operation(
            "OptionalCollection.filter().flat_map()",
            lambda: c.filter(lambda v: 3 in v).flat_map(lambda v: OptionalCollection.of_nullable(v[1:])),
            args.runs,
        )

    # Profile mappings
    if args.type in ["dict", "all"]:
        d = {f"k{i}": i for i in range(10)}
        profile_operation("OptionalMapping.of_nullable(dict(10))", lambda: OptionalMapping.of_nullable(d), args.runs)

        m = OptionalMapping.of(d)
        profile_operation("OptionalMapping.map(get).or_else()", lambda: m.map(lambda v: v.get("k3")).or_else(-1), args.runs)

    # Profile plain Option
    if args.type in ["option", "all"]:
        some = Option.of(12345)
        profile_operation("Option(Some).map()", lambda: some.map(lambda n: n + 1), args.runs)

        none = Option.empty()
        profile_operation("Option(None).or_else_get()", lambda: none.or_else_get(int), args.runs)

    # Profile selector
    if args.type in ["selector", "all"]:
        profile_operation("if_true(True).get().or_else()", lambda: if_true(True).get("a").or_else("b"), args.runs)
        profile_operation("if_true(False).get_from().or_else_get()",
                          lambda: if_true(False).get_from(str).or_else_get(str), args.runs)


if __name__ == "__main__":
    main()
