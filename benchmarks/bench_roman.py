"""
Benchmark: cost of the grammar shortcuts of the Roman numeral calculator.

Measures wall-clock time for inputs of increasing size:
- long runs of M, read by one many() instead of a descent per thousand;
- nested parentheses with and without the direct nesting rule;
- long chains of additions.

Usage:
    python benchmarks/bench_roman.py
"""

import timeit

from romanparsec.Calc import Calculator
from romanparsec.Language import RomanDef


def bench(calc: Calculator, make_input, sizes: list[int], repeats: int = 5) -> dict[int, float]:
    results = {}
    for n in sizes:
        data = make_input(n)
        t = timeit.timeit(lambda: calc.evaluate(data), number=repeats)
        results[n] = t / repeats
    return results


def format_time(seconds: float) -> str:
    if seconds < 1e-3:
        return f"{seconds * 1e6:8.1f} us"
    elif seconds < 1:
        return f"{seconds * 1e3:8.2f} ms"
    else:
        return f"{seconds:8.3f}  s"


def print_results(name: str, results: dict[int, float]) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")
    print(f"  {'Size':>10}  {'Time':>12}  {'Ratio vs smallest':>18}")
    print(f"  {'-'*10}  {'-'*12}  {'-'*18}")

    baseline = list(results.values())[0]
    for size, elapsed in results.items():
        ratio = elapsed / baseline if baseline > 0 else 0
        print(f"  {size:>10,}  {format_time(elapsed)}  {ratio:>17.1f}x")


def main() -> None:
    fast = Calculator(RomanDef(nested_fast_path=True))
    slow = Calculator(RomanDef(nested_fast_path=False))

    sizes = [1_000, 5_000, 10_000, 50_000, 100_000]
    depths = [5, 10, 20, 40, 60]
    chains = [100, 500, 1_000, 5_000]

    print("Roman calculator benchmark")
    print("=" * 60)

    suites = [
        ("M * n + CMXCIX", fast, lambda n: "M" * n + "CMXCIX", sizes),
        ("nested parens, direct rule", fast, lambda n: "(" * n + "I" + ")" * n, depths),
        ("nested parens, via Expr", slow, lambda n: "(" * n + "I" + ")" * n, depths),
        ("MCMXCIV + ... (n terms)", fast, lambda n: "+".join(["MCMXCIV"] * n), chains),
    ]

    for name, calc, make_input, sz in suites:
        print_results(name, bench(calc, make_input, sz))

    print()


if __name__ == "__main__":
    main()
