"""
Run every inflection benchmark in-process and print one line per case.

Usage:
    PYTHONPATH=. python benchmarks/run_benchmarks.py
"""

import benchmark_inflection
import benchmark_registry


def run():
    print("\n==============================")
    print("INFLECTION")
    print("==============================")
    for locale, word in benchmark_inflection.CASES:
        duration = benchmark_inflection.benchmark(locale, word)
        per_call = duration / benchmark_inflection.ITERATIONS * 1_000_000
        print(f"{locale:>4} {word:<14} {duration:.4f} s ({per_call:.2f} us per call pair)")

    print("\n==============================")
    print("LOCALE RESOLUTION")
    print("==============================")
    duration, count = benchmark_registry.benchmark()
    lookups = count * benchmark_registry.ITERATIONS
    print(f"{lookups} lookups over {count} codes: {duration:.4f} s")


if __name__ == "__main__":
    run()
