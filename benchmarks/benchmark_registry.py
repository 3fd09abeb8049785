import time

from i18n_inflector import is_supported, supported_languages

ITERATIONS = 2_000


def benchmark():
    codes = supported_languages()
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        for code in codes:
            is_supported(code.upper() + "-XX")
    return time.perf_counter() - start, len(codes)


if __name__ == "__main__":
    duration, count = benchmark()
    print(f"Locale Resolution Time ({count} codes x {ITERATIONS}): {duration:.4f} seconds")
