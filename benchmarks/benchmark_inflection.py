import time

from i18n_inflector import pluralize, singularize

ITERATIONS = 100_000

CASES = [
    ("en", "user"),
    ("en", "categories"),
    ("es", "usuarios"),
    ("tr", "kullanicilar"),
]


def benchmark(locale, word):
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        singularize(locale, word)
        pluralize(locale, word)
    return time.perf_counter() - start


if __name__ == "__main__":
    for locale, word in CASES:
        duration = benchmark(locale, word)
        print(f"Inflection {locale}:{word}: {duration:.4f} seconds ({ITERATIONS} iterations)")
