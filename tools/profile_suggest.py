# tools/profile_suggest.py
"""
Small profiling harness for PrefixIndex.words_with_prefix.
Usage:
  python tools/profile_suggest.py --words 50000 --iters 1000 --prefix ma

Builds a synthetic vocabulary (or one from --source NAME=PATH presets),
then prints mean/median/stdev query latency and a sample of completions.
"""
import argparse
import random
import statistics
import string
import time

from listing_autocompleter.autocompleter import AutoCompleter
from listing_autocompleter.ingest.sources import resolve_sources


def synthetic_words(n, seed=7):
    rnd = random.Random(seed)
    for _ in range(n):
        size = rnd.randint(2, 12)
        yield "".join(rnd.choice(string.ascii_lowercase[:12]) for _ in range(size))


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--words", type=int, default=20000, help="synthetic words to insert")
    parser.add_argument("--source", action="append", default=[], help="NAME[=PATH] preset to load instead")
    parser.add_argument("--iters", type=int, default=500, help="measured iterations")
    parser.add_argument("--prefix", type=str, default="ab", help="prefix to query")
    parser.add_argument("--order", choices=("alpha", "frequency"), default="alpha")
    args = parser.parse_args()

    ac = AutoCompleter(order=args.order)
    t0 = time.perf_counter()
    if args.source:
        ac.build(resolve_sources(args.source))
    else:
        ac.builder.add_words(synthetic_words(args.words))
    print(f"built {len(ac.index)} distinct words / {ac.index.node_count} nodes "
          f"in {time.perf_counter() - t0:.2f}s")

    latencies = []
    for _ in range(args.iters):
        t0 = time.perf_counter()
        out = ac.suggest(args.prefix)
        latencies.append((time.perf_counter() - t0) * 1000.0)  # ms

    print("Stats (ms): mean=%.3f median=%.3f stdev=%.3f min=%.3f max=%.3f" % (
        statistics.mean(latencies),
        statistics.median(latencies),
        statistics.pstdev(latencies),
        min(latencies),
        max(latencies),
    ))
    print(f"{len(out)} matches, sample: {out[:10]}")


if __name__ == "__main__":
    main()
