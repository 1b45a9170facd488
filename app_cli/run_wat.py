from __future__ import annotations
import argparse, json, logging, os, datetime, time
from ssb_core.types import ResponseRecord
from ssb_core.word_bank import get_test_words
from ssb_core.aggregator import analyze_test
from ssb_core.config import load_config, seed_rng, WAT_DEFAULT_WORD_COUNT
log = logging.getLogger(__name__)
def ask(word: str, idx: int, total: int) -> str:
    try:
        return input(f"[{idx}/{total}] {word.upper()}: ").strip()
    except EOFError:
        return ""
def print_summary(res) -> None:
    print(f"\nScore: {res.overall_score}  Completion: {res.completion_rate}%  Time efficiency: {res.time_efficiency}%")
    for s in res.strengths: print(f"  + {s}")
    for s in res.areas_for_improvement: print(f"  - {s}")
    print("\n" + res.feedback)
def main(argv=None):
    ap = argparse.ArgumentParser(description="Word Association Test practice run")
    ap.add_argument("--count", type=int, default=WAT_DEFAULT_WORD_COUNT)
    ap.add_argument("--out", default="reports")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    seed_rng(load_config())
    words = get_test_words(args.count)
    print(f"WAT practice: {len(words)} words. Write the first thought for each; empty line skips.")
    records, t_start = [], time.perf_counter()
    for i, w in enumerate(words, 1):
        t0 = time.perf_counter(); text = ask(w, i, len(words)); rt = time.perf_counter() - t0
        records.append(ResponseRecord(stimulus=w, text=text, elapsed_seconds=round(rt, 2)))
    res = analyze_test(records, time.perf_counter() - t_start)
    print_summary(res); os.makedirs(args.out, exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join(args.out, f"wat_{ts}.json")
    with open(path, "w", encoding="utf-8") as f: json.dump(res.to_dict(), f, ensure_ascii=False, indent=2)
    log.info("Analysis saved to: %s", path)
    return path
if __name__ == "__main__": main()
