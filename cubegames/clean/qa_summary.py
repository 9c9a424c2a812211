from __future__ import annotations

import csv
import json
from collections import Counter, defaultdict
from pathlib import Path
from typing import Dict, List, Set, Tuple

from cubegames.parser.ingest import ParsedDocument

FIELDNAMES = [
    "word",
    "occurrences",
    "total_count",
    "games",
]


def ignored_word_counts(document: ParsedDocument, top_k: int = 5) -> List[Tuple[str, int]]:
    """Most frequent color words dropped by the lenient parser."""
    counts = Counter(p.word for p in document.ignored)
    return counts.most_common(top_k)


def create_qa_summary(document: ParsedDocument, out_csv: Path, top_k: int = 5) -> None:
    """Write one row per unknown color word, most frequent first.

    `top_k` limits the rows written; 0 or less writes every word.
    """
    out_csv = Path(out_csv)
    out_csv.parent.mkdir(parents=True, exist_ok=True)

    occurrences: Counter = Counter()
    totals: Dict[str, int] = defaultdict(int)
    games: Dict[str, Set[int]] = defaultdict(set)
    for pair in document.ignored:
        occurrences[pair.word] += 1
        totals[pair.word] += pair.count
        games[pair.word].add(pair.game_id)

    ranked = occurrences.most_common(top_k if top_k > 0 else None)

    with out_csv.open("w", newline="", encoding="utf-8") as f_out:
        w = csv.DictWriter(f_out, fieldnames=FIELDNAMES)
        w.writeheader()
        for word, n in ranked:
            w.writerow(
                {
                    "word": word,
                    "occurrences": n,
                    "total_count": totals[word],
                    "games": json.dumps(sorted(games[word])),
                }
            )
