import csv
import logging
from pathlib import Path
from typing import Iterable

from ..analysis.composition import CompositionSummary
from .fasta_reader import SequenceRecord

log = logging.getLogger("csv_writer")

COMPOSITION_HEADER = ["id", "length", "a", "c", "g", "t", "other", "gc_ratio"]


def write_csv(path: Path, header: list[str], rows: list):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(header)
        w.writerows(rows)
    log.info("CSV salvo → %s (%d linhas)", path, len(rows))


def composition_rows(records: Iterable[SequenceRecord]) -> list[list]:
    rows = []
    for rec in records:
        s = CompositionSummary.from_sequence(rec.seq)
        t = s.tally
        ratio = s.gc_ratio
        rows.append([rec.id, s.length, t.a, t.c, t.g, t.t, t.other,
                     "" if ratio is None else f"{ratio:.6f}"])
    return rows
