import logging
from typing import Iterable, TextIO

from ..analysis.composition import CompositionSummary
from .fasta_reader import SequenceRecord

log = logging.getLogger("report")

UNDEFINED = "undefined (no A/C/G/T bases)"


def format_report(record_id: str, description: str | None, ratio: float | None) -> str:
    pct = UNDEFINED if ratio is None else f"{ratio * 100:.2f}%"
    return f"[{record_id}] {description or ''}\n  - GC Content: {pct}\n"


def write_report(records: Iterable[SequenceRecord], out: TextIO) -> int:
    n = 0
    for rec in records:
        summary = CompositionSummary.from_sequence(rec.seq)
        if not summary.is_defined:
            log.warning("%s: nenhuma base A/C/G/T (%d bases) – GC indefinido",
                        rec.id, summary.length)
        out.write(format_report(rec.id, rec.description, summary.gc_ratio))
        n += 1
    return n
