import logging
from dataclasses import dataclass
from pathlib import Path

from Bio.SeqIO.FastaIO import SimpleFastaParser

from ..errors import FormatError, InputUnavailable

log = logging.getLogger("fasta")

# latin-1: todo byte vira um caractere e volta idêntico
_ENCODING = "latin-1"


@dataclass(frozen=True)
class SequenceRecord:
    """Registro FASTA: id, descrição (pode ser vazia) e bases em bytes."""

    id: str
    description: str
    seq: bytes

    def __len__(self) -> int:
        return len(self.seq)

    @classmethod
    def from_title(cls, title: str, seq: str) -> "SequenceRecord":
        parts = title.split(None, 1)
        rid  = parts[0] if parts else ""
        desc = parts[1].strip() if len(parts) > 1 else ""
        return cls(rid, desc, seq.encode(_ENCODING))


def _check_header(handle, path: Path):
    for line in handle:
        if not line.strip():
            continue
        if not line.startswith(">"):
            raise FormatError(path, f"expected '>' at start of record, got {line[:20].rstrip()!r}")
        break
    handle.seek(0)


def read_records(path: Path) -> list[SequenceRecord]:
    """Lê todos os registros antes de devolver (sem saída parcial)."""
    path = Path(path)
    try:
        handle = path.open("r", encoding=_ENCODING)
    except OSError as e:
        raise InputUnavailable(path, e.strerror or e) from e

    with handle:
        try:
            _check_header(handle, path)
            records = [SequenceRecord.from_title(title, seq)
                       for title, seq in SimpleFastaParser(handle)]
        except ValueError as e:
            raise FormatError(path, e) from e
        except OSError as e:
            raise InputUnavailable(path, e.strerror or e) from e

    log.info("%s: %d registro(s) lido(s)", path.name, len(records))
    return records
