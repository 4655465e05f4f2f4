from __future__ import annotations

from dataclasses import dataclass

A, C, T, G, OTHER = range(5)

# byte → categoria (match exato, maiúsculas apenas)
_CATEGORY = [OTHER] * 256
for _base, _cat in ((b"A", A), (b"C", C), (b"T", T), (b"G", G)):
    _CATEGORY[_base[0]] = _cat
_CATEGORY = tuple(_CATEGORY)

_GC_WEIGHT = tuple(1 if cat in (G, C) else 0 for cat in _CATEGORY)


def classify(byte: int) -> int:
    """Categoria de um byte: A, C, T, G ou OTHER."""
    return _CATEGORY[byte]


def gc_weight(byte: int) -> int:
    """1 se o byte é G ou C, senão 0 (mesma regra de `classify`)."""
    return _GC_WEIGHT[byte]


@dataclass(frozen=True)
class BaseTally:
    """Contagem exata das bases de uma sequência."""

    a: int = 0
    c: int = 0
    t: int = 0
    g: int = 0
    other: int = 0

    @property
    def total(self) -> int:
        return self.a + self.c + self.t + self.g + self.other

    @property
    def canonical(self) -> int:
        return self.a + self.c + self.t + self.g

    @property
    def gc(self) -> int:
        return self.g + self.c

    def __add__(self, other: BaseTally) -> BaseTally:
        if not isinstance(other, BaseTally):
            return NotImplemented
        return BaseTally(self.a + other.a, self.c + other.c, self.t + other.t,
                         self.g + other.g, self.other + other.other)


def count_bases(seq: bytes | bytearray | memoryview) -> BaseTally:
    counts = [0] * 5
    for byte in seq:
        counts[_CATEGORY[byte]] += 1
    return BaseTally(a=counts[A], c=counts[C], t=counts[T], g=counts[G],
                     other=counts[OTHER])


def gc_ratio(tally: BaseTally) -> float | None:
    """(G+C)/(A+C+T+G); None quando não há nenhuma base canônica."""
    denom = tally.canonical
    if denom == 0:
        return None
    return tally.gc / denom


@dataclass(frozen=True)
class CompositionSummary:
    """Resumo derivado de um `BaseTally` (calculado sob demanda)."""

    tally: BaseTally

    @classmethod
    def from_tally(cls, tally: BaseTally) -> CompositionSummary:
        return cls(tally)

    @classmethod
    def from_sequence(cls, seq: bytes | bytearray | memoryview) -> CompositionSummary:
        return cls(count_bases(seq))

    @property
    def length(self) -> int:
        return self.tally.total

    @property
    def gc_ratio(self) -> float | None:
        return gc_ratio(self.tally)

    @property
    def at_ratio(self) -> float | None:
        denom = self.tally.canonical
        if denom == 0:
            return None
        return (self.tally.a + self.tally.t) / denom

    @property
    def is_defined(self) -> bool:
        return self.tally.canonical > 0
