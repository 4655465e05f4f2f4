"""
Perfil de GC em janelas deslizantes.

A série é preguiçosa: cada amostra custa O(step) após a primeira janela,
então sequências do tamanho de um cromossomo não são materializadas.
"""
from __future__ import annotations

import logging
from typing import Iterator

from .composition import gc_weight
from ..errors import InvalidWindowConfiguration

log = logging.getLogger("window")


def window_fits(left_edge: int, window_size: int, length: int) -> bool:
    """Janela [left_edge, left_edge + window_size) cabe inteira na sequência."""
    return left_edge >= 0 and left_edge + window_size <= length


def expected_sample_count(length: int, window_size: int, step: int) -> int:
    if window_size > length:
        return 0
    return (length - window_size) // step + 1


def _gc_sum(view: memoryview, start: int, end: int) -> int:
    return sum(gc_weight(b) for b in view[start:end])


class SlidingWindowSeries:
    """Fração GC por janela, avançando `step` bases a cada amostra.

    Só para frente: depois de esgotada continua esgotada; para varrer de
    novo, construa outra série.
    """

    def __init__(self, sequence, window_size: int, step: int):
        if window_size <= 0:
            raise ValueError(f"window_size deve ser positivo (recebido {window_size})")
        view = memoryview(sequence).cast("B")
        length = len(view)
        if step <= 0:
            raise InvalidWindowConfiguration(
                window_size, step, length, f"step must be positive, got {step}")
        if step > window_size:
            raise InvalidWindowConfiguration(
                window_size, step, length,
                f"step ({step}) must not exceed window size ({window_size})")
        if not window_fits(0, window_size, length):
            raise InvalidWindowConfiguration(
                window_size, step, length,
                f"window size ({window_size}) exceeds sequence length ({length})")

        self._view = view
        self.window_size = window_size
        self.step = step
        self.length = length
        self._left = 0
        self._gc = None        # contagem GC da janela corrente
        self._done = False

    @property
    def left_edge(self) -> int:
        return self._left

    def __len__(self) -> int:
        return expected_sample_count(self.length, self.window_size, self.step)

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        if self._done:
            raise StopIteration

        if self._gc is None:
            self._gc = _gc_sum(self._view, 0, self.window_size)
            return self._gc / self.window_size

        nxt = self._left + self.step
        if not window_fits(nxt, self.window_size, self.length):
            self._done = True
            self._view = None
            log.debug("série esgotada em %d (len=%d)", self._left, self.length)
            raise StopIteration

        view, w = self._view, self.window_size
        self._gc -= _gc_sum(view, self._left, nxt)
        self._gc += _gc_sum(view, self._left + w, nxt + w)
        self._left = nxt
        return self._gc / w

    def positions(self) -> Iterator[tuple[int, float]]:
        """Pares (início da janela, fração GC), preguiçosos."""
        for ratio in self:
            yield self._left, ratio
