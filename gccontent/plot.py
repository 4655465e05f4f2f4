import logging
from pathlib import Path
from typing import Iterable

import matplotlib
matplotlib.use("Agg")  # sem display
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

log = logging.getLogger("plot")


def _megabases(x, _pos):
    return f"{x / 1e6:g}"


def plot_profile(title: str, points: Iterable[tuple[int, float]], length: int,
                 out_path: Path, width: int = 1600, height: int = 600,
                 dpi: int = 100, window_size: int | None = None) -> Path:
    """Gráfico de área (posição × fração GC) salvo em PNG.

    `points` é consumido uma única vez, em ordem. Cada ponto é o início de
    uma janela; o último degrau fecha em `x + window_size` (ou em `length`
    se a janela não for informada).
    """
    xs, ys = [], []
    for x, y in points:
        xs.append(x)
        ys.append(y)
    n = len(xs)
    if xs:
        xs.append(xs[-1] + window_size if window_size else max(length, xs[-1]))
        ys.append(ys[-1])

    fig, ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        ax.fill_between(xs, ys, 0, step="post", color="#4c78a8", alpha=0.6, linewidth=0)
        ax.set_xlim(0, max(length, 1))
        ax.set_ylim(0, 1)
        ax.xaxis.set_major_formatter(FuncFormatter(_megabases))
        ax.set_xlabel("Position (Mb)")
        ax.set_ylabel("GC ratio")
        ax.set_title(title)
        fig.tight_layout()

        out_path = Path(out_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out_path)
    finally:
        plt.close(fig)

    log.info("Gráfico salvo → %s (%d pontos)", out_path, n)
    return out_path
