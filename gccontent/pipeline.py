import logging
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.progress import Progress, TimeElapsedColumn

from .analysis.window import SlidingWindowSeries
from .errors import InvalidWindowConfiguration
from .io.csv_writer import COMPOSITION_HEADER, composition_rows, write_csv
from .io.fasta_reader import read_records
from .io.report import write_report
from .plot import plot_profile
from .utils import safe_filename, timed

log = logging.getLogger("pipeline")


def run_report(path: Path, out: TextIO | None = None, csv_path: Path | None = None) -> int:
    out = out or sys.stdout
    records = read_records(path)   # falha aqui = nenhuma saída
    n = write_report(records, out)
    if csv_path is not None:
        write_csv(csv_path, COMPOSITION_HEADER, composition_rows(records))
    return n


def _unique_path(plot_dir: Path, stem: str, taken: set) -> Path:
    """`stem.png`, ou `stem-2.png`, `stem-3.png`… se já usado nesta execução."""
    out, i = plot_dir / f"{stem}.png", 1
    while out in taken:
        i += 1
        out = plot_dir / f"{stem}-{i}.png"
    return out


def run_plot(path: Path, window_size: int, step: int, plot_dir: Path,
             width: int = 1600, height: int = 600, dpi: int = 100,
             console: Console | None = None) -> list[Path]:
    records = read_records(path)
    written = []
    taken = set()

    with Progress(
        "[progress.percentage]{task.percentage:>3.0f}%",
        "•", "{task.description}", TimeElapsedColumn(),
        console=console or Console(stderr=True), transient=True
    ) as prog:
        task = prog.add_task("[cyan]GC profile", total=len(records))
        for rec in records:
            try:
                series = SlidingWindowSeries(rec.seq, window_size, step)
            except InvalidWindowConfiguration as e:
                log.warning("%s: gráfico ignorado (%s)", rec.id, e)
                prog.advance(task)
                continue

            out = _unique_path(Path(plot_dir), safe_filename(rec.id), taken)
            if out.stem != safe_filename(rec.id):
                log.warning("%s: nome já usado, gravando em %s", rec.id, out.name)
            taken.add(out)
            with timed(f"{rec.id}: {len(series)} janelas"):
                written.append(plot_profile(rec.id, series.positions(), len(rec),
                                            out, width, height, dpi,
                                            window_size=series.window_size))
            prog.advance(task)

    return written
