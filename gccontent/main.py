import argparse
import sys
from pathlib import Path

from . import settings
from . import log as _log
from .errors import FormatError, InputUnavailable
from .pipeline import run_plot, run_report


def _positive(v: str) -> int:
    n = int(v)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {v}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gccontent",
        description="Analyzes the GC-Content of a genome"
    )
    p.add_argument("file",         type=Path, metavar="FILE", help="Input file in FASTA format")
    p.add_argument("--plot",       action="store_true",  help="Sliding-window GC plot per record")
    p.add_argument("--window",     type=_positive, help="Bases per window")
    p.add_argument("--step",       type=_positive, help="Bases advanced per sample")
    p.add_argument("--plot-dir",   type=Path, help="Output directory for plots")
    p.add_argument("--csv",        type=Path, help="Also write a composition table (CSV)")
    p.add_argument("--log-level",  help="DEBUG, INFO, WARNING…")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # valores ⇢ fallback para Settings
    window   = args.window    or settings.WINDOW_SIZE
    step     = args.step      or settings.WINDOW_STEP
    plot_dir = args.plot_dir  or settings.PLOT_DIR
    level    = args.log_level or settings.LOG_LEVEL

    if step > window:
        parser.error(f"--step ({step}) must not exceed --window ({window})")

    console = _log.setup(level, settings.LOG_FILE)

    try:
        if args.plot:
            run_plot(args.file, window, step, plot_dir,
                     settings.PLOT_WIDTH, settings.PLOT_HEIGHT, settings.PLOT_DPI,
                     console=console)
        else:
            run_report(args.file, sys.stdout, args.csv)
    except (InputUnavailable, FormatError) as e:
        console.print(str(e), style="red", markup=False, highlight=False, soft_wrap=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
