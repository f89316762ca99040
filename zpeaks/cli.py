from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml
from rich.console import Console
from rich.table import Table

from .config.loader import load_config
from .config.schema import validate_config
from .core.bus import EventBus
from .core.peak import PeakKind
from .monitor import PeakMonitor
from .observability.prometheus import PeakPrometheusExporter
from .sources import read_samples

logger = logging.getLogger("zpeaks")

# flags copied onto the config when given
_OVERRIDES = (
    "lag",
    "threshold",
    "influence",
    "column",
    "delimiter",
    "prometheus_port",
)


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="zpeaks", description="Smoothed z-score peak detection for numeric streams")
    p.add_argument("input", nargs="?", default="-", help="CSV/text file with one sample per row ('-' for stdin)")
    p.add_argument("--config", help="Path to YAML config", default=None)
    p.add_argument("--lag", type=int, default=None, help="Window length")
    p.add_argument("--threshold", default=None, help="Peak threshold in standard deviations")
    p.add_argument("--influence", default=None, help="Weight of peaks written back into the window")
    p.add_argument("--decimal", action="store_true", help="Use exact decimal arithmetic")
    p.add_argument("--column", type=int, default=None, help="Zero-based column holding the sample")
    p.add_argument("--delimiter", default=None, help="Column delimiter")
    p.add_argument("--has-header", action="store_true", help="Skip the first data row")
    p.add_argument("--summary", action="store_true", help="Print a summary table at the end")
    p.add_argument("--prometheus-port", type=int, default=None, help="Expose peak metrics on this port")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p


def _apply_overrides(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    for key in _OVERRIDES:
        value = getattr(args, key)
        if value is not None:
            config[key] = value
    if args.decimal:
        config["numeric"] = "decimal"
    if args.has_header:
        config["has_header"] = True
    if args.prometheus_port is not None:
        config["enable_prometheus"] = True
    if args.debug:
        config["debug"] = True
    return config


def _summary_table(monitor: PeakMonitor) -> Table:
    table = Table(title="zpeaks summary")
    table.add_column("metric")
    table.add_column("value", justify="right")
    table.add_row("samples", str(monitor.sample_count))
    table.add_row("high peaks", str(monitor.peak_counts[PeakKind.HIGH]))
    table.add_row("low peaks", str(monitor.peak_counts[PeakKind.LOW]))
    stats = monitor.detector.stats()
    table.add_row("window mean", "-" if stats is None else str(stats.mean))
    table.add_row("window stddev", "-" if stats is None else str(stats.stddev))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        config = _apply_overrides(load_config(args.config), args)
        settings = validate_config(config)
        detector = settings.build_detector()
    except (OSError, yaml.YAMLError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logger.debug("zpeaks settings: %s", settings)

    console = Console()
    bus = EventBus()
    monitor = PeakMonitor(detector, bus=bus, signal=Path(args.input).stem if args.input != "-" else "stdin")

    if settings.enable_prometheus:
        exporter = PeakPrometheusExporter(port=settings.prometheus_port)
        exporter.attach(bus)
        exporter.start()
        logger.info("Prometheus exporter started on :%s", settings.prometheus_port)

    arithmetic = detector.arithmetic
    if args.input == "-":
        handle = sys.stdin
    else:
        try:
            # undecodable bytes become unparsable rows that read_samples skips
            handle = Path(args.input).open("r", encoding="utf-8", errors="replace", newline="")
        except OSError as exc:
            logger.error("Cannot open %s: %s", args.input, exc)
            return 2

    try:
        samples = read_samples(
            handle,
            column=settings.column,
            delimiter=settings.delimiter,
            has_header=settings.has_header,
            arithmetic=arithmetic,
        )
        for sample in samples:
            kind = monitor.update(sample.value, item=sample)
            if kind is not None:
                console.print(f"{sample.index}  {sample.value}  {kind.value}", highlight=False, markup=False)
    except (UnicodeDecodeError, csv.Error) as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return 2
    finally:
        if handle is not sys.stdin:
            handle.close()

    if args.summary:
        console.print(_summary_table(monitor))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
