"""
zpeaks.sources
================
Parse numeric samples out of text or CSV streams.
"""
from __future__ import annotations

import csv
import logging
from typing import Any, Iterable, Iterator, NamedTuple

from zpeaks.core.numeric import FLOAT, Arithmetic

logger = logging.getLogger("zpeaks.sources")


class Sample(NamedTuple):
    index: int
    row: list[str]
    value: Any


def read_samples(
    lines: Iterable[str],
    column: int = 0,
    delimiter: str = ",",
    has_header: bool = False,
    arithmetic: Arithmetic = FLOAT,
) -> Iterator[Sample]:
    """
    Lazily yield one ``Sample`` per usable row.

    Blank rows and rows starting with ``#`` are ignored. Rows where ``column``
    is missing, does not parse as a number or is not finite are logged and
    skipped, so
    ``Sample.index`` counts accepted samples only.
    """
    reader = csv.reader(lines, delimiter=delimiter)
    index = 0
    for raw in reader:
        if not raw or not any(cell.strip() for cell in raw):
            continue
        if raw[0].lstrip().startswith("#"):
            continue
        if has_header:
            has_header = False
            continue
        if len(raw) <= column:
            logger.warning("Line %s: no column %s, skipping", reader.line_num, column)
            continue
        try:
            value = arithmetic.convert(raw[column].strip())
        except (ValueError, ArithmeticError) as exc:
            logger.warning("Line %s: cannot parse %r (%s), skipping", reader.line_num, raw[column], exc)
            continue
        if not arithmetic.is_finite(value):
            logger.warning("Line %s: non-finite value %r, skipping", reader.line_num, raw[column])
            continue
        yield Sample(index, raw, value)
        index += 1
