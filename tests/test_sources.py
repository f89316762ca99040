from __future__ import annotations

import io
import logging
from decimal import Decimal

from zpeaks.core.numeric import DecimalArithmetic
from zpeaks.sources import read_samples


def test_reads_single_column():
    samples = list(read_samples(io.StringIO("1.0\n2.5\n\n# note\n3\n")))
    assert [s.value for s in samples] == [1.0, 2.5, 3.0]
    assert [s.index for s in samples] == [0, 1, 2]


def test_column_header_and_delimiter():
    text = "ts;value\n100;1.5\n101;2.5\n"
    samples = list(read_samples(io.StringIO(text), column=1, delimiter=";", has_header=True))
    assert [s.value for s in samples] == [1.5, 2.5]
    assert samples[0].row == ["100", "1.5"]


def test_bad_rows_are_skipped(caplog):
    text = "1.0\nabc\n2.0,\nnan\n3.0\n"
    with caplog.at_level(logging.WARNING, logger="zpeaks.sources"):
        samples = list(read_samples(io.StringIO(text)))
    assert [s.value for s in samples] == [1.0, 2.0, 3.0]
    assert [s.index for s in samples] == [0, 1, 2]
    assert "cannot parse" in caplog.text
    assert "non-finite" in caplog.text


def test_missing_column_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="zpeaks.sources"):
        samples = list(read_samples(io.StringIO("1,2\n3\n4,5\n"), column=1))
    assert [s.value for s in samples] == [2.0, 5.0]
    assert "no column 1" in caplog.text


def test_decimal_values():
    samples = list(read_samples(io.StringIO("1.10\n0.3\nxyz\n"), arithmetic=DecimalArithmetic()))
    assert [s.value for s in samples] == [Decimal("1.10"), Decimal("0.3")]
