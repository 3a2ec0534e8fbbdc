"""CSV ingestion of OHLCV bars."""

import csv
import logging
from pathlib import Path

from .errors import InvalidBar
from .marketdata import Bar

log = logging.getLogger(__name__)

# canonical -> accepted aliases
ALIASES = {
    "timestamp": ("timestamp", "time", "datetime", "date"),
    "open": ("open", "o"),
    "high": ("high", "h"),
    "low": ("low", "l"),
    "close": ("close", "c"),
    "volume": ("volume", "vol", "v"),
}


def _norm(s: str) -> str:
    return s.strip().lower()


def _fnum(val: str | None, default: float | None = None) -> float:
    s = "" if val is None else str(val).strip()
    if s == "":
        if default is None:
            raise ValueError("missing value")
        return default
    return float(s)


def read_bars(
    path: str | Path,
    *,
    timestamp_col: str | None = None,
    open_col: str | None = None,
    high_col: str | None = None,
    low_col: str | None = None,
    close_col: str | None = None,
    volume_col: str | None = None,
    delimiter: str = ",",
    skip_invalid: bool = False,
) -> list[Bar]:
    """
    Load bars from a headered CSV file.

    CSV requirements:
      - open/high/low/close columns (default autodetect, case-insensitive)
      - optional timestamp and volume columns

    Args:
        path: CSV file path
        *_col: Explicit column names overriding autodetection
        delimiter: Field delimiter
        skip_invalid: Log and skip rows that are not valid bars instead of raising

    Returns:
        Bars in file order

    Raises:
        ValueError: missing header or required columns
        InvalidBar: a row is not a valid bar and skip_invalid is False
    """
    path = Path(path)
    bars: list[Bar] = []
    skipped = 0

    with path.open("r", newline="") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        if reader.fieldnames is None:
            raise ValueError("CSV has no header row")

        # Build normalized header map
        header_map = {_norm(h): h for h in reader.fieldnames if h is not None}

        def pick(explicit: str | None, key: str) -> str | None:
            if explicit:
                if _norm(explicit) not in header_map:
                    raise ValueError(f"CSV missing column: {explicit}")
                return header_map[_norm(explicit)]
            for a in ALIASES[key]:
                if a in header_map:
                    return header_map[a]
            return None

        ts_key = pick(timestamp_col, "timestamp")
        o_key = pick(open_col, "open")
        h_key = pick(high_col, "high")
        l_key = pick(low_col, "low")
        c_key = pick(close_col, "close")
        v_key = pick(volume_col, "volume")

        missing = [
            name
            for name, k in [
                ("open", o_key),
                ("high", h_key),
                ("low", l_key),
                ("close", c_key),
            ]
            if k is None
        ]
        if missing:
            raise ValueError(f"CSV missing required columns: {', '.join(missing)}")

        for row in reader:
            # Blank lines come back as rows of empty values
            if not any((v or "").strip() for v in row.values() if isinstance(v, str)):
                continue

            timestamp = (row.get(ts_key) or "").strip() if ts_key else ""

            try:
                bar = Bar(
                    open=_fnum(row.get(o_key)),
                    high=_fnum(row.get(h_key)),
                    low=_fnum(row.get(l_key)),
                    close=_fnum(row.get(c_key)),
                    volume=_fnum(row.get(v_key), 0.0) if v_key else 0.0,
                    timestamp=timestamp or None,
                )
            except ValueError as e:
                message = f"{path.name} line {reader.line_num}: {e}"
                if not skip_invalid:
                    raise InvalidBar(message) from e
                log.warning("Skipping invalid row: %s", message)
                skipped += 1
                continue

            bars.append(bar)

    log.info("Loaded %d bars from %s (%d skipped)", len(bars), path, skipped)
    return bars
