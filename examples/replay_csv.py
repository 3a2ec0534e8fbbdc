"""Replay a CSV bar file through indicators and print the final readings."""
import logging
from pathlib import Path

from streamta import Bar, dumps, loads, run_indicators
from streamta.indicators import ATR, EMA

log = logging.getLogger(__name__)

HERE = Path(__file__).parent


def main() -> None:
    # Indicators listed in YAML
    results = run_indicators(HERE / "sample_bars.csv", HERE / "indicators.yaml")
    for label, values in results.items():
        if isinstance(values, dict):
            values = values[next(iter(values))]
        log.info("%s: %d outputs, last %.4f", label, len(values), values[-1])

    # Streaming by hand, with a checkpoint part way through
    ema = EMA(period=3)
    atr = ATR(period=3)
    bars = [
        Bar(open=9.7, high=10.0, low=9.0, close=9.5),
        Bar(open=9.9, high=10.4, low=9.8, close=10.2),
    ]
    for bar in bars:
        log.info("%s=%.4f %s=%.4f", ema, ema.update(bar), atr, atr.update(bar))

    checkpoint = dumps(atr)
    resumed = loads(checkpoint)
    nxt = Bar(open=10.1, high=10.7, low=9.4, close=9.7)
    log.info("resumed %s=%.4f (original %.4f)", resumed, resumed.update(nxt), atr.update(nxt))


if __name__ == "__main__":
    main()
