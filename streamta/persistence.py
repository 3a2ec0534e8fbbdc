"""
Indicator state persistence.

Snapshots are plain JSON-compatible data:

    {"type": "ATR", "state": {"_true_range": {"type": "TrueRange", ...},
                              "_ema": {"type": "EMA", ...}}}

Composite indicators nest their sub-indicators the same way. Floats are
written with their shortest round-trip repr, so a restored indicator
produces exactly the same outputs as the original for the same inputs.
"""

import json
import logging
from typing import Any, Mapping

from .errors import SnapshotError
from .indicators import Indicator
from .registry import INDICATOR_CLASSES

log = logging.getLogger(__name__)


def _encode(value: Any) -> Any:
    if isinstance(value, Indicator):
        return snapshot(value)
    if isinstance(value, list):
        return [_encode(v) for v in value]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _decode(value: Any, template: Any, where: str, period: int | None) -> Any:
    """Decode `value`, requiring it to have the same shape as `template`."""
    if isinstance(template, Indicator):
        if not isinstance(value, Mapping):
            raise SnapshotError(f"{where}: expected a snapshot of {type(template).__name__}")
        indicator = restore(value)
        if type(indicator) is not type(template):
            raise SnapshotError(
                f"{where}: expected {type(template).__name__}, got {type(indicator).__name__}"
            )
        return indicator

    if isinstance(template, list):
        # Buffers are always sized to the indicator's own period
        if not isinstance(value, list) or len(value) != period:
            raise SnapshotError(f"{where}: expected a list of {period} values")
        return [_decode(v, template[0], f"{where}[{i}]", period) for i, v in enumerate(value)]

    if isinstance(template, bool):
        if not isinstance(value, bool):
            raise SnapshotError(f"{where}: expected a bool, got {value!r}")
        return value

    if isinstance(template, int):
        if not isinstance(value, int) or isinstance(value, bool):
            raise SnapshotError(f"{where}: expected an int, got {value!r}")
        return value

    if isinstance(template, float) or template is None:
        # None marks an optional float that has not been seen yet
        if value is None and template is None:
            return None
        if not _is_number(value):
            raise SnapshotError(f"{where}: expected a number, got {value!r}")
        return float(value)

    raise SnapshotError(f"{where}: cannot restore a {type(template).__name__} field")


def _check_period(state: Mapping[str, Any], type_name: str) -> int | None:
    if "_period" not in state:
        return None
    period = state["_period"]
    if not isinstance(period, int) or isinstance(period, bool) or period <= 0:
        raise SnapshotError(f"{type_name}._period: expected a positive int, got {period!r}")
    return period


def _check_positions(fields: Mapping[str, Any], type_name: str, period: int | None) -> None:
    """Write/extremum indices must point into the buffer, counts must fit in it."""
    if period is None:
        return
    for name, value in fields.items():
        if name.endswith("index") and not 0 <= value < period:
            raise SnapshotError(f"{type_name}.{name}: {value} outside [0, {period})")
        if name == "_count" and not 0 <= value <= period:
            raise SnapshotError(f"{type_name}._count: {value} outside [0, {period}]")


def snapshot(indicator: Indicator) -> dict[str, Any]:
    """Return the full state of `indicator` as JSON-compatible data."""
    return {
        "type": type(indicator).__name__,
        "state": {name: _encode(value) for name, value in vars(indicator).items()},
    }


def restore(data: Mapping[str, Any]) -> Indicator:
    """
    Rebuild an indicator from a snapshot produced by `snapshot`.

    Every field is checked against a default-constructed instance of the
    same class: nested indicators must be of the same class, buffers must
    hold `period` numbers and scalars must be of the same kind.

    Raises:
        SnapshotError: unknown indicator type or state that does not match
            the indicator's fields
    """
    if not isinstance(data, Mapping) or "type" not in data or "state" not in data:
        raise SnapshotError("snapshot must be a mapping with 'type' and 'state'")

    type_name = data["type"]
    if not isinstance(type_name, str):
        raise SnapshotError(f"snapshot type must be a string, got {type_name!r}")

    cls = INDICATOR_CLASSES.get(type_name)
    if cls is None:
        raise SnapshotError(f"Unknown indicator type in snapshot: {type_name!r}")

    state = data["state"]
    if not isinstance(state, Mapping):
        raise SnapshotError(f"Invalid state for {type_name}: expected a mapping")

    # Every indicator is default-constructible, which gives the fields to check against
    template = cls()
    expected = set(vars(template))
    if set(state) != expected:
        raise SnapshotError(
            f"State fields for {type_name} do not match: "
            f"expected {sorted(expected)}, got {sorted(state)}"
        )

    period = _check_period(state, type_name)
    fields = {
        name: _decode(value, getattr(template, name), f"{type_name}.{name}", period)
        for name, value in state.items()
    }
    _check_positions(fields, type_name, period)

    indicator = cls.__new__(cls)
    for name, value in fields.items():
        setattr(indicator, name, value)
    return indicator


def dumps(indicator: Indicator) -> bytes:
    """Serialize `indicator` to JSON bytes."""
    payload = json.dumps(snapshot(indicator), separators=(",", ":")).encode("utf-8")
    log.debug("Serialized %s (%d bytes)", indicator, len(payload))
    return payload


def loads(payload: bytes | str) -> Indicator:
    """Deserialize an indicator from bytes produced by `dumps`."""
    try:
        data = json.loads(payload)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise SnapshotError(f"Invalid snapshot payload: {e}") from e

    indicator = restore(data)
    log.debug("Restored %s", indicator)
    return indicator
