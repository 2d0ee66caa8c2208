import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)

# Generic counters -----------------------------------------------------------

# Metrics are stored as floats to support both counters and timers.
_COUNTERS: Dict[str, float] = {}


def emit_counter(name: str, increment: float = 1) -> None:
    """Increment a named metric for analytics."""

    _COUNTERS[name] = _COUNTERS.get(name, 0) + increment


def set_metric(name: str, value: float) -> None:
    """Set a named metric to an explicit value."""

    _COUNTERS[name] = value


def get_counters() -> Dict[str, float]:
    """Return current generic metrics (for tests)."""

    return _COUNTERS.copy()


def reset_counters() -> None:
    """Reset generic metrics (for tests)."""

    _COUNTERS.clear()


def save_analytics_snapshot(analytics_dir: str | Path = "analytics_data") -> Path:
    """Persist the current counters as a timestamped JSON file."""

    analytics_dir = Path(analytics_dir)
    analytics_dir.mkdir(parents=True, exist_ok=True)

    now = datetime.now()
    filename = analytics_dir / f"{now.strftime('%Y-%m-%d_%H-%M-%S')}.json"

    snapshot = {"timestamp": now.isoformat(), "counters": get_counters()}
    with open(filename, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, indent=2, sort_keys=True)

    logger.info("Analytics snapshot saved: %s", filename)
    return filename
