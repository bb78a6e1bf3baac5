"""Run records and configuration I/O for JetCycle.

Handles saving/loading evaluated operating points (and optional sweeps)
as JSON, and loading throttle schedules from JSON files.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np

from jetcycle.cycle.solver import CycleResult, design_to_dict
from jetcycle.cycle.sweep import T4_MAX, T4_MIN, ThrottleSchedule
from jetcycle.utils.validation import validate_throttle_schedule

logger = logging.getLogger(__name__)


# --- Run metadata ---


@dataclass
class RunMeta:
    """Top-level run metadata."""

    name: str = "Untitled"
    description: str = ""
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        self.modified = datetime.now(timezone.utc).isoformat()


@dataclass
class RunRecord:
    """Persisted record of one cycle evaluation.

    Values are plain dicts so the file stays readable and editable.
    """

    meta: RunMeta = field(default_factory=RunMeta)

    # Operating point
    inputs: dict[str, float] = field(default_factory=dict)
    atmosphere: dict[str, float] = field(default_factory=dict)

    # Design point used for the evaluation
    design: dict[str, float] = field(default_factory=dict)

    # Results
    performance: dict[str, float] = field(default_factory=dict)
    stations: dict[str, dict[str, float]] = field(default_factory=dict)

    # Optional sweeps, keyed by swept parameter
    sweeps: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_result(cls, result: CycleResult, name: str = "Untitled") -> RunRecord:
        """Build a record from a solved cycle."""
        meta = RunMeta(name=name, created=datetime.now(timezone.utc).isoformat())
        return cls(
            meta=meta,
            inputs=asdict(result.inputs),
            atmosphere=asdict(result.atmosphere),
            design=design_to_dict(result.design),
            performance=asdict(result.performance),
            stations=result.as_dict()["stations"],
        )


# --- JSON serialization ---


class _NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, (np.integer,)):
            return int(obj)
        if isinstance(obj, (np.floating,)):
            return float(obj)
        return super().default(obj)


def save_run_json(record: RunRecord, path: str | Path) -> None:
    """Save a run record to a JSON file."""
    path = Path(path)
    record.meta.touch()

    with open(path, "w") as f:
        json.dump(asdict(record), f, indent=2, cls=_NumpyEncoder)

    logger.info("Saved run to %s", path)


def load_run_json(path: str | Path) -> RunRecord:
    """Load a run record from a JSON file."""
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    meta = RunMeta(**data.pop("meta", {}))
    return RunRecord(meta=meta, **data)


# --- Throttle schedule ---


def load_throttle_schedule(path: str | Path) -> ThrottleSchedule:
    """Load throttle bounds from a JSON file.

    The file holds ``{"t4_min": ..., "t4_max": ...}``; missing keys take
    the defaults.

    Raises:
        ValueError: If the bounds are invalid.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    t4_min = float(data.get("t4_min", T4_MIN))
    t4_max = float(data.get("t4_max", T4_MAX))

    check = validate_throttle_schedule(t4_min, t4_max)
    if not check.is_valid:
        raise ValueError(
            f"Invalid throttle schedule in {path}: "
            + "; ".join(m.message for m in check.errors)
        )

    logger.debug("Loaded throttle schedule %.1f–%.1f K from %s", t4_min, t4_max, path)
    return ThrottleSchedule(t4_min=t4_min, t4_max=t4_max)
