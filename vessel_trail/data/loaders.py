"""
Data loaders for the vessel trail dashboard.
Provides loading and caching of the static trail snapshot.
"""

import json
import logging
import math
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Optional, Sequence

import pandas as pd
from pydantic import ValidationError

from vessel_trail.config import get_settings
from vessel_trail.errors import DatasetLoadError
from vessel_trail.models.trail import TrailPoint


logger = logging.getLogger(__name__)

# Data directory path
DATA_DIR = Path(__file__).parent
DEFAULT_TRAIL_FILE = DATA_DIR / "trail" / "trail_points.json"

# Column order for tabular views and CSV export
TRAIL_COLUMNS = [
    "timestamp",
    "longitude",
    "latitude",
    "power",
    "consumption",
    "sfoc",
    "sfoc_visible",
    "shaft_power",
    "shaft_speed",
    "log_speed",
    "wave_height",
    "wind_speed",
]


class DataService:
    """
    Service class for loading and accessing the trail dataset.
    The snapshot is read once and cached for the lifetime of the service.
    """

    def __init__(self, trail_file: Optional[Path] = None):
        self._trail_file = trail_file or DEFAULT_TRAIL_FILE
        self._trail: Optional[tuple[TrailPoint, ...]] = None

    @property
    def trail_file(self) -> Path:
        return self._trail_file

    def load_trail(self) -> tuple[TrailPoint, ...]:
        """
        Load the trail points.

        Falls back to a generated sample trail when the dataset file is absent.

        Raises:
            DatasetLoadError: If the file exists but cannot be parsed.
        """
        if self._trail is not None:
            return self._trail

        if self._trail_file.exists():
            self._trail = _load_trail_from_json(self._trail_file)
            logger.info("Loaded %d trail points from %s", len(self._trail), self._trail_file)
        else:
            logger.warning("Trail dataset %s not found, using sample trail", self._trail_file)
            self._trail = _create_sample_trail()

        return self._trail


def parse_trail_records(records: Sequence[dict[str, Any]]) -> tuple[TrailPoint, ...]:
    """
    Turn raw dataset records into trail points.

    Raises:
        DatasetLoadError: If a record does not match the trail point shape.
    """
    points = []
    for index, record in enumerate(records):
        try:
            points.append(TrailPoint.model_validate(record))
        except ValidationError as exc:
            raise DatasetLoadError(f"Invalid trail record at index {index}: {exc}") from exc
    return tuple(points)


def _load_trail_from_json(json_file: Path) -> tuple[TrailPoint, ...]:
    """Load trail points from a ``{"Data": [...]}`` JSON document."""
    try:
        with open(json_file, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise DatasetLoadError(f"Could not read trail dataset {json_file}: {exc}") from exc

    if isinstance(payload, dict):
        records = payload.get("Data", [])
    else:
        records = payload

    if not isinstance(records, list):
        raise DatasetLoadError(f"Trail dataset {json_file} has no record list")

    return parse_trail_records(records)


def _create_sample_trail(count: int = 24) -> tuple[TrailPoint, ...]:
    """Create a deterministic sample trail across the North Sea for testing."""
    start = datetime(2025, 1, 3, 6, 0, 0, tzinfo=timezone.utc)
    origin_lon, origin_lat = 4.05, 51.95
    dest_lon, dest_lat = 9.95, 53.55

    points = []
    for i in range(count):
        fraction = i / max(count - 1, 1)
        wave = math.sin(i / 3.0)
        points.append(TrailPoint(
            timestamp=(start + timedelta(days=15 * i)).strftime("%Y-%m-%dT%H:%M:%SZ"),
            position=[
                round(origin_lon + (dest_lon - origin_lon) * fraction, 4),
                round(origin_lat + (dest_lat - origin_lat) * fraction + 0.2 * wave, 4),
            ],
            power=round(108 + 8 * wave, 1),
            consumption=round(9 + 7 * math.cos(i / 4.0), 1),
            sfoc=round(105 + 6 * wave, 1),
            sfoc_visible=i % 5 != 0,
            shaft_power=round(11500 + 900 * wave, 0),
            shaft_speed=round(78 + 4 * wave, 1),
            log_speed=round(13.5 + 1.5 * wave, 1),
            wave_height=round(1.6 + 0.8 * abs(wave), 2),
            wind_speed=round(9 + 5 * abs(math.cos(i / 2.0)), 1),
        ))
    return tuple(points)


def trail_to_frame(points: Sequence[TrailPoint]) -> pd.DataFrame:
    """
    Convert trail points into a DataFrame for tabular display and export.
    Invalid positions are kept as empty longitude/latitude cells.
    """
    rows = []
    for point in points:
        coordinate = point.coordinate
        rows.append({
            "timestamp": point.timestamp,
            "longitude": coordinate[0] if coordinate else None,
            "latitude": coordinate[1] if coordinate else None,
            "power": point.power,
            "consumption": point.consumption,
            "sfoc": point.sfoc,
            "sfoc_visible": point.sfoc_visible,
            "shaft_power": point.shaft_power,
            "shaft_speed": point.shaft_speed,
            "log_speed": point.log_speed,
            "wave_height": point.wave_height,
            "wind_speed": point.wind_speed,
        })
    return pd.DataFrame(rows, columns=TRAIL_COLUMNS)


# Global data service instance
_data_service: Optional[DataService] = None


def get_data_service() -> DataService:
    """Get the global data service instance."""
    global _data_service
    if _data_service is None:
        _data_service = DataService(get_settings().dataset_path)
    return _data_service


def load_trail() -> tuple[TrailPoint, ...]:
    """Load the trail points."""
    return get_data_service().load_trail()
