"""
Runtime settings for the vessel trail dashboard.
Values can be overridden with VESSEL_TRAIL_* environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DashboardSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="VESSEL_TRAIL_", case_sensitive=False, extra="ignore")

    # Simulated backend round trip for filter submission
    submit_delay_seconds: float = Field(5.0, ge=0, description="Delay before a submitted filter is applied")

    # Viewport-fit policy
    fit_padding_px: int = Field(40, ge=0, description="Padding around the trail when fitting bounds")
    fit_duration_ms: int = Field(500, ge=0, description="Animated transition length for fit-bounds")
    single_point_zoom: float = Field(10.0, ge=0, le=22, description="Zoom used when only one point is shown")

    # Data
    dataset_path: Optional[Path] = Field(None, description="Override for the trail JSON file")

    # Presentation
    map_height: int = Field(560, gt=0)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> DashboardSettings:
    return DashboardSettings()
