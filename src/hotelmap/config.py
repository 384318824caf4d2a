"""Application configuration and settings management."""

import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="HOTELMAP_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Hotel Map Clustering API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Root logging level.")
    data_root: Path = Field(default=Path("data"), description="Root directory for static data files.")
    hotels_file: Path = Field(
        default=Path("data/hotels.json"),
        description="Hotel dataset (JSON array of hotel records).",
    )
    cluster_min_zoom: float = Field(default=8.0, description="Lowest zoom level at which clustering is active.")
    cluster_max_zoom: float = Field(default=14.0, description="Highest zoom level at which clustering is active.")
    cluster_radius_px: float = Field(default=50.0, gt=0.0, description="On-screen radius that defines 'nearby'.")
    cluster_max_size: int = Field(default=50, ge=1, description="Hard cap on hotels per cluster.")
    cluster_cache_capacity: int = Field(default=50, ge=1, description="Entries kept by the clustering result cache.")
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", "hotels_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @model_validator(mode="after")
    def _check_zoom_range(self) -> "Settings":
        if self.cluster_min_zoom > self.cluster_max_zoom:
            raise ValueError(
                f"cluster_min_zoom ({self.cluster_min_zoom}) must not exceed cluster_max_zoom ({self.cluster_max_zoom})"
            )
        return self


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the service process."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
