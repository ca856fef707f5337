"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Distance estimation
    earth_radius_km: float = 6_371.0  # sphere, no ellipsoid
    distance_unit: str = " meter"
    undefined_marker: str = "undefined"

    # Ruler polyline drawn between two linked pins
    ruler_stroke_color: str = "#FFFF00"
    ruler_stroke_opacity: float = 0.7
    ruler_stroke_weight: int = 7

    # Initial map view
    map_center_lat: float = -6.891161
    map_center_lng: float = 107.610633
    map_zoom: int = 17

    # API
    rate_limit: str = "100/minute"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
