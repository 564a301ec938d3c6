"""
Configuration management for the Floodwatch status engine.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass
class WeatherConfig:
    """Open-Meteo precipitation lookup configuration."""
    base_url: str = os.getenv("WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast")
    timeout_seconds: float = float(os.getenv("WEATHER_TIMEOUT_SECONDS", "10"))


@dataclass
class ResolutionConfig:
    """Pump status resolution pass configuration."""
    city_timeout_seconds: float = float(os.getenv("CITY_TIMEOUT_SECONDS", "15"))
    fallback_limit: int = 50  # Stations returned when the store is unavailable


@dataclass
class StoreConfig:
    """DynamoDB station store configuration."""
    table_name: str = os.getenv("STATION_TABLE_NAME", "PumpStations")
    region: str = os.getenv("STATION_TABLE_REGION", "us-west-2")


@dataclass
class NWPSConfig:
    """NOAA National Water Prediction Service configuration."""
    base_url: str = os.getenv("NWPS_API_URL", "https://api.water.noaa.gov/nwps/v1")
    timeout_seconds: float = 30
    observed_history_points: int = 24  # Most recent observations kept per gauge
    max_workers: int = 5  # Keep low to respect NWS rate limits


@dataclass
class USGSConfig:
    """USGS instantaneous values configuration."""
    gage_height_param: str = "00065"  # Gage height (feet)


@dataclass
class TrendConfig:
    """Stage trend detection configuration."""
    min_data_points: int = 4        # Minimum readings required
    rising_threshold: float = 0.5   # Feet of total change to classify as rising
    falling_threshold: float = -0.5 # Feet of total change to classify as falling


@dataclass
class S3Config:
    """S3 bucket configuration."""
    bucket_name: str = os.getenv("S3_BUCKET_NAME", "floodwatch-dashboard")
    station_output_prefix: str = "pump_status"
    gauge_output_prefix: str = "flood_forecast"


@dataclass
class Config:
    """Main configuration container."""
    weather: WeatherConfig
    resolution: ResolutionConfig
    store: StoreConfig
    nwps: NWPSConfig
    usgs: USGSConfig
    trend: TrendConfig
    s3: S3Config
    max_workers: int = 10  # For concurrent.futures parallelization

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from environment."""
        return cls(
            weather=WeatherConfig(),
            resolution=ResolutionConfig(),
            store=StoreConfig(),
            nwps=NWPSConfig(),
            usgs=USGSConfig(),
            trend=TrendConfig(),
            s3=S3Config(),
            max_workers=int(os.getenv("MAX_WORKERS", "10"))
        )


# Global config instance
config = Config.load()
