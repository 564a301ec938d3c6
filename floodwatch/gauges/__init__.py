"""
Flood Stage: Gauge Classification and Alerts

Classifies observed and forecast river stages into NWS flood categories and
builds current/forecast flood alerts for each gauge.
"""

from .models import FloodAlert, FloodCategory, FloodThresholds, Gauge, GaugeObservationPoint
from .classifier import (
    classify_stage,
    build_observation_points,
    build_flood_alerts,
    summarize_forecasts,
    filter_active_gauges
)
from .trend import calculate_stage_trend, trend_for_history, TrendResult
from .forecast_fetcher import MAJOR_FORECAST_GAUGES, fetch_gauge_forecast, fetch_multiple_gauge_forecasts, parse_gauge_data
