"""Utility modules for the Floodwatch status engine."""

from .config import config, Config
from .dynamodb_client import StationStore, StationStoreError
from .s3_client import S3Client
from .timestamps import parse_timestamp
