"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path

# Add directions_cli/ to Python path so `from dircli.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "directions_cli"))

import pytest

os.environ.pop("DIRCLI_OPTIONS_PATH", None)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Byte-exact output of the directions encoder for a one-route response.
CANONICAL_RESPONSE = (
    '{"code":"Ok",'
    '"waypoints":[{"name":"Market Street","location":[-122.42,37.78]},'
    '{"name":"Mission Street","location":[-122.41,37.77]}],'
    '"routes":[{"routeIndex":"0","distance":1234.5,"duration":300.0,'
    '"geometry":"_ibE_seK","weight":310.2,"weight_name":"auto",'
    '"legs":[{"distance":1234.5,"duration":300.0,"summary":"Market Street",'
    '"steps":[{"distance":1234.5,"duration":300.0,"geometry":"_ibE_seK",'
    '"name":"Market Street","mode":"driving",'
    '"maneuver":{"location":[-122.42,37.78],"bearing_before":0.0,'
    '"bearing_after":90.0,"instruction":"Drive east on Market Street.",'
    '"type":"depart"},'
    '"driving_side":"right","weight":310.2,'
    '"intersections":[{"location":[-122.42,37.78],"bearings":[90],'
    '"entry":[true],"out":0,"geometry_index":0}]}]}],'
    '"voiceLocale":"en-US","requestUuid":"route-uuid-1"}],'
    '"uuid":"route-uuid-1"}'
)

CANONICAL_REFRESH = (
    '{"code":"Ok","route":{"legs":[{"annotation":'
    '{"distance":[10.5,20.0],"congestion":["low","heavy"]}}]}}'
)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def canonical_response() -> bytes:
    return CANONICAL_RESPONSE.encode("utf-8")


@pytest.fixture
def canonical_refresh() -> bytes:
    return CANONICAL_REFRESH.encode("utf-8")


@pytest.fixture
def reformatted_response_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "directions_reformatted.json"


@pytest.fixture
def malformed_response_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "directions_malformed.json"
