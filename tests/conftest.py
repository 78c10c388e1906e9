"""Shared fixtures for comm-finder tests"""

import json

import httpx
import pytest

from commfinder.config import reset_settings_manager
from commfinder.core.repository import DatasetCache, reset_session_cache
from commfinder.utils.logging import CommFinderLogger


def sheet(workbook_id="wb1", sheet_name="UFR corners", x=3, y=1):
    return {"google_sheets": {"workbook_id": workbook_id, "sheet_name": sheet_name, "x": x, "y": y}}


def custom(url="https://blddb.net/nightmare.html", name="BLDDB"):
    return {"custom": {"url": url, "name": name}}


@pytest.fixture
def corner_data():
    """Corner dataset JSON with a forward-only, an inverse-only and a two-sided case"""
    return {
        "ABC": {
            "[U, R D R']": {
                "U R D R' U' R D' R'": {
                    "users": {"alice": [sheet()], "bob": [sheet("wb2", "Corners", 10, 27)]},
                },
                "U R D R' U' R D' R2 R": {
                    "users": {"bob": [custom()]},
                    "notes": "cancels into R2",
                },
            },
            "[R' D R, U]": {
                "R' D R U R' D' R U'": {
                    "users": {"carol": [custom()], "dave": [custom()]},
                },
            },
            "[D, R U R']": {
                "D R U R' D' R U' R'": {"users": {"erin": [sheet()]}},
            },
        },
        "ACB": {
            "[R U R', D]": {
                "R U R' D R U' R' D'": {"users": {"alice": [sheet()]}},
            },
        },
        "VXW": {
            "[R2, U' L U]": {
                "R2 U' L U R2 U' L' U": {"users": {"frank": [custom()]}},
            },
        },
        "DEF": {
            "[L, U' R U]": {
                "L U' R U L' U' R' U": {"users": {"gina": []}},
            },
        },
    }


@pytest.fixture
def cache():
    return DatasetCache()


@pytest.fixture
def json_transport(corner_data):
    """MockTransport serving corner_data for Corner3Cycle and 404 otherwise; records requests"""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path.endswith("/Corner3Cycle.json"):
            return httpx.Response(200, content=json.dumps(corner_data).encode())
        return httpx.Response(404, text="missing")

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport


@pytest.fixture
def dataset_dir(tmp_path, corner_data):
    """Directory holding Corner3Cycle.json"""
    directory = tmp_path / "datasets"
    directory.mkdir()
    (directory / "Corner3Cycle.json").write_text(json.dumps(corner_data), encoding="utf-8")
    return directory


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    """Isolated user data directory for settings"""
    directory = tmp_path / "user"
    monkeypatch.setenv("COMMFINDER_DATA_DIR", str(directory))
    monkeypatch.delenv("COMMFINDER_DATASET_URL", raising=False)
    reset_settings_manager()
    yield directory
    reset_settings_manager()


@pytest.fixture(autouse=True)
def clean_session():
    """Each test starts without a configured logger or cached datasets"""
    yield
    CommFinderLogger.cleanup()
    reset_session_cache()
