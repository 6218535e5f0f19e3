"""Shared test fixtures for bidsort."""

import os
import sys
import tempfile

import pytest
from loguru import logger

from bidsort.bids.models import Bid

EBID_HEADER = "ArticleTitle,ArticleID,Department,CloseDate,WinningBid,InventoryID,VehicleID,ReceiptNumber,Fund"

EBID_ROWS = [
    "Pencil,98101,General,11/1/2016,$12.50,INV1,,R1,General Fund",
    "Apple,98102,Food,11/2/2016,$3.00,INV2,,R2,Enterprise",
    'Desk,98103,Office,11/3/2016,"$1,250.00",INV3,,R3,General Fund',
    "Apple,98104,Food,11/4/2016,$4.25,INV4,,R4,Enterprise",
]


@pytest.fixture(autouse=True)
def _reset_logging():
    """Point loguru back at stderr after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def write_bids_csv(tmp_dir):
    """Factory writing data rows (under the eBid header) to a file in tmp_dir."""

    def _write(rows: list[str], name: str = "bids.csv", header: str | None = EBID_HEADER) -> str:
        lines = ([header] if header is not None else []) + rows
        path = os.path.join(tmp_dir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture
def sample_csv(write_bids_csv):
    """A small file in the eBid export layout."""
    return write_bids_csv(EBID_ROWS)


@pytest.fixture
def make_bids():
    """Factory for bids with the given titles and sequential ids."""

    def _make(*titles: str) -> list[Bid]:
        return [Bid(bid_id=str(i), title=title, fund="General Fund", amount=i) for i, title in enumerate(titles)]

    return _make


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {"csv_path": os.path.join(tmp_dir, "bids.csv")},
        "loader": {"currency_symbol": "$", "delimiter": ","},
        "logging": {"level": "ERROR"},
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path
