"""
Shared test fixtures for the boat manager.

Provides an empty repo, a repo seeded with the Eleanor record, a data file on disk,
and a CLI runner.
"""

from decimal import Decimal

import pytest

from marina.models import Boat, SlipLocation, StorageType
from marina.repository import BoatRepo


@pytest.fixture
def repo():
    return BoatRepo()


@pytest.fixture
def eleanor():
    return Boat(
        name="Eleanor",
        length=Decimal("28"),
        storage_type=StorageType.SLIP,
        location=SlipLocation(26),
        amount_owed=Decimal("500.00"),
    )


@pytest.fixture
def seeded_repo(repo, eleanor):
    repo.insert(eleanor)
    return repo


@pytest.fixture
def data_file(tmp_path):
    """A data file holding a single slip boat."""
    path = tmp_path / "BoatData.csv"
    path.write_text("Eleanor,28,slip,26,500.00\n", encoding="utf-8")
    return path


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
