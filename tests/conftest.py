"""Shared fixtures: fresh in-memory ledgers and a hand-driven clock."""

import pytest

from app.container import container
from app.services import SequenceClock, VotingLedger

ADMIN = "deployer"


@pytest.fixture
def clock():
    return SequenceClock(start=1)


@pytest.fixture
def ledger(clock):
    ledger = VotingLedger.open(":memory:", admin=ADMIN, clock=clock)
    yield ledger
    ledger.close()


@pytest.fixture
def api(clock):
    """Process container wired to a private in-memory ledger."""
    container.reset()
    container.init(db_path=":memory:", admin=ADMIN, clock=clock)
    yield container
    container.reset()
