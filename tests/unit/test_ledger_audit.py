"""Tests for the ledger_audit command-line script."""

import sys

import polars as pl
import pytest

import ledger_audit
import settings.logging
from app.services import VotingLedger
from settings.logging import setup_logging

ADMIN = "deployer"
ALICE = "wallet_1"
BOB = "wallet_2"


@pytest.fixture(autouse=True)
def console_logging():
    yield
    setup_logging()


@pytest.fixture
def db_file(tmp_path):
    path = tmp_path / "ledger.duckdb"
    ledger = VotingLedger.open(str(path), admin=ADMIN)
    ledger.register_voter(ALICE)
    ledger.register_voter(BOB)
    ledger.create_ballot(ADMIN, "Board", "", ["A", "B"], 100)
    ledger.cast_vote(ALICE, 1, 0)
    ledger.cast_vote(BOB, 1, 1)
    ledger.close()
    return path


def run_main(monkeypatch, *args) -> int:
    monkeypatch.setattr(sys, "argv", ["ledger_audit.py", *args])
    with pytest.raises(SystemExit) as exc:
        ledger_audit.main()
    return exc.value.code


class TestArguments:
    def test_export_without_path(self, monkeypatch, db_file):
        assert run_main(monkeypatch, str(db_file), "--export") == 1

    def test_missing_database(self, monkeypatch, tmp_path):
        assert run_main(monkeypatch, str(tmp_path / "absent.duckdb")) == 1

    def test_in_memory_default_rejected(self, monkeypatch):
        monkeypatch.setattr(ledger_audit, "DB_PATH", ":memory:")
        assert run_main(monkeypatch) == 1


class TestExitCodes:
    def test_consistent_ledger(self, monkeypatch, db_file, capsys):
        assert run_main(monkeypatch, str(db_file)) == 0
        assert "Tallies consistent" in capsys.readouterr().out

    def test_tampered_tally(self, monkeypatch, db_file, capsys):
        ledger = VotingLedger.open(str(db_file), admin=ADMIN)
        ledger.connection.execute("UPDATE vote_count SET tally = 5 WHERE ballot_id = 1 AND option_index = 0")
        ledger.close()

        assert run_main(monkeypatch, str(db_file)) == 2
        assert "Tally mismatch found" in capsys.readouterr().out

    def test_export_writes_csv(self, monkeypatch, db_file, tmp_path):
        out = tmp_path / "results.csv"
        assert run_main(monkeypatch, str(db_file), "--export", str(out)) == 0

        df = pl.read_csv(out)
        assert df.height == 2
        assert df["count"].to_list() == [1, 1]


class TestLogFile:
    def test_log_file_flag_adds_file_sink(self, monkeypatch, db_file, tmp_path):
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(settings.logging, "LOG_DIR", log_dir)

        assert run_main(monkeypatch, str(db_file), "--log-file") == 0
        assert list(log_dir.glob("ledger_*.log"))

    def test_no_log_file_by_default(self, monkeypatch, db_file, tmp_path):
        log_dir = tmp_path / "logs"
        monkeypatch.setattr(settings.logging, "LOG_DIR", log_dir)

        assert run_main(monkeypatch, str(db_file)) == 0
        assert not log_dir.exists()
