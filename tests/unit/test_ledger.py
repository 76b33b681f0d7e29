"""Tests for ledger-wide behaviour: tally invariant, atomicity, isolation."""

import threading

import pytest

from app.models import ErrorCode, LedgerError
from app.services import SequenceClock, VotingLedger

ADMIN = "deployer"
ALICE = "wallet_1"
BOB = "wallet_2"
CAROL = "wallet_3"

TABLES = ["ledger_state", "voter", "ballot", "vote", "vote_count"]


def snapshot(ledger: VotingLedger) -> dict[str, list]:
    return {t: ledger.connection.execute(f"SELECT * FROM {t} ORDER BY ALL").fetchall() for t in TABLES}


def assert_tally_consistent(ledger: VotingLedger, ballot_id: int, voters: list[str]) -> None:
    options = ledger.get_ballot_options(ballot_id)
    counted = sum(ledger.get_vote_count(ballot_id, i) for i in range(len(options)))
    voted = sum(ledger.has_voter_voted(ballot_id, v) for v in voters)
    assert counted == voted == ledger.get_ballot_info(ballot_id).total_votes


class TestScenario:
    def test_cast_then_change(self, ledger):
        for voter in (ALICE, BOB, CAROL):
            ledger.register_voter(voter)
        ballot_id = ledger.create_ballot(ADMIN, "Board", "", ["A", "B", "C"], 100)

        ledger.cast_vote(ALICE, ballot_id, 0)
        ledger.cast_vote(BOB, ballot_id, 1)
        ledger.cast_vote(CAROL, ballot_id, 0)
        assert ledger.get_vote_count(ballot_id, 0) == 2
        assert ledger.get_vote_count(ballot_id, 1) == 1
        assert ledger.get_ballot_info(ballot_id).total_votes == 3

        ledger.change_vote(BOB, ballot_id, 2)
        assert ledger.get_vote_count(ballot_id, 0) == 2
        assert ledger.get_vote_count(ballot_id, 1) == 0
        assert ledger.get_vote_count(ballot_id, 2) == 1
        assert ledger.get_ballot_info(ballot_id).total_votes == 3

    def test_tally_invariant_holds_throughout(self, ledger, clock):
        voters = [f"voter_{i}" for i in range(8)]
        for voter in voters:
            ledger.register_voter(voter)
        ballot_id = ledger.create_ballot(ALICE, "Poll", "", ["A", "B", "C", "D"], 50)

        steps = [
            (ledger.cast_vote, "voter_0", 0),
            (ledger.cast_vote, "voter_1", 1),
            (ledger.change_vote, "voter_0", 3),
            (ledger.cast_vote, "voter_1", 2),  # already voted
            (ledger.change_vote, "voter_2", 1),  # no prior vote
            (ledger.cast_vote, "voter_2", 3),
            (ledger.cast_vote, "voter_3", 4),  # invalid option
            (ledger.change_vote, "voter_1", 1),  # same option
            (ledger.cast_vote, "voter_4", 0),
            (ledger.change_vote, "voter_4", 2),
        ]
        for fn, voter, option in steps:
            clock.advance()
            try:
                fn(voter, ballot_id, option)
            except LedgerError:
                pass
            assert_tally_consistent(ledger, ballot_id, voters)

        assert ledger.get_ballot_info(ballot_id).total_votes == 4


class TestAtomicity:
    def test_rejected_calls_leave_no_trace(self, ledger):
        ledger.register_voter(ALICE)
        ballot_id = ledger.create_ballot(BOB, "Poll", "", ["A", "B"], 10)
        ledger.cast_vote(ALICE, ballot_id, 0)
        before = snapshot(ledger)

        rejected = [
            (ledger.register_voter, ALICE),
            (ledger.unregister_voter, BOB, ALICE),
            (ledger.update_admin, BOB, BOB),
            (ledger.create_ballot, BOB, "", "", ["A", "B"], 10),
            (ledger.deactivate_ballot, CAROL, ballot_id),
            (ledger.cast_vote, ALICE, ballot_id, 1),
            (ledger.change_vote, ALICE, ballot_id, 0),
            (ledger.change_vote, ALICE, ballot_id, 5),
        ]
        for fn, *args in rejected:
            with pytest.raises(LedgerError):
                fn(*args)

        assert snapshot(ledger) == before

    def test_failure_mid_call_rolls_back(self, ledger, monkeypatch):
        ledger.register_voter(ALICE)
        ballot_id = ledger.create_ballot(BOB, "Poll", "", ["A", "B"], 10)
        before = snapshot(ledger)

        def broken(*_):
            raise RuntimeError("disk full")

        monkeypatch.setattr(ledger.casting._ballots, "increment_total", broken)
        with pytest.raises(RuntimeError):
            ledger.cast_vote(ALICE, ballot_id, 1)

        assert snapshot(ledger) == before
        assert not ledger.has_voter_voted(ballot_id, ALICE)
        assert ledger.get_vote_count(ballot_id, 1) == 0

        monkeypatch.undo()
        assert ledger.cast_vote(ALICE, ballot_id, 1) == "Vote cast successfully"

    def test_error_carries_code_and_tag(self, ledger):
        with pytest.raises(LedgerError) as exc:
            ledger.deactivate_ballot(ADMIN, 42)
        assert exc.value.code == ErrorCode.NOT_FOUND
        assert int(exc.value.code) == 101
        assert exc.value.code.tag == "not-found"


class TestIsolation:
    def test_instances_are_independent(self):
        first = VotingLedger.open(":memory:", admin="admin_one", clock=SequenceClock())
        second = VotingLedger.open(":memory:", admin="admin_two", clock=SequenceClock(start=100))
        try:
            first.register_voter(ALICE)
            first.create_ballot(ALICE, "Only here", "", ["A", "B"], 5)

            assert second.get_contract_admin() == "admin_two"
            assert not second.is_voter_registered(ALICE)
            assert second.get_ballot_info(1) is None
            assert second.get_next_ballot_id() == 1
            assert second.create_ballot(BOB, "Other", "", ["A", "B"], 5) == 1
            assert second.get_ballot_info(1).start_seq == 100
        finally:
            first.close()
            second.close()

    def test_reopen_file_keeps_state(self, tmp_path):
        path = str(tmp_path / "ledger.duckdb")
        ledger = VotingLedger.open(path, admin=ADMIN)
        ledger.register_voter(ALICE)
        ledger.create_ballot(ALICE, "Saved", "", ["A", "B"], 5)
        ledger.close()

        reopened = VotingLedger.open(path, admin="someone_else")
        try:
            assert reopened.get_contract_admin() == ADMIN
            assert reopened.is_voter_registered(ALICE)
            assert reopened.get_next_ballot_id() == 2
        finally:
            reopened.close()


class TestSerialization:
    def test_concurrent_votes_are_all_counted(self, ledger):
        voters = [f"voter_{i}" for i in range(40)]
        for voter in voters:
            ledger.register_voter(voter)
        ballot_id = ledger.create_ballot(ADMIN, "Busy", "", ["A", "B", "C"], 1000)

        errors = []

        def vote(voter: str, option: int) -> None:
            try:
                ledger.cast_vote(voter, ballot_id, option)
                ledger.cast_vote(voter, ballot_id, option)
            except LedgerError as e:
                errors.append(e.code)

        threads = [threading.Thread(target=vote, args=(v, i % 3)) for i, v in enumerate(voters)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == [ErrorCode.ALREADY_VOTED] * len(voters)
        assert ledger.get_ballot_info(ballot_id).total_votes == len(voters)
        assert_tally_consistent(ledger, ballot_id, voters)
