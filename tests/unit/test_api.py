"""Tests for the call interface views."""

import pytest
from pydantic import ValidationError as SchemaError

from web.api import ballots, registry, votes
from web.api.ballots.schemas import CreateBallotRequest
from web.api.errors import ValidationError

ADMIN = "deployer"
ALICE = "wallet_1"
BOB = "wallet_2"


class TestCallResponses:
    def test_success_carries_message(self, api):
        resp = registry.register_voter(ALICE)
        assert resp.ok
        assert resp.value == "Voter registered successfully"
        assert resp.error is None

    def test_failure_carries_code(self, api):
        registry.register_voter(ALICE)
        resp = registry.register_voter(ALICE)
        assert not resp.ok
        assert resp.value is None
        assert resp.error.code == 103
        assert resp.error.name == "already-exists"

    def test_create_returns_id(self, api):
        resp = ballots.create_ballot(ALICE, "Budget", "Vote on budget", ["Approve", "Reject"], 500)
        assert resp.ok
        assert resp.value == 1
        assert ballots.get_next_ballot_id() == 2

    @pytest.mark.parametrize(
        ("title", "options", "duration", "code"),
        [
            ("", ["A", "B"], 100, 201),
            ("T", ["Only"], 100, 202),
            ("T", ["A", "B"], 0, 204),
            ("T", ["A", "B"], 2**64 - 1, 204),
        ],
    )
    def test_create_validation_codes(self, api, title, options, duration, code):
        resp = ballots.create_ballot(ALICE, title, "", options, duration)
        assert not resp.ok
        assert resp.error.code == code

    def test_vote_flow(self, api):
        registry.register_voter(ALICE)
        ballots.create_ballot(BOB, "Poll", "", ["Yes", "No"], 10)

        assert votes.cast_vote(ALICE, 1, 0).value == "Vote cast successfully"
        assert votes.change_vote(ALICE, 1, 1).value == "Vote changed successfully"
        assert votes.change_vote(ALICE, 1, 1).error.name == "same-option"
        assert votes.get_vote_count(1, 1) == 1
        assert votes.has_voter_voted(1, ALICE)

        choice = votes.get_voter_choice(1, ALICE)
        assert choice.option_index == 1
        assert choice.voter == ALICE
        assert votes.get_voter_choice(1, BOB) is None

    def test_admin_views(self, api):
        assert registry.get_contract_admin() == ADMIN
        assert registry.is_admin(ADMIN)
        assert registry.update_admin(ALICE, BOB).error.code == 102
        assert registry.update_admin(ADMIN, ALICE).value == "Admin updated successfully"
        assert registry.get_contract_admin() == ALICE

    def test_voter_views(self, api, clock):
        clock.set(7)
        registry.register_voter(ALICE)
        info = registry.get_voter_info(ALICE)
        assert info.registered
        assert info.registration_seq == 7
        assert registry.get_voter_registration_seq(ALICE) == 7
        assert registry.get_voter_info(BOB) is None
        assert registry.unregister_voter(ADMIN, ALICE).value == "Voter unregistered successfully"
        assert not registry.is_voter_registered(ALICE)


class TestBallotViews:
    def test_info_and_results(self, api, clock):
        ballots.create_ballot(ALICE, "Poll", "desc", ["Yes", "No"], 10)
        info = ballots.get_ballot_info(1)
        assert info.creator == ALICE
        assert info.options == ["Yes", "No"]
        assert ballots.get_ballot_options(1) == ["Yes", "No"]
        assert ballots.is_ballot_active(1)

        clock.set(12)
        results = ballots.get_ballot_results(1)
        assert results.ok
        assert results.value.status == "ended"
        assert ballots.get_ballot_status(1) == "ended"

    def test_missing_ballot(self, api):
        assert ballots.get_ballot_info(999) is None
        assert ballots.get_ballot_status(999) == "not-found"
        assert ballots.get_ballot_results(999).error.code == 101
        assert ballots.deactivate_ballot(ADMIN, 999).error.code == 101

    def test_option_result(self, api):
        ballots.create_ballot(ALICE, "Poll", "", ["Yes", "No"], 10)
        resp = ballots.get_option_result(1, 0)
        assert resp.value.option == "Yes"
        assert resp.value.count == 0
        assert ballots.get_option_result(1, 5).error.code == 106

    def test_deactivate(self, api):
        ballots.create_ballot(ALICE, "Poll", "", ["Yes", "No"], 10)
        assert ballots.deactivate_ballot(BOB, 1).error.code == 102
        assert ballots.deactivate_ballot(ALICE, 1).value == "Ballot deactivated successfully"
        assert ballots.get_ballot_status(1) == "deactivated"


class TestBoundary:
    def test_eleven_options_rejected_before_ledger(self, api):
        options = [f"Option {i}" for i in range(11)]
        with pytest.raises(SchemaError):
            ballots.create_ballot(ALICE, "Too many", "", options, 100)
        assert ballots.get_next_ballot_id() == 1

    def test_oversized_text_rejected(self, api):
        with pytest.raises(SchemaError):
            ballots.create_ballot(ALICE, "T" * 101, "", ["A", "B"], 100)
        with pytest.raises(SchemaError):
            ballots.create_ballot(ALICE, "T", "d" * 501, ["A", "B"], 100)
        with pytest.raises(SchemaError):
            ballots.create_ballot(ALICE, "T", "", ["A" * 51, "B"], 100)

    def test_request_schema_limits(self):
        CreateBallotRequest(title="T", options=[str(i) for i in range(10)], duration=1)
        with pytest.raises(SchemaError):
            CreateBallotRequest(title="T", options=[str(i) for i in range(11)], duration=1)
        with pytest.raises(SchemaError):
            CreateBallotRequest(title="T", options=["A", "B"], duration=-1)

    def test_empty_caller_rejected(self, api):
        with pytest.raises(ValidationError):
            registry.register_voter("")
        with pytest.raises(ValidationError):
            registry.unregister_voter(ADMIN, "")

    def test_negative_ids_rejected(self, api):
        with pytest.raises(ValidationError):
            votes.cast_vote(ALICE, -1, 0)
        with pytest.raises(ValidationError):
            votes.get_vote_count(1, -1)
        with pytest.raises(ValidationError):
            ballots.get_ballot_info(-5)
