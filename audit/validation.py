"""Ledger integrity checks."""

import duckdb


def validate_ledger(conn: duckdb.DuckDBPyConnection) -> dict:
    """Validate that stored tallies agree with the recorded votes."""
    issues = []
    stats = {}

    stats["voters"] = conn.execute("SELECT COUNT(*) FROM voter").fetchone()[0]
    stats["ballots"] = conn.execute("SELECT COUNT(*) FROM ballot").fetchone()[0]
    stats["votes"] = conn.execute("SELECT COUNT(*) FROM vote").fetchone()[0]

    next_id, max_id = conn.execute(
        "SELECT (SELECT next_ballot_id FROM ledger_state WHERE id = 1), (SELECT MAX(id) FROM ballot)"
    ).fetchone()
    if max_id is not None and next_id <= max_id:
        issues.append(f"next_ballot_id {next_id} is not above highest ballot id {max_id}")

    rows = conn.execute(
        """
        SELECT
            b.id,
            len(b.options) AS options,
            b.total_votes,
            (SELECT COUNT(*) FROM vote_count c WHERE c.ballot_id = b.id) AS count_rows,
            (SELECT COALESCE(SUM(c.tally), 0) FROM vote_count c WHERE c.ballot_id = b.id) AS counted,
            (SELECT COUNT(*) FROM vote v WHERE v.ballot_id = b.id) AS votes
        FROM ballot b
        ORDER BY b.id
        """
    ).fetchall()

    for ballot_id, options, total_votes, count_rows, counted, votes in rows:
        if count_rows != options:
            issues.append(f"Ballot {ballot_id}: {count_rows} count rows for {options} options")
        if not counted == votes == total_votes:
            issues.append(
                f"Ballot {ballot_id}: counts sum to {counted}, {votes} votes recorded, total_votes is {total_votes}"
            )

    out_of_range = conn.execute(
        """
        SELECT COUNT(*) FROM vote v
        JOIN ballot b ON v.ballot_id = b.id
        WHERE v.option_index >= len(b.options)
        """
    ).fetchone()[0]
    if out_of_range > 0:
        issues.append(f"{out_of_range} votes reference a missing option")

    orphaned = conn.execute(
        """
        SELECT COUNT(*) FROM vote v
        LEFT JOIN ballot b ON v.ballot_id = b.id
        WHERE b.id IS NULL
        """
    ).fetchone()[0]
    if orphaned > 0:
        issues.append(f"{orphaned} votes reference a missing ballot")

    # Unregistered voters keep their votes; reported, not an issue
    stats["votes_by_unregistered"] = conn.execute(
        """
        SELECT COUNT(*) FROM vote v
        LEFT JOIN voter r ON v.voter = r.identity
        WHERE r.identity IS NULL
        """
    ).fetchone()[0]

    return {
        "valid": len(issues) == 0,
        "stats": stats,
        "issues": issues,
    }
