"""Ballot results export."""

import duckdb
import polars as pl
from loguru import logger


def results_frame(conn: duckdb.DuckDBPyConnection) -> pl.DataFrame:
    """One row per (ballot, option) with its current count."""
    rows = conn.execute(
        """
        SELECT b.id, b.title, c.option_index, b.options, c.tally, b.total_votes, b.active, b.end_seq
        FROM ballot b
        JOIN vote_count c ON c.ballot_id = b.id
        ORDER BY b.id, c.option_index
        """
    ).fetchall()

    df = pl.DataFrame(
        [
            {
                "ballot_id": r[0],
                "title": r[1],
                "option_index": r[2],
                "option": r[3][r[2]] if r[2] < len(r[3]) else None,
                "count": r[4],
                "total_votes": r[5],
                "active": r[6],
                "end_seq": r[7],
            }
            for r in rows
        ],
        schema={
            "ballot_id": pl.UInt64,
            "title": pl.Utf8,
            "option_index": pl.UInt32,
            "option": pl.Utf8,
            "count": pl.UInt64,
            "total_votes": pl.UInt64,
            "active": pl.Boolean,
            "end_seq": pl.UInt64,
        },
    )
    logger.debug("Results frame: {} rows", df.height)
    return df


def share_frame(results: pl.DataFrame) -> pl.DataFrame:
    """Add each option's share of its ballot's votes, in percent."""
    return results.with_columns(
        pl.when(pl.col("total_votes") > 0)
        .then((pl.col("count") / pl.col("total_votes") * 100).round(1))
        .otherwise(0.0)
        .alias("share_pct")
    )


def write_results_csv(conn: duckdb.DuckDBPyConnection, path: str) -> int:
    """Write results with shares to CSV. Returns the row count."""
    df = share_frame(results_frame(conn))
    df.write_csv(path)
    logger.info("Exported {} result rows to {}", df.height, path)
    return df.height
