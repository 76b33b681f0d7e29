"""Ballot ledger application - models, repositories and services."""
