"""Ledger call interface."""
