"""Ledger call interface - thin views over the container's ledger."""
