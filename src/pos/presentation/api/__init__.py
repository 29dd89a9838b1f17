"""HTTP API for the POS back office."""
