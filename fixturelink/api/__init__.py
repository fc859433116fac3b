"""HTTP API for fixture reconciliation."""
