"""Per-user and per-server settings commands."""
