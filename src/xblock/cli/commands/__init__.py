"""Top-level xblock commands (auto-discovered)."""
