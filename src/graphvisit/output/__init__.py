"""Output formatting for ServiceResult (Rich, quiet, JSON)."""
