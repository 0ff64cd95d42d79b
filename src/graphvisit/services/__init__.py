"""Service layer: engine calls wrapped in ServiceResult for the CLI."""
