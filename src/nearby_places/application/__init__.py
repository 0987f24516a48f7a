"""Application layer - use cases and state."""
