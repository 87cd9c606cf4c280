"""Application layer - use cases, ports, read models."""
