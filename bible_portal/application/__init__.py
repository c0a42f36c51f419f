"""Application layer: service orchestration between API and boundaries."""
