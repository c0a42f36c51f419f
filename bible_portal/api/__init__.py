"""HTTP API layer: routers and dependency injection."""
