"""HTTP API for the order-taking service."""
