"""HTTP adapter for the manager statistics API."""
