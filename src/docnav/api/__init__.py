"""HTTP API for navigation data."""
