"""HTTP API for the travel booking calculator."""
