"""HTTP API for StudentSearch."""
