"""Utility modules: configuration, logging and timing."""
