"""Core types, configuration and shared utilities."""
