"""Core merge engine, configuration and shared utilities."""
