"""Shared infrastructure: logging, YAML configuration and unit helpers."""
