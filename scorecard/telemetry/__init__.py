"""Telemetry hooks."""
