"""Severity model, message resolution, rendering and console sinks."""
