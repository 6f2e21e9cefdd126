"""Ingestion layer.

This package contains adapters that turn raw collaborator payloads
(telemetry sightings) into validated domain objects for the state layer.
"""

__all__: list[str] = []
