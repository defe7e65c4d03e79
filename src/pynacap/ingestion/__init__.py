"""Ingestion layer.

Helpers that turn raw Netatmo JSON (API responses, webhook pushes) into
typed objects ready to be dispatched to capabilities.
"""

__all__: list[str] = []
