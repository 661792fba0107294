"""Notus smart wallet backend: signed webhook receiver and resilient API client."""

__version__ = "0.1.0"
