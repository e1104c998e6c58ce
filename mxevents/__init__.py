"""Serializable types for Matrix presence, receipt and push rules events, room media metadata and custom events."""

__version__ = "0.1.0"