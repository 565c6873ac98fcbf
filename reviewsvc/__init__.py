"""Snowflake IDs, review records, errors and validated messages for a review service."""

__version__ = "0.1.0"