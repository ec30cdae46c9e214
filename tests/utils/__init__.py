"""Test utilities package."""

from tests.utils.cleanup import truncate_content_tables

__all__ = ["truncate_content_tables"]
