"""Workboard: JSON-file backed admin API for job boards and articles."""
