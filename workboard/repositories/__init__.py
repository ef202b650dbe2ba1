"""
Persistence adapters.

Services depend on the RecordStore protocol rather than touching the JSON
files, so a transactional backend can replace the flat files later.
"""

from workboard.repositories.base import RecordStore
from workboard.repositories.json_storage import JsonRecordStore

__all__ = ["RecordStore", "JsonRecordStore"]
