"""Adapters - I/O implementations of ports."""

from .json_store import JsonRecordStore

__all__ = [
    "JsonRecordStore",
]
