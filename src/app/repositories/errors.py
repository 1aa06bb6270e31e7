class DuplicateEntryError(Exception):
    """Raised by a repository when an insert violates a uniqueness constraint"""


class StoreError(Exception):
    """Raised by a repository when the underlying store fails a write"""
