"""Exceptions for document store adapters."""


class StoreError(Exception):
    """Base exception for all document store errors."""


class StoreUnavailableError(StoreError):
    """The store could not be reached or the operation failed in transit."""


class StoreQueryError(StoreError):
    """The store rejected the operation (bad filter, pipeline or name)."""
