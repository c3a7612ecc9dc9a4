"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class FetchFailed(ServiceError):
    """Any rejection of a search request: transport error, non-2xx or bad body."""


class UnknownTransition(ServiceError):
    pass


class TermStoreError(ServiceError):
    """Raised by key/value store backends when reading or writing fails."""
