class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class PersistenceError(ProcessorError):
    """Raised when the processed receipt cannot be saved.

    This is the only failure that reaches the caller once processing started.
    """
