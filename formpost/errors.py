class FormpostError(Exception):
    """Base error for formpost."""


class FileReadError(FormpostError):
    """Raised when an attachment file cannot be read."""
