"""Custom exception classes for the file responder."""


class FiledException(Exception):
    """
    Base exception class for all responder errors.
    """
    pass


class MalformedRangeError(FiledException, ValueError):
    """
    Raised when a Range header does not match ``bytes=<start>-<end>``.
    """

    def __init__(self, header: str):
        super().__init__(f"Bad Range header: {header}")
        self.header = header


class NoRangeHeaderError(FiledException, ValueError):
    """
    Raised when range resolution is requested for a request without a Range header.
    """

    def __init__(self):
        super().__init__("No Range header")
