# posture_scanner/errors.py


class ScanError(Exception):
    """Caller-facing failure of a scan request."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUrl(ScanError):
    """The input could not be normalized into a scannable target."""
