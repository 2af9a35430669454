# posture_scanner/__init__.py
from .errors import InvalidUrl, ScanError
from .scan_core import scan, scan_async

__all__ = ["scan", "scan_async", "ScanError", "InvalidUrl"]
