# posture_scanner/router.py
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .errors import ScanError
from .models import ErrorResponse, ScanRequest, ScanResult
from .scan_core import available_scans, scan_async

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])

UNEXPECTED_ERROR = "Unexpected error while scanning."


@router.post(
    "",
    response_model=ScanResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def run_scan(request: ScanRequest):
    try:
        return await scan_async(request.url)
    except ScanError as e:
        return JSONResponse(status_code=400, content={"message": e.message})
    except Exception:
        logger.exception("Scan of %r failed", request.url)
        return JSONResponse(status_code=500, content={"message": UNEXPECTED_ERROR})


@router.get("/available")
async def list_available_scans():
    return {"available": available_scans()}
