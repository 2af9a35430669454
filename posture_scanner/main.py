# posture_scanner/main.py
import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .router import router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Secure Posture Scanner",
    description="Checks HTTPS availability, HTTP to HTTPS redirection and security response headers of a host.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def invalid_request_body(request: Request, exc: RequestValidationError):
    logger.debug("Rejected request body: %s", exc.errors())
    return JSONResponse(status_code=400, content={"message": "Missing 'url' in request body."})


@app.get("/healthz")
def healthz():
    return {"ok": True}


app.include_router(router)

if __name__ == "__main__":
    uvicorn.run("posture_scanner.main:app", host=settings.host, port=settings.port, reload=True)
