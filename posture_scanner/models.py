# posture_scanner/models.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    # snake_case in Python, camelCase on the wire
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScanRequest(BaseModel):
    url: str


class ScanTarget(WireModel):
    model_config = ConfigDict(frozen=True)

    host: str
    https_url: str
    http_url: str


class SecurityHeaders(WireModel):
    model_config = ConfigDict(frozen=True)

    hsts: Optional[str] = None
    csp: Optional[str] = None
    x_frame_options: Optional[str] = None
    x_content_type_options: Optional[str] = None
    referrer_policy: Optional[str] = None
    permissions_policy: Optional[str] = None


class ProbeSignals(WireModel):
    model_config = ConfigDict(frozen=True)

    https_enabled: bool
    http_redirects_to_https: bool
    headers: SecurityHeaders = Field(default_factory=SecurityHeaders)


class Finding(WireModel):
    key: str
    ok: bool
    message: str
    advice: Optional[str] = None


class Priority(WireModel):
    key: str
    advice: str


class ScanResult(WireModel):
    host: str
    https_enabled: bool
    http_redirects_to_https: bool
    headers: SecurityHeaders
    score: int = Field(ge=0, le=100)
    findings: List[Finding]
    priorities: List[Priority]


class ErrorResponse(BaseModel):
    message: str
