"""
FastAPI application exposing the CNPJ core.

Endpoints:
- validation of one or many CNPJs (never fails, answers a boolean)
- check-digit computation (422 with an error code when the base is rejected)
- a registration check that uses the pydantic validation rule
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import config_from_env
from ..core import calculate_check_digits, is_valid, remove_mask
from ..engine.batch import validate_many
from ..errors import CNPJError
from ..rules import cnpj_rule

logger = logging.getLogger(__name__)

# Global configuration
cnpjalfa_config = config_from_env()
RegisteredCnpj = Annotated[str, cnpj_rule(cnpjalfa_config.rule.message, normalize=True)]

# Pydantic models for API requests/responses
class ValidateRequest(BaseModel):
    cnpj: str

class ValidateResponse(BaseModel):
    cnpj: str
    normalized: str
    valid: bool

class BatchValidateRequest(BaseModel):
    cnpjs: List[str] = Field(default_factory=list)

class BatchValidateResponse(BaseModel):
    total: int
    invalid: int
    results: List[ValidateResponse]

class CheckDigitsRequest(BaseModel):
    base: str

class CheckDigitsResponse(BaseModel):
    base: str
    check_digits: str
    cnpj: str

class RegistrationRequest(BaseModel):
    """Example form using the CNPJ validation rule."""
    cnpj: RegisteredCnpj
    company_name: Optional[str] = None

class RegistrationResponse(BaseModel):
    cnpj: str
    company_name: Optional[str] = None
    accepted: bool = True

# FastAPI app configuration
app = FastAPI(
    title="cnpjalfa API",
    description="Alphanumeric CNPJ validation and check digits",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

@app.exception_handler(CNPJError)
async def cnpj_error_handler(request: Request, exc: CNPJError):
    """Turn computation-path errors into 422 responses carrying the error code."""
    logger.info("Rejected CNPJ on %s: %s (%s)", request.url.path, exc, exc.code)
    return JSONResponse(
        status_code=422,
        content={"detail": {"code": exc.code, "message": str(exc)}},
    )

@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "cnpjalfa API - alphanumeric CNPJ validation",
        "version": __version__,
        "docs": "/docs"
    }

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "cnpjalfa-api"}

@app.post("/validate", response_model=ValidateResponse)
async def validate(request: ValidateRequest):
    return ValidateResponse(
        cnpj=request.cnpj,
        normalized=remove_mask(request.cnpj),
        valid=is_valid(request.cnpj),
    )

@app.post("/validate/batch", response_model=BatchValidateResponse)
async def validate_batch(request: BatchValidateRequest):
    """Validate many CNPJs; one invalid entry never fails the request."""
    result = validate_many(request.cnpjs)
    return BatchValidateResponse(
        total=result.total,
        invalid=result.failures,
        results=[
            ValidateResponse(cnpj=item.raw, normalized=item.normalized, valid=item.valid)
            for item in result.items
        ],
    )

@app.post("/check-digits", response_model=CheckDigitsResponse)
async def check_digits(request: CheckDigitsRequest):
    """
    Compute the check digits of a 12-character base.

    Rejected bases answer 422 with {"detail": {"code", "message"}}.
    """
    dv = calculate_check_digits(request.base)
    base = remove_mask(request.base)
    return CheckDigitsResponse(base=base, check_digits=dv, cnpj=base + dv)

@app.post("/registrations/check", response_model=RegistrationResponse)
async def check_registration(request: RegistrationRequest):
    """Invalid CNPJs never reach here: the validation rule answers 422 first."""
    return RegistrationResponse(cnpj=request.cnpj, company_name=request.company_name)
