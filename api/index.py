"""
FastAPI wrapper for Branding Token Check - Serverless Function.

This module exposes the branding token checks as a REST API.
"""

from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from branding_token_check import __version__
from branding_token_check.config import DEFAULT_TOKEN_COMPARISON_SENSITIVITY, TokenCheckConfig
from branding_token_check.models import LocResource
from branding_token_check.token_checker import BrandingTokenChecker

app = FastAPI(
    title="Branding Token Check API",
    description="Detects corrupted, misspelled, added and removed (!Token) branding tokens in translations",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CheckRequest(BaseModel):
    """Request model for a single source/target pair."""
    source: str = Field("", description="Source string")
    target: str = Field("", description="Translated string")
    sensitivity: float = Field(
        DEFAULT_TOKEN_COMPARISON_SENSITIVITY,
        description="Fraction of a token name's length allowed as edits for misspelling detection",
    )


class IssueModel(BaseModel):
    """A single branding token issue."""
    kind: str
    message: str
    token_name: str
    candidates: list[str] = Field(default_factory=list)
    position: Optional[int] = None


class CheckResponse(BaseModel):
    """Response model for a single source/target pair."""
    source_tokens: list[str]
    target_tokens: list[str]
    misspellings: dict[str, list[str]]
    issues: list[IssueModel]


class ResourceInput(BaseModel):
    """One localized resource in a batch request."""
    resource_id: str
    source: str = ""
    target: str = ""
    language: Optional[str] = None


class BatchCheckRequest(BaseModel):
    """Request model for checking many resources."""
    resources: list[ResourceInput] = Field(default_factory=list)
    sensitivity: float = DEFAULT_TOKEN_COMPARISON_SENSITIVITY
    report_removed_tokens: bool = True
    exempt_languages: list[str] = Field(
        default_factory=list,
        description="Languages for which missing tokens are not reported",
    )


class ResourceResult(BaseModel):
    """Per-resource result in a batch response."""
    resource_id: str
    language: Optional[str] = None
    messages: list[str]
    issues: list[IssueModel]


class BatchCheckResponse(BaseModel):
    """Response model for a batch check."""
    total: int
    failed: int
    results: list[ResourceResult]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/check", response_model=CheckResponse)
async def check_pair(request: CheckRequest):
    """Check branding tokens in one source/target pair."""
    try:
        checker = BrandingTokenChecker(sensitivity=request.sensitivity)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = checker.report_problems(request.source, request.target)

    return CheckResponse(
        source_tokens=sorted(result.source_tokens),
        target_tokens=sorted(result.target_tokens),
        misspellings={name: list(words) for name, words in result.misspellings.items()},
        issues=[IssueModel(**issue.to_dict()) for issue in result.issues],
    )


@app.post("/api/check/batch", response_model=BatchCheckResponse)
async def check_batch(request: BatchCheckRequest):
    """Check branding tokens in a list of resources."""
    try:
        config = TokenCheckConfig(
            token_comparison_sensitivity=request.sensitivity,
            report_removed_tokens=request.report_removed_tokens,
            removed_check_exempt_languages=set(request.exempt_languages),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        checker = BrandingTokenChecker.from_config(config)
        results = checker.check_resources(
            (LocResource(**item.model_dump()) for item in request.resources),
            config,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Branding token check failed: {str(e)}")

    return BatchCheckResponse(
        total=len(results),
        failed=sum(1 for r in results if r.has_issues),
        results=[
            ResourceResult(
                resource_id=r.resource.resource_id,
                language=r.resource.language,
                messages=r.messages,
                issues=[IssueModel(**issue.to_dict()) for issue in r.result.issues],
            )
            for r in results
        ],
    )
