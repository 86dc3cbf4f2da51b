from __future__ import annotations

from pydantic import BaseModel

from .analysis import AnalysisReport


class RoleSummary(BaseModel):
    id: str
    title: str


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str


class AnalyzeResponse(BaseModel):
    success: bool = True
    analysis: AnalysisReport


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
