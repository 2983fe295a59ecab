from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Preview(BaseModel):
    """First rows of the loaded file, for the preview table."""
    columns: List[str]
    rows: List[Dict[str, Any]]


class LoadResponse(BaseModel):
    rows: int = Field(..., description="Records kept after dropping rows without Survived")
    preview: Preview
    missing_chart: Dict[str, Any]
    survival_charts: Dict[str, Dict[str, Any]]


class FactorScore(BaseModel):
    feature: str
    spread: float = Field(..., ge=0, le=100, description="Max minus min group survival %")


class AnalyzeResponse(BaseModel):
    top: Optional[str] = None
    ranking: List[FactorScore]
    message: str


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int = 0
