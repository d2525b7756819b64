"""
Response models for the provider search API
"""
from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator
from typing import Optional, Dict, Any, List
from enum import Enum


class SearchMode(str, Enum):
    """Retrieval mode chosen per request"""
    SEMANTIC = "semantic"
    STRUCTURED = "structured"


class ProviderRecord(BaseModel):
    """A provider directory entry as returned by the corpus"""

    # Columns the canonical schema does not name are passed through untouched
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    name: Optional[str] = None

    # Location
    city: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None

    # Contact channels
    website: Optional[str] = None
    linkedin: Optional[str] = None
    skool: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    # Descriptive text
    services: Optional[str] = None
    industries: Optional[str] = None
    pricing: Optional[str] = None
    data_quality: Optional[str] = None
    semantic_summary: Optional[str] = None

    # Classification tags
    use_cases: List[str] = Field(default_factory=list)
    business_functions: List[str] = Field(default_factory=list)
    industries_served: List[str] = Field(default_factory=list)

    # Semantic mode only
    similarity: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @model_validator(mode="before")
    @classmethod
    def normalize_row(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        row = dict(data)
        if row.get("id") is not None:
            row["id"] = str(row["id"])
        # Postgres returns NULL for untagged array columns
        for tag_field in ("use_cases", "business_functions", "industries_served"):
            if row.get(tag_field) is None:
                row[tag_field] = []
        region = row.get("region")
        if not isinstance(region, str) or not region.strip():
            from provider_search.utils.region_classifier import infer_region

            row["region"] = infer_region(row.get("country"))
        return row

    @model_serializer(mode="wrap")
    def drop_absent_similarity(self, handler):
        # Structured results are unranked; omit the key rather than send null
        data = handler(self)
        if data.get("similarity") is None:
            data.pop("similarity", None)
        return data


class SearchResponse(BaseModel):
    """Response from search endpoint"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "results": [],
                "count": 0,
                "query": "voice AI for real estate",
                "filters": {"industry": "Real Estate", "limit": 100},
                "mode": "semantic",
                "suggestRelaxFilters": True
            }
        },
    )

    results: List[ProviderRecord] = Field(default_factory=list, description="Ordered provider records")
    count: int = Field(..., ge=0, description="Number of results returned")
    query: str = Field(default="", description="Query text as received")
    filters: Dict[str, Any] = Field(default_factory=dict, description="Filters that were applied")
    mode: SearchMode = Field(..., description="Retrieval mode used")
    suggest_relax_filters: bool = Field(
        default=False,
        alias="suggestRelaxFilters",
        description="Advisory flag: too few results while taxonomy filters were active"
    )

    @model_validator(mode="after")
    def count_matches_results(self) -> "SearchResponse":
        if self.count != len(self.results):
            raise ValueError(f"count={self.count} does not match {len(self.results)} results")
        return self


class ErrorResponse(BaseModel):
    """Error payload; carries no results or count"""

    error: str = Field(..., description="Human-readable failure message")
    kind: str = Field(..., description="Error kind")
    details: Optional[Dict[str, Any]] = None
