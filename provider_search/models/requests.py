"""
Request models for the provider search API
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, Dict, Any


class SearchFilters(BaseModel):
    """Structured filters; every field is optional and unset fields apply no constraint"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    use_case: Optional[str] = Field(default=None, alias="useCase")
    business_function: Optional[str] = Field(default=None, alias="businessFunction")
    industry: Optional[str] = None
    region: Optional[str] = None
    country: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1, description="Maximum number of results")

    @field_validator("use_case", "business_function", "industry", "region", "country")
    @classmethod
    def blank_to_none(cls, value: Optional[str]) -> Optional[str]:
        # "" and whitespace mean "no filter", matching an unselected dropdown
        if value is None:
            return None
        value = value.strip()
        return value or None

    @property
    def has_taxonomy_filter(self) -> bool:
        """True if any of the narrow taxonomy dimensions is constrained"""
        return bool(self.use_case or self.business_function or self.industry)

    def effective_limit(self, default: int, cap: int) -> int:
        """Requested limit (or default), clamped to the system cap"""
        requested = self.limit if self.limit is not None else default
        return min(requested, cap)

    def echo(self, limit: int) -> Dict[str, Any]:
        """Applied filters in the wire (camelCase) shape"""
        applied = self.model_dump(by_alias=True, exclude_none=True, exclude={"limit"})
        applied["limit"] = limit
        return applied


class SearchRequest(BaseModel):
    """Request model for search endpoint"""

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "query": "voice AI for real estate",
                "filters": {
                    "useCase": None,
                    "industry": "Real Estate",
                    "region": "North America",
                    "limit": 100
                }
            }
        },
    )

    query: Optional[str] = Field(default="", description="Free-text intent; blank means filter-only browsing")
    filters: SearchFilters = Field(default_factory=SearchFilters, description="Optional structured filters")

    @field_validator("filters", mode="before")
    @classmethod
    def null_filters(cls, value: Any) -> Any:
        return {} if value is None else value
