"""Search data models"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .listing import Listing


class FilterCriterion(BaseModel):
    """A single (field, operator, value) filter as sent by the client.

    Field and operator are validated by the predicate compiler, not here,
    so that callers get the catalog's typed filter errors.
    """
    field: str
    operator: str
    value: str


class SearchRequest(BaseModel):
    """Search request body"""
    filters: List[FilterCriterion] = []
    page: int = 1
    page_size: int = Field(10, alias="pageSize")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    class Config:
        populate_by_name = True


class PaginatedListingsResponse(BaseModel):
    """One page of ranked listings"""
    items: List[Listing]
    total_items: int
    page: int
    page_size: int


class SearchResponse(PaginatedListingsResponse):
    """One page of filtered, ranked listings"""
    applied_filters: List[FilterCriterion] = []
