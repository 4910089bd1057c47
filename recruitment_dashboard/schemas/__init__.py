"""
Schemas module - Request/Response schemas for API endpoints.

- Request schemas (what the API accepts): RecruitmentCreate, RecruitmentQuery
- Response schemas (what the API returns): list / create / analytics envelopes
"""

from recruitment_dashboard.schemas.schemas import (
    YearOfStudy,
    Branch,
    SortField,
    SortOrder,
    RecruitmentCreate,
    RecruitmentRecord,
    RecruitmentQuery,
    AnalyticsSummary,
)

__all__ = [
    "YearOfStudy",
    "Branch",
    "SortField",
    "SortOrder",
    "RecruitmentCreate",
    "RecruitmentRecord",
    "RecruitmentQuery",
    "AnalyticsSummary",
]
