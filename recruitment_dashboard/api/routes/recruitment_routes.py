"""
Recruitment Routes

GET  /recruitment           - List applications (search, filter, sort, paginate)
POST /recruitment           - Submit an application
GET  /recruitment/analytics - Dashboard summary and trends
GET  /recruitment/options   - Years, branches and sort fields for the filters

Handlers are plain `def` so FastAPI runs the blocking pymongo calls in its
threadpool.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse

from recruitment_dashboard.core import errors
from recruitment_dashboard.services.recruitment_store import RecruitmentStore, get_recruitment_store
from recruitment_dashboard.services.recruitment_service import RecruitmentService
from recruitment_dashboard.services.analytics_service import AnalyticsService
from recruitment_dashboard.schemas.schemas import (
    Branch, SortField, SortOrder, YearOfStudy,
    RecruitmentQuery, RecruitmentListResponse, RecruitmentCreateResponse,
    AnalyticsResponse, FilterOptionsResponse, ErrorResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recruitment", tags=["Recruitment"])

FAILURE_RESPONSES = {500: {"model": ErrorResponse}}


def get_recruitment_service(store: RecruitmentStore = Depends(get_recruitment_store)) -> RecruitmentService:
    return RecruitmentService(store)


def get_analytics_service(store: RecruitmentStore = Depends(get_recruitment_store)) -> AnalyticsService:
    return AnalyticsService(store)


def _failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "error": message})


@router.get("", response_model=RecruitmentListResponse, responses=FAILURE_RESPONSES)
def list_applications(
    page: int = Query(1, description="1-indexed page number"),
    limit: Optional[int] = Query(None, description="Page size (defaults to the configured page size)"),
    search: str = Query("", description="Matches name, email, college ID or WhatsApp number"),
    year: Optional[str] = Query(None, description="Exact year of study"),
    branch: Optional[str] = Query(None, description="Exact branch"),
    sort_by: str = Query(SortField.created_at.value, alias="sortBy"),
    sort_order: str = Query(SortOrder.desc.value, alias="sortOrder"),
    service: RecruitmentService = Depends(get_recruitment_service)
):
    """
    List applications with search, filters, sorting and pagination.

    Total and page count are computed over the filter, independent of paging.
    """
    query = RecruitmentQuery(
        search=search, year=year or None, branch=branch or None,
        sort_by=sort_by, sort_order=sort_order, page=page, limit=limit
    )
    try:
        result = service.list_applications(query)
    except errors.StoreError:
        logger.exception("Error fetching recruitment data")
        return _failure("Failed to fetch recruitment data")

    return RecruitmentListResponse(data=result["data"], pagination=result["pagination"])


@router.post(
    "", response_model=RecruitmentCreateResponse, status_code=201,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, **FAILURE_RESPONSES}
)
def create_application(
    payload: Any = Body(..., description="Application record without timestamps or id"),
    service: RecruitmentService = Depends(get_recruitment_service)
):
    """
    Submit an application.

    422 on field / college ID format errors, 409 when email, WhatsApp number
    or college ID is already registered.
    """
    try:
        record = service.create_application(payload)
    except errors.StoreError:
        logger.exception("Error creating recruitment entry")
        return _failure("Failed to create recruitment entry")

    return RecruitmentCreateResponse(data=record)


@router.get("/analytics", response_model=AnalyticsResponse, responses=FAILURE_RESPONSES)
def get_analytics(service: AnalyticsService = Depends(get_analytics_service)):
    """Counts by year / branch / day, recent applications and trends."""
    try:
        summary = service.get_summary()
    except errors.AggregationError:
        return _failure("Failed to fetch analytics data")

    return AnalyticsResponse(data=summary)


@router.get("/options", response_model=FilterOptionsResponse)
async def filter_options():
    """Allowed values for the year / branch filters and the sort selector."""
    return FilterOptionsResponse(
        years=[y.value for y in YearOfStudy],
        branches=[b.value for b in Branch],
        sort_fields=[s.value for s in SortField]
    )
