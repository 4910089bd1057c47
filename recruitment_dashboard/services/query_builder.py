"""
Query Builder - turns a RecruitmentQuery into a MongoDB filter/sort/page plan.

Pure functions only, so filter construction is testable without a database.

Rules:
- search   -> case-insensitive substring over name, email, college_id,
              whatsapp_number (OR'ed); matched literally
- year     -> exact match on year_of_study
- branch   -> exact match on branch
- sort     -> one field, default createdAt descending
- paging   -> page < 1 becomes 1, limit <= 0 becomes the default,
              limit above max_page_size is capped
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from recruitment_dashboard.core.config import get_settings
from recruitment_dashboard.schemas.schemas import RecruitmentQuery, SortField, SortOrder

SEARCH_FIELDS = ("name", "email", "college_id", "whatsapp_number")
SORT_FIELDS = {field.value for field in SortField}
# skip is sent to MongoDB as a BSON int64
MAX_SKIP = 2 ** 63 - 1


@dataclass(frozen=True)
class QueryPlan:
    filter: Dict[str, Any]
    sort: List[Tuple[str, int]]
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


def build_filter(query: RecruitmentQuery) -> Dict[str, Any]:
    """Build the MongoDB filter document from the optional parameters."""
    conditions: Dict[str, Any] = {}

    search = (query.search or "").strip()
    if search:
        pattern = re.escape(search)
        conditions["$or"] = [
            {field: {"$regex": pattern, "$options": "i"}} for field in SEARCH_FIELDS
        ]

    if query.year:
        conditions["year_of_study"] = query.year

    if query.branch:
        conditions["branch"] = query.branch

    return conditions


def build_sort(query: RecruitmentQuery) -> List[Tuple[str, int]]:
    field = query.sort_by if query.sort_by in SORT_FIELDS else SortField.created_at.value
    order = (query.sort_order or "").lower()
    direction = 1 if order == SortOrder.asc.value else -1
    return [(field, direction)]


def clamp_pagination(page: int, limit: int) -> Tuple[int, int]:
    settings = get_settings()
    if page is None or page < 1:
        page = 1
    if limit is None or limit <= 0:
        limit = settings.default_page_size
    limit = min(limit, settings.max_page_size)
    # Past the last representable offset every page is empty anyway
    page = min(page, MAX_SKIP // limit + 1)
    return page, limit


def build_query(query: RecruitmentQuery) -> QueryPlan:
    page, limit = clamp_pagination(query.page, query.limit)
    return QueryPlan(
        filter=build_filter(query),
        sort=build_sort(query),
        page=page,
        limit=limit,
    )


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
