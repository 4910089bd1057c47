"""
Recruitment Service - listing and submission of applications.

list_applications: RecruitmentQuery -> page of records + pagination block
create_application: raw JSON body -> validated, stored record
"""

import logging
from typing import Any, Dict

from recruitment_dashboard.services.query_builder import build_query, total_pages
from recruitment_dashboard.services.recruitment_store import RecruitmentStore
from recruitment_dashboard.services.validation import validate_application
from recruitment_dashboard.schemas.schemas import RecruitmentQuery

logger = logging.getLogger(__name__)


class RecruitmentService:

    def __init__(self, store: RecruitmentStore):
        self.store = store

    def list_applications(self, query: RecruitmentQuery) -> Dict[str, Any]:
        """
        Fetch one page of applications.

        Returns:
            {"data": [...], "pagination": {"page", "limit", "total", "pages"}}
        """
        plan = build_query(query)

        # Total is counted over the filter alone, before paging
        total = self.store.count(plan.filter)
        data = self.store.find(
            plan.filter,
            sort=plan.sort,
            skip=plan.skip,
            limit=plan.limit
        )

        return {
            "data": data,
            "pagination": {
                "page": plan.page,
                "limit": plan.limit,
                "total": total,
                "pages": total_pages(total, plan.limit),
            },
        }

    def create_application(self, payload: dict) -> dict:
        """Validate then insert. Raises ValidationError / DuplicateKeyError / StoreError."""
        application = validate_application(payload)
        record = self.store.insert(application.model_dump(mode="json"))
        logger.info(
            "Application created: id=%s year=%s branch=%s",
            record["_id"], record["year_of_study"], record["branch"]
        )
        return record
