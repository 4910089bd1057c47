"""
Analytics Service - dashboard summary over ALL application records.

Builds, in order:
1. total applications
2. counts by year of study (ascending label)
3. counts by branch (descending count, top N)
4. counts by day for the last 30 days (ascending date)
5. the most recent applications
6. trends: week-over-week, month-over-month, top branch week-over-week

Every call recomputes from MongoDB; nothing is cached. If any query fails
the whole summary fails with AggregationError.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from recruitment_dashboard.core import errors
from recruitment_dashboard.core.config import get_settings
from recruitment_dashboard.services.recruitment_store import RecruitmentStore, utcnow

logger = logging.getLogger(__name__)

WEEK = timedelta(days=7)
MONTH = timedelta(days=30)
NO_BRANCH = "N/A"

RECENT_FIELDS = ["name", "email", "year_of_study", "branch", "createdAt"]


def percent_change(current: int, previous: int) -> float:
    """
    Period-over-period change in percent, one decimal.

    With no previous activity the change is 100 if anything happened now,
    otherwise 0.
    """
    if previous > 0:
        return round((current - previous) / previous * 100, 1)
    return 100.0 if current > 0 else 0.0


def _window(start: datetime, end: datetime, include_end: bool) -> Dict[str, Any]:
    return {"$gte": start, "$lte" if include_end else "$lt": end}


def _group_counts(rows: List[dict]) -> List[dict]:
    return [{"_id": str(row["_id"]), "count": int(row["count"])} for row in rows]


class AnalyticsService:

    def __init__(self, store: RecruitmentStore):
        self.store = store
        self.settings = get_settings()

    # --- grouped counts ---------------------------------------------

    def applications_by_year(self) -> List[dict]:
        return _group_counts(self.store.aggregate([
            {"$group": {"_id": "$year_of_study", "count": {"$sum": 1}}},
            {"$sort": {"_id": 1}},
        ]))

    def applications_by_branch(self) -> List[dict]:
        return _group_counts(self.store.aggregate([
            {"$group": {"_id": "$branch", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
            {"$limit": self.settings.top_branches_limit},
        ]))

    def applications_by_day(self, now: datetime) -> List[dict]:
        since = now - timedelta(days=self.settings.daily_window_days)
        return _group_counts(self.store.aggregate([
            {"$match": {"createdAt": {"$gte": since}}},
            {"$group": {
                "_id": {"$dateToString": {"format": "%Y-%m-%d", "date": "$createdAt"}},
                "count": {"$sum": 1},
            }},
            {"$sort": {"_id": 1}},
        ]))

    def recent_applications(self) -> List[dict]:
        return self.store.find(
            sort=[("createdAt", -1)],
            limit=self.settings.recent_applications_limit,
            projection=RECENT_FIELDS
        )

    # --- trends -----------------------------------------------------

    def _count_window(self, start: datetime, end: datetime, include_end: bool,
                      branch: Optional[str] = None) -> int:
        conditions = {"createdAt": _window(start, end, include_end)}
        if branch is not None:
            conditions["branch"] = branch
        return self.store.count(conditions)

    def trends(self, now: datetime, by_branch: List[dict]) -> Dict[str, Any]:
        last_week = now - WEEK
        last_month = now - MONTH

        this_week_count = self._count_window(last_week, now, include_end=True)
        last_week_count = self._count_window(last_week - WEEK, last_week, include_end=False)

        this_month_count = self._count_window(last_month, now, include_end=True)
        last_month_count = self._count_window(last_month - MONTH, last_month, include_end=False)

        # Top branch is the all-time leader, compared week over week
        top_branch = by_branch[0]["_id"] if by_branch else None
        top_branch_change = 0.0
        if top_branch is not None:
            top_this_week = self._count_window(last_week, now, True, branch=top_branch)
            top_last_week = self._count_window(last_week - WEEK, last_week, False, branch=top_branch)
            top_branch_change = percent_change(top_this_week, top_last_week)

        return {
            "weeklyChange": percent_change(this_week_count, last_week_count),
            "monthlyChange": percent_change(this_month_count, last_month_count),
            "topBranchChange": top_branch_change,
            "thisWeekCount": this_week_count,
            "thisMonthCount": this_month_count,
            "topBranchName": top_branch if top_branch is not None else NO_BRANCH,
        }

    # --- summary ----------------------------------------------------

    def get_summary(self, now: datetime = None) -> Dict[str, Any]:
        """
        Compute the full dashboard summary.

        Args:
            now: anchor for all time windows (defaults to current UTC time)
        """
        now = now or utcnow()
        try:
            total = self.store.count()
            by_year = self.applications_by_year()
            by_branch = self.applications_by_branch()
            by_day = self.applications_by_day(now)
            recent = self.recent_applications()
            trends = self.trends(now, by_branch)
        except errors.StoreError as exc:
            logger.exception("Analytics aggregation failed")
            raise errors.AggregationError("Failed to compute analytics summary") from exc

        return {
            "totalApplications": total,
            "applicationsByYear": by_year,
            "applicationsByBranch": by_branch,
            "applicationsByDay": by_day,
            "recentApplications": recent,
            "trends": trends,
        }
