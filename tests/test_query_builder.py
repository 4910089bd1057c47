from recruitment_dashboard.schemas.schemas import RecruitmentQuery
from recruitment_dashboard.services.query_builder import (
    MAX_SKIP, build_filter, build_query, build_sort, clamp_pagination, total_pages
)


def test_empty_query_matches_everything_newest_first():
    plan = build_query(RecruitmentQuery())
    assert plan.filter == {}
    assert plan.sort == [("createdAt", -1)]
    assert (plan.page, plan.limit, plan.skip) == (1, 10, 0)


def test_search_expands_to_case_insensitive_or():
    conditions = build_filter(RecruitmentQuery(search="asha"))
    assert conditions == {"$or": [
        {"name": {"$regex": "asha", "$options": "i"}},
        {"email": {"$regex": "asha", "$options": "i"}},
        {"college_id": {"$regex": "asha", "$options": "i"}},
        {"whatsapp_number": {"$regex": "asha", "$options": "i"}},
    ]}


def test_search_is_trimmed_and_blank_search_ignored():
    assert build_filter(RecruitmentQuery(search="   ")) == {}
    conditions = build_filter(RecruitmentQuery(search="  rao "))
    assert conditions["$or"][0]["name"]["$regex"] == "rao"


def test_search_text_is_matched_literally():
    conditions = build_filter(RecruitmentQuery(search="a.b+"))
    assert conditions["$or"][0]["name"]["$regex"] == r"a\.b\+"


def test_year_and_branch_are_anded_with_search():
    conditions = build_filter(RecruitmentQuery(
        search="rao", year="2nd year", branch="Civil Engineering"
    ))
    assert conditions["year_of_study"] == "2nd year"
    assert conditions["branch"] == "Civil Engineering"
    assert len(conditions["$or"]) == 4


def test_sort_field_and_direction():
    assert build_sort(RecruitmentQuery(sort_by="name", sort_order="asc")) == [("name", 1)]
    assert build_sort(RecruitmentQuery(sort_by="branch", sort_order="DESC")) == [("branch", -1)]


def test_unknown_sort_values_fall_back_to_defaults():
    assert build_sort(RecruitmentQuery(sort_by="$where", sort_order="sideways")) == [("createdAt", -1)]


def test_pagination_offset():
    plan = build_query(RecruitmentQuery(page=3, limit=20))
    assert plan.skip == 40


def test_pagination_clamping():
    assert clamp_pagination(0, 10) == (1, 10)
    assert clamp_pagination(-4, 10) == (1, 10)
    assert clamp_pagination(2, 0) == (2, 10)
    assert clamp_pagination(2, -5) == (2, 10)
    assert clamp_pagination(1, 5000) == (1, 100)
    assert clamp_pagination(3, None) == (3, 10)


def test_huge_page_keeps_skip_within_int64():
    plan = build_query(RecruitmentQuery(page=10 ** 18, limit=10))
    assert 0 < plan.skip <= MAX_SKIP

    plan = build_query(RecruitmentQuery(page=10 ** 30, limit=100))
    assert plan.skip <= MAX_SKIP
    assert plan.page == MAX_SKIP // 100 + 1

    # Ordinary pages are untouched
    assert build_query(RecruitmentQuery(page=500, limit=100)).skip == 49900


def test_total_pages_rounds_up():
    assert total_pages(25, 10) == 3
    assert total_pages(20, 10) == 2
    assert total_pages(0, 10) == 0
