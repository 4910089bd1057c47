"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class YearOfStudy(str, Enum):
    first = "1st year"
    second = "2nd year"
    third = "3rd year"
    fourth = "4th year"


class Branch(str, Enum):
    aiml = "Artificial Intelligence and Machine Learning"
    aeronautical = "Aeronautical Engineering"
    automobile = "Automobile Engineering"
    biotechnology = "Biotechnology"
    cse = "Computer Science and Engineering"
    csbs = "Computer Science and Business Systems"
    cse_cyber_security = "Computer Science & Engineering (Cyber Security)"
    cse_data_science = "Computer Science & Engineering (Data Science)"
    cse_iot = (
        "Computer Science & Engineering (Internet of Things and Cyber Security "
        "Including Block Chain Technology)"
    )
    csd = "Computer Science and Design"
    chemical = "Chemical Engineering"
    civil = "Civil Engineering"
    eee = "Electrical & Electronics Engineering"
    ece = "Electronics & Communication Engineering"
    eie = "Electronics and Instrumentation Engineering"
    ete = "Electronics and Telecommunication Engineering"
    ise = "Information Science and Engineering"
    mechanical = "Mechanical Engineering"
    medical_electronics = "Medical Electronics Engineering"
    robotics = "Robotics and Artificial Intelligence"


class SortField(str, Enum):
    created_at = "createdAt"
    updated_at = "updatedAt"
    name = "name"
    email = "email"
    college_id = "college_id"
    year_of_study = "year_of_study"
    branch = "branch"


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


# ============================================================
# RECRUITMENT SCHEMAS
# ============================================================

class RecruitmentCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    whatsapp_number: str = Field(..., pattern=r"^[6-9][0-9]{9}$")
    college_id: str = Field(..., min_length=1)
    year_of_study: YearOfStudy
    branch: Branch
    about: str = Field(..., min_length=10, max_length=1500)

    @field_validator("email", mode="before")
    @classmethod
    def lowercase_email(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("college_id", mode="before")
    @classmethod
    def uppercase_college_id(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class RecruitmentRecord(BaseModel):
    """A stored application as returned by the API (_id as string)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    whatsapp_number: str
    college_id: str
    year_of_study: str
    branch: str
    about: str
    createdAt: datetime
    updatedAt: datetime


class RecruitmentQuery(BaseModel):
    """Filter / sort / pagination request for the listing endpoint."""
    search: str = ""
    year: Optional[str] = None
    branch: Optional[str] = None
    sort_by: str = SortField.created_at.value
    sort_order: str = SortOrder.desc.value
    page: int = 1
    # None means the configured default page size
    limit: Optional[int] = None


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class RecruitmentListResponse(BaseModel):
    success: bool = True
    data: List[RecruitmentRecord]
    pagination: Pagination


class RecruitmentCreateResponse(BaseModel):
    success: bool = True
    data: RecruitmentRecord


class FilterOptionsResponse(BaseModel):
    success: bool = True
    years: List[str]
    branches: List[str]
    sort_fields: List[str]


# ============================================================
# ANALYTICS SCHEMAS
# ============================================================

class GroupCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    count: int


class RecentApplication(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    name: str
    email: str
    year_of_study: str
    branch: str
    createdAt: datetime


class Trends(BaseModel):
    weeklyChange: float
    monthlyChange: float
    topBranchChange: float
    thisWeekCount: int
    thisMonthCount: int
    topBranchName: str


class AnalyticsSummary(BaseModel):
    totalApplications: int
    applicationsByYear: List[GroupCount]
    applicationsByBranch: List[GroupCount]
    applicationsByDay: List[GroupCount]
    recentApplications: List[RecentApplication]
    trends: Trends


class AnalyticsResponse(BaseModel):
    success: bool = True
    data: AnalyticsSummary


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    success: bool = False
    error: str
