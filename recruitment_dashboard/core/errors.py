"""
Error taxonomy for the recruitment service.

- ValidationError:  a field or cross-field rule was violated (record rejected)
- DuplicateKeyError: email / whatsapp_number / college_id already exists
- StoreError:       MongoDB unreachable or a query failed
- AggregationError: any failure while building the analytics summary

The API layer maps these to response envelopes (see app exception handlers).
"""

from typing import Optional


class RecruitmentError(Exception):
    """Base class for all service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RecruitmentError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class DuplicateKeyError(RecruitmentError):
    def __init__(self, field: Optional[str] = None):
        if field:
            message = f"An application with this {field} already exists"
        else:
            message = "An application with these details already exists"
        super().__init__(message)
        self.field = field


class StoreError(RecruitmentError):
    pass


class AggregationError(RecruitmentError):
    pass
