"""
Recruitment Dashboard
Admin backend for browsing and summarizing recruitment applications.

Architecture:
- MongoDB: Application records (source of truth)
- FastAPI: Listing, submission and analytics endpoints
"""

__version__ = "1.0.0"
