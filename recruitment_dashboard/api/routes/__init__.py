"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from recruitment_dashboard.api.routes.recruitment_routes import router as recruitment_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(recruitment_router)
