"""
Dashboard API endpoints
Per-user overviews for professionals (sales, ratings) and students (library)
"""
from fastapi import APIRouter, Depends

from core.database import get_aggregator
from core.security import get_current_professional, get_current_student
from models.user import User
from services.aggregation import CatalogAggregator

router = APIRouter()


@router.get("/professional")
async def professional_dashboard(
    current_user: User = Depends(get_current_professional),
    catalog: CatalogAggregator = Depends(get_aggregator)
):
    """
    Caller's videos with every purchase and rating they received

    The summary holds total sales, revenue, overall average rating and a
    per-video breakdown.
    """
    data = catalog.professional_dashboard(current_user.id)
    return {
        "videos": [video.to_dict() for video in data["videos"]],
        "purchases": [purchase.to_dict() for purchase in data["purchases"]],
        "ratings": [rating.to_dict() for rating in data["ratings"]],
        "summary": data["summary"],
    }


@router.get("/student")
async def student_dashboard(
    current_user: User = Depends(get_current_student),
    catalog: CatalogAggregator = Depends(get_aggregator)
):
    """Caller's purchased videos and their own ratings"""
    data = catalog.student_dashboard(current_user.id)
    return {
        "purchases": [purchase.to_dict() for purchase in data["purchases"]],
        "ratings": [rating.to_dict() for rating in data["ratings"]],
    }
