"""
Professional API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status

from core.database import get_aggregator
from services.aggregation import CatalogAggregator

router = APIRouter()


@router.get("")
async def list_professionals(catalog: CatalogAggregator = Depends(get_aggregator)):
    """All professionals with their videos and average rating"""
    return [professional.to_dict() for professional in catalog.professionals_with_videos()]


@router.get("/{user_id}")
async def get_professional(
    user_id: int,
    catalog: CatalogAggregator = Depends(get_aggregator)
):
    """A professional with their videos; 404 for unknown ids and students"""
    professional = catalog.professional_with_videos(user_id)

    if not professional:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Professional not found"
        )

    return professional.to_dict()
