"""Recommendation endpoints, nested under the owning user."""

from fastapi import APIRouter, Depends, status

from factory import ServiceFactory
from adapters.rest.dependencies import get_factory
from adapters.rest.schemas import RecommendationBody, RecommendationOut

router = APIRouter(prefix="/users/{user_id}/recommendations", tags=["recommendations"])


@router.get("", response_model=list[RecommendationOut])
async def list_recommendations(
    user_id: int,
    factory: ServiceFactory = Depends(get_factory),
):
    await factory.create_user_service().get(user_id)
    recs = await factory.create_recommendation_service().for_user(user_id)
    return [RecommendationOut.from_entity(r) for r in recs]


@router.post("", response_model=RecommendationOut, status_code=status.HTTP_201_CREATED)
async def add_recommendation(
    user_id: int,
    body: RecommendationBody,
    factory: ServiceFactory = Depends(get_factory),
):
    service = factory.create_recommendation_service()
    rec = await service.add(user_id, body.title, body.description)
    return RecommendationOut.from_entity(rec)
