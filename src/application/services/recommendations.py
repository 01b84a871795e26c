"""
application.services.recommendations - Personalized advice per user.
"""

from __future__ import annotations

import logging
from typing import Optional

from domain.entities import Recommendation
from domain.ports import RecommendationRepository

logger = logging.getLogger(__name__)


class RecommendationService:
    """Stores and lists recommendations for a user."""

    def __init__(self, recommendation_repo: RecommendationRepository):
        self._repo = recommendation_repo

    async def add(
        self,
        user_id: int,
        title: str,
        description: Optional[str] = None,
    ) -> Recommendation:
        """Attach advice to a user. An unknown user raises sqlite3.IntegrityError."""
        recommendation = Recommendation(title=title, description=description, user_id=user_id)
        recommendation.id = await self._repo.save(recommendation)
        logger.info("Added recommendation %d for user %d", recommendation.id, user_id)
        return recommendation

    async def for_user(self, user_id: int) -> list[Recommendation]:
        return await self._repo.get_by_user(user_id)
