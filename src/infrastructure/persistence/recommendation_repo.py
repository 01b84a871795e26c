"""
infrastructure.persistence.recommendation_repo - SQLite recommendation repository.

Implements RecommendationRepository port.
"""

from __future__ import annotations

from domain.entities import Recommendation
from infrastructure.persistence.connection import AsyncSQLiteConnection


class SQLiteRecommendationRepository:
    """Async SQLite implementation of RecommendationRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, recommendation: Recommendation) -> int:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "INSERT INTO Recommendation (Title, Description, UserID) VALUES (?, ?, ?)",
                (recommendation.title, recommendation.description, recommendation.user_id),
            )
            return cursor.lastrowid

    async def get_by_user(self, user_id: int) -> list[Recommendation]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT RecommendationID, Title, Description, UserID
                   FROM Recommendation WHERE UserID = ?
                   ORDER BY RecommendationID""",
                (user_id,),
            )
            return [self._row_to_recommendation(r) for r in rows]

    async def delete(self, recommendation_id: int) -> bool:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "DELETE FROM Recommendation WHERE RecommendationID = ?",
                (recommendation_id,),
            )
            return cursor.rowcount > 0

    @staticmethod
    def _row_to_recommendation(row) -> Recommendation:
        return Recommendation(
            id=row[0], title=row[1], description=row[2], user_id=row[3],
        )
