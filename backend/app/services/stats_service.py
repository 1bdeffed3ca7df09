from __future__ import annotations

from app.db.gateway import QueryGateway
from app.db.queries import STATISTIQUES
from app.schemas.statistiques import StatistiquesOut


async def get_statistiques(gateway: QueryGateway) -> StatistiquesOut:
    """Statistiques globales (1 ligne agrégée ; zéros si aucune ligne n’est renvoyée)."""
    row = await gateway.fetch_one(STATISTIQUES)
    return StatistiquesOut.model_validate(row or {})
