from __future__ import annotations

from fastapi import APIRouter

from app.api.deps import GatewayDep
from app.db.gateway import QueryGateway
from app.schemas.common import ErrorOut
from app.schemas.statistiques import StatistiquesOut
from app.services.stats_service import get_statistiques

"""
API Statistiques.

Rôle (fonctionnel) :
- Synthèse globale pour le front : nombre de sujets, d’actions, et d’actions par statut.
- Toujours un objet (compteurs à 0 si la base est vide).
"""

router = APIRouter(tags=["statistiques"])


@router.get("/statistiques", response_model=StatistiquesOut, responses={500: {"model": ErrorOut}})
async def statistiques(gateway: QueryGateway = GatewayDep):
    return await get_statistiques(gateway)
