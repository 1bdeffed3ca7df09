from __future__ import annotations

from typing import List

from app.core.errors import AppHTTPException
from app.db.gateway import QueryGateway
from app.db.queries import SOUS_SUJETS, SUJET_PAR_ID, SUJETS_AVEC_STATS, SUJETS_RACINES
from app.schemas.sujets import SousSujetOut, SujetOut, SujetRacineOut, SujetStatsOut

"""
Sujets Service.

Rôle (fonctionnel) :
- Use-cases de lecture des sujets : liste complète avec statistiques, détail,
  sous-sujets d’un parent, sujets racines.
- 1 fonction = 1 requête nommée ; les lignes sont converties en schémas de réponse.

Notes :
- Les compteurs portent sur action.sujet_id : une sous-action compte pour son sujet,
  il n’y a pas de cumul sur les sous-sujets.
- Les identifiants sont transmis bruts : la conversion vers le type de clé est faite au bind.
"""

SUJET_NOT_FOUND = "Sujet non trouvé"


async def list_sujets(gateway: QueryGateway) -> List[SujetStatsOut]:
    rows = await gateway.fetch_all(SUJETS_AVEC_STATS)
    return [SujetStatsOut.model_validate(r) for r in rows]


async def get_sujet(gateway: QueryGateway, sujet_id: str) -> SujetOut:
    row = await gateway.fetch_one(SUJET_PAR_ID, sujet_id)
    if row is None:
        raise AppHTTPException(404, SUJET_NOT_FOUND)
    return SujetOut.model_validate(row)


async def list_sous_sujets(gateway: QueryGateway, sujet_id: str) -> List[SousSujetOut]:
    # Parent inexistant => liste vide (pas de 404)
    rows = await gateway.fetch_all(SOUS_SUJETS, sujet_id)
    return [SousSujetOut.model_validate(r) for r in rows]


async def list_sujets_racines(gateway: QueryGateway) -> List[SujetRacineOut]:
    rows = await gateway.fetch_all(SUJETS_RACINES)
    return [SujetRacineOut.model_validate(r) for r in rows]
