from __future__ import annotations

from typing import List

from app.core.errors import AppHTTPException
from app.db.gateway import QueryGateway
from app.db.queries import ACTION_PAR_ID, ACTIONS_DU_SUJET, SOUS_ACTIONS
from app.schemas.actions import ActionOut

"""
Actions Service.

Rôle (fonctionnel) :
- Actions de premier niveau d’un sujet (les sous-actions sont exclues).
- Détail d’une action.
- Sous-actions directes d’une action parente.

Tri des listes : ordre manuel croissant, puis plus récentes d’abord à ordre égal.
"""

ACTION_NOT_FOUND = "Action non trouvée"


async def list_actions_du_sujet(gateway: QueryGateway, sujet_id: str) -> List[ActionOut]:
    rows = await gateway.fetch_all(ACTIONS_DU_SUJET, sujet_id)
    return [ActionOut.model_validate(r) for r in rows]


async def get_action(gateway: QueryGateway, action_id: str) -> ActionOut:
    row = await gateway.fetch_one(ACTION_PAR_ID, action_id)
    if row is None:
        raise AppHTTPException(404, ACTION_NOT_FOUND)
    return ActionOut.model_validate(row)


async def list_sous_actions(gateway: QueryGateway, action_id: str) -> List[ActionOut]:
    rows = await gateway.fetch_all(SOUS_ACTIONS, action_id)
    return [ActionOut.model_validate(r) for r in rows]
