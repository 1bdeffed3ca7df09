from __future__ import annotations

from typing import List

from fastapi import APIRouter

from app.api.deps import GatewayDep
from app.db.gateway import QueryGateway
from app.schemas.actions import ActionOut
from app.schemas.common import ErrorOut
from app.services import actions_service

"""
API Actions.

Rôle (fonctionnel) :
- Détail d’une action (404 si absente).
- Sous-actions directes d’une action parente.
"""

router = APIRouter(prefix="/actions", tags=["actions"])


@router.get(
    "/{action_id}",
    response_model=ActionOut,
    responses={404: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
async def get_action(action_id: str, gateway: QueryGateway = GatewayDep):
    return await actions_service.get_action(gateway, action_id)


@router.get("/{action_id}/sous-actions", response_model=List[ActionOut], responses={500: {"model": ErrorOut}})
async def list_sous_actions(action_id: str, gateway: QueryGateway = GatewayDep):
    return await actions_service.list_sous_actions(gateway, action_id)
