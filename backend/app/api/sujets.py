from __future__ import annotations

from typing import List

from fastapi import APIRouter

from app.api.deps import GatewayDep
from app.db.gateway import QueryGateway
from app.schemas.common import ErrorOut
from app.schemas.actions import ActionOut
from app.schemas.sujets import SousSujetOut, SujetOut, SujetRacineOut, SujetStatsOut
from app.services import actions_service, sujets_service

"""
API Sujets.

Rôle (fonctionnel) :
- Liste des sujets avec statistiques (total / terminées / en retard).
- Détail d’un sujet (404 si absent).
- Sous-sujets d’un sujet parent, sujets racines.
- Actions de premier niveau d’un sujet.

Notes :
- Les identifiants de chemin sont reçus tels quels (str) et convertis au bind SQL :
  une valeur invalide produit une erreur serveur (500), un id valide absent un 404.
"""

router = APIRouter(tags=["sujets"])

_ERRORS = {500: {"model": ErrorOut}}


@router.get("/sujets", response_model=List[SujetStatsOut], responses=_ERRORS)
async def list_sujets(gateway: QueryGateway = GatewayDep):
    return await sujets_service.list_sujets(gateway)


@router.get("/sujets-racines", response_model=List[SujetRacineOut], responses=_ERRORS)
async def list_sujets_racines(gateway: QueryGateway = GatewayDep):
    return await sujets_service.list_sujets_racines(gateway)


@router.get("/sujets/{sujet_id}", response_model=SujetOut, responses={404: {"model": ErrorOut}, **_ERRORS})
async def get_sujet(sujet_id: str, gateway: QueryGateway = GatewayDep):
    return await sujets_service.get_sujet(gateway, sujet_id)


@router.get("/sujets/{sujet_id}/sous-sujets", response_model=List[SousSujetOut], responses=_ERRORS)
async def list_sous_sujets(sujet_id: str, gateway: QueryGateway = GatewayDep):
    return await sujets_service.list_sous_sujets(gateway, sujet_id)


@router.get("/sujets/{sujet_id}/actions", response_model=List[ActionOut], responses=_ERRORS)
async def list_actions_du_sujet(sujet_id: str, gateway: QueryGateway = GatewayDep):
    return await actions_service.list_actions_du_sujet(gateway, sujet_id)
