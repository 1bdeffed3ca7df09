from fastapi import APIRouter

from .health import router as health_router
from .sujets import router as sujets_router

from app.api.actions import router as actions_router
from app.api.statistiques import router as statistiques_router

"""
Router principal de l’API.

Rôle (fonctionnel) :
- Regroupe les routeurs par domaine (health, sujets, actions, statistiques) sous le préfixe /api.
- Sert de point d’entrée unique pour l’inclusion dans l’application FastAPI.
"""

api_router = APIRouter(prefix="/api")

api_router.include_router(health_router, tags=["health"])
api_router.include_router(sujets_router)
api_router.include_router(actions_router)
api_router.include_router(statistiques_router)
