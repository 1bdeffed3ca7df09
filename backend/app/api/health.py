from fastapi import APIRouter

from app.schemas.common import HealthOut

"""
API Health.

Rôle (fonctionnel) :
- Endpoint statique pour vérifier que l’API répond (aucun accès base).
"""

router = APIRouter()


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="OK", message="API Action Plan est en ligne")
