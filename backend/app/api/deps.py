from __future__ import annotations

from fastapi import Depends, Request

from app.db.gateway import QueryGateway

"""
Dépendances API.

Rôle (fonctionnel) :
- Fournit aux routes la QueryGateway créée au démarrage (app.state.gateway).
- Point de substitution unique pour les tests (app.dependency_overrides[get_gateway]).
"""


def get_gateway(request: Request) -> QueryGateway:
    return request.app.state.gateway


# Dépendance prête à l’emploi
GatewayDep = Depends(get_gateway)
