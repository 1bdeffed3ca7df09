from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from app.schemas.common import Count

"""
Schema Statistiques (Pydantic).

Rôle (fonctionnel) :
- Une seule ligne agrégée sur l’ensemble des sujets / actions.
- Compteurs par statut (buckets) ; 0 si la base est vide.
"""


class StatistiquesOut(BaseModel):
    total_sujets: Count = 0
    total_actions: Count = 0
    actions_completed: Count = 0
    actions_overdue: Count = 0
    actions_in_progress: Count = 0
    actions_nouveau: Count = 0

    model_config = ConfigDict(extra="forbid")
