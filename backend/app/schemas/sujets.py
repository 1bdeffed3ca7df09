from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from app.schemas.common import Count

"""
Schemas Sujets (Pydantic).

Rôle (fonctionnel) :
- Contrat de réponse des endpoints /api/sujets*.
- Un sujet est renvoyé avec toutes ses colonnes (SELECT s.*) : les clés gardent le type de
  la colonne (Any), les colonnes descriptives (titre, auteur, …) passent telles quelles
  grâce à extra="allow".
- Les variantes “avec statistiques” ajoutent des compteurs jamais nuls (Count).
"""


class SujetOut(BaseModel):
    """Ligne de la table sujet."""
    model_config = ConfigDict(extra="allow")

    id: Any
    parent_sujet_id: Any = None
    created_at: Optional[datetime] = None


class SujetStatsOut(SujetOut):
    """Liste complète : total + terminées + en retard."""
    total_actions: Count = 0
    completed_actions: Count = 0
    overdue_actions: Count = 0


class SousSujetOut(SujetOut):
    total_actions: Count = 0
    completed_actions: Count = 0


class SujetRacineOut(SujetOut):
    total_actions: Count = 0
    total_sous_sujets: Count = 0
