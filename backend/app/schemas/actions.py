from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

"""
Schemas Actions (Pydantic).

Rôle (fonctionnel) :
- Contrat de réponse des endpoints /api/actions* et /api/sujets/{id}/actions.
- Colonnes structurantes déclarées (clés, statut, ordre, date) ; clés et ordre sont renvoyés
  avec le type de la colonne (Any : INTEGER, BIGINT ou NUMERIC selon le schéma), les colonnes
  descriptives telles quelles (extra="allow").
"""


class ActionOut(BaseModel):
    """Ligne de la table action."""
    model_config = ConfigDict(extra="allow")

    id: Any
    sujet_id: Any
    parent_action_id: Any = None
    status: Optional[str] = None
    ordre: Any = None
    created_at: Optional[datetime] = None
