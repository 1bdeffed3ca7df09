"""
app.models

Package ORM (SQLAlchemy) : tables du plan d’action.

Rôle (fonctionnel) :
- Déclare les tables `sujet` et `action` (schéma de référence pour Alembic, le seed et les tests).
- Expose explicitement l’API publique du package via __all__.
"""

from app.models.sujet import Sujet
from app.models.action import Action, ACTION_STATUSES

__all__ = ["Sujet", "Action", "ACTION_STATUSES"]
