from sqlalchemy.orm import DeclarativeBase

"""
DB Base.

Rôle (fonctionnel) :
- Classe Base SQLAlchemy commune aux modèles ORM (Sujet, Action).
- Sa metadata sert à Alembic (autogenerate), au script de seed et aux tests
  (création du schéma sur une base SQLite en mémoire).

Note :
- L’API ne lit jamais via l’ORM : les routes passent par les requêtes nommées (app.db.queries).
"""


class Base(DeclarativeBase):
    """Classe racine ORM (SQLAlchemy Declarative)."""
    pass
