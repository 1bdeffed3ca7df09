"""Création des tables sujet et action.

Rôle (fonctionnel) :
- Crée l’arbre des sujets (parent_sujet_id) et l’arbre des actions (parent_action_id).
- Ajoute les index utilisés par les listes de l’API (parent, tri par date / ordre).

Revision ID: 5c2e8a41d0b7
Revises:
Create Date: 2025-03-04 10:12:41.218734
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Identifiants Alembic
revision: str = "5c2e8a41d0b7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Application des changements de schéma."""
    op.create_table(
        "sujet",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("parent_sujet_id", sa.Integer(), nullable=True),
        sa.Column("titre", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("auteur", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["parent_sujet_id"], ["sujet.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sujet_parent_sujet_id"), "sujet", ["parent_sujet_id"], unique=False)
    op.create_index("ix_sujet_created_at", "sujet", ["created_at"], unique=False)

    op.create_table(
        "action",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("sujet_id", sa.Integer(), nullable=False),
        sa.Column("parent_action_id", sa.Integer(), nullable=True),
        sa.Column("titre", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("responsable", sa.String(length=255), nullable=True),
        sa.Column("echeance", sa.Date(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("ordre", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["sujet_id"], ["sujet.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_action_id"], ["action.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_action_sujet_id"), "action", ["sujet_id"], unique=False)
    op.create_index(op.f("ix_action_parent_action_id"), "action", ["parent_action_id"], unique=False)
    op.create_index(op.f("ix_action_status"), "action", ["status"], unique=False)
    op.create_index("ix_action_sujet_parent", "action", ["sujet_id", "parent_action_id"], unique=False)
    op.create_index("ix_action_ordre_created", "action", ["ordre", "created_at"], unique=False)


def downgrade() -> None:
    """Retour arrière des changements de schéma."""
    op.drop_index("ix_action_ordre_created", table_name="action")
    op.drop_index("ix_action_sujet_parent", table_name="action")
    op.drop_index(op.f("ix_action_status"), table_name="action")
    op.drop_index(op.f("ix_action_parent_action_id"), table_name="action")
    op.drop_index(op.f("ix_action_sujet_id"), table_name="action")
    op.drop_table("action")

    op.drop_index("ix_sujet_created_at", table_name="sujet")
    op.drop_index(op.f("ix_sujet_parent_sujet_id"), table_name="sujet")
    op.drop_table("sujet")
