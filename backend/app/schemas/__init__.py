"""
app.schemas

Package des schémas API (Pydantic).

Rôle (fonctionnel) :
- Définit les modèles de réponse utilisés par l’API (response_model=...).
- Sépare clairement :
  - les modèles ORM (app.models) = schéma de référence des tables
  - les schémas Pydantic (app.schemas) = contrat HTTP (typage, compteurs jamais nuls)
"""
