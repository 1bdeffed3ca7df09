"""
scripts

Package utilitaire pour les scripts de maintenance / données.

Rôle (fonctionnel) :
- seed_demo : remplit une base de développement avec des sujets, sous-sujets,
  actions et sous-actions (statuts et ordre aléatoires, RNG reproductible).

Note :
- Les scripts ne contiennent pas de logique métier : ils s’appuient sur les modèles
  et la configuration de `app/`.
"""
