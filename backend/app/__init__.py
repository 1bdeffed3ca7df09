"""
app

Package racine du backend Action Plan.

Rôle (fonctionnel) :
- Expose en lecture seule le plan d’action (sujets / sous-sujets, actions / sous-actions,
  statuts, statistiques) stocké dans PostgreSQL.
- Sert de point d’ancrage pour les imports : `from app...`

Organisation (haute-level) :
- app.api      : routes FastAPI (contrats HTTP, dépendances)
- app.core     : briques transverses (settings, errors, logs, request_id)
- app.db       : requêtes SQL nommées + gateway (pool async, TLS)
- app.models   : modèles ORM (tables sujet / action)
- app.schemas  : schémas Pydantic (réponses API)
- app.services : use-cases de lecture (sujets, actions, statistiques)
"""
