"""
app.services

Package “services” : logique de lecture indépendante des endpoints HTTP.

Rôle (fonctionnel) :
- Chaque service reçoit la QueryGateway injectée par la couche API,
  exécute une requête nommée (app.db.queries) et met en forme le résultat (app.schemas).
- Les cas “introuvable” sont levés ici (AppHTTPException 404).

Principe :
- app.api = transport HTTP (routes, dépendances)
- app.services = use-cases (réutilisables, testables avec une gateway substituée)
- app.db / app.schemas = accès base et contrats
"""
