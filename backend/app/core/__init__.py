"""
app.core

Package “cœur” de l’application : tout ce qui est transversal et ne dépend pas
d’un domaine métier (sujets, actions, statistiques).

- settings
  Configuration via variables d’environnement (.env) : HTTP, connexion PostgreSQL, TLS, pool.

- errors
  Format d’erreur API ({"error": "..."}) et exception applicative AppHTTPException.

- logging
  Logs JSON sur stdout, enrichis du request_id et d’extras (route, requête SQL, durée).

- request_id
  Identifiant de corrélation par requête (X-Request-Id) stocké dans un ContextVar.
"""
