"""
app.db

Package base de données.

Contenu :
- base : classe Declarative commune aux modèles ORM (migrations, seed, tests).
- queries : requêtes SQL nommées et paramétrées (une par route), validées à l’import.
- gateway : pool de connexions async (SQLAlchemy + asyncpg, TLS) et exécution des requêtes.
"""
