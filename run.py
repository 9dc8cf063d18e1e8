#!/usr/bin/env python3
"""
Point d'entree principal pour lancer l'API Six Cities.

Usage:
------
    python3 run.py
    # ou, une fois le paquet installe:
    six-cities
    # ou directement:
    uvicorn six_cities.presentation.api.main:create_app --factory

Comportement:
-------------
1. Charge la configuration (.env / variables d'environnement)
2. Cree les tables manquantes
3. Lance uvicorn sur HOST:PORT (defaut 0.0.0.0:4000)

Erreurs courantes:
------------------
- "ModuleNotFoundError: six_cities": pip install -e .
- "connection refused": verifier DATABASE_URL ou DB_HOST / DB_PORT
"""
from six_cities.presentation.api.main import run


if __name__ == "__main__":
    run()
