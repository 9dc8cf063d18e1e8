"""
Couche Infrastructure - Adapters techniques.

Implementations SQLAlchemy des repositories, stockage local
des fichiers uploades, logging structure et container.
"""
