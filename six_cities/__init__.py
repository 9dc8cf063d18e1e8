"""
Six Cities - API REST de location de logements.

Architecture hexagonale:
------------------------
- domain: Entites, value objects, ports (interfaces)
- application: Services applicatifs (users, offers, comments)
- infrastructure: Persistence SQLAlchemy, stockage fichiers, logging
- presentation: API FastAPI (routers, pipeline d'intercepteurs)
"""

__version__ = "1.0.0"
