"""
Couche Domain - Coeur metier de Six Cities.

Contient les entites (User, Offer, Comment), les value objects
et les ports (interfaces) implementes par l'infrastructure.
Aucune dependance vers les frameworks.
"""
