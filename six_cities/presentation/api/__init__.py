"""
API REST FastAPI de Six Cities.

Usage:
------
    uvicorn six_cities.presentation.api.main:create_app --factory
"""
