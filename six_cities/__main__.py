"""Lancement de l'API: python -m six_cities."""

from six_cities.presentation.api.main import run


if __name__ == "__main__":
    run()
