"""
Tests d'integration pour les repositories SQLAlchemy.

Base SQLite reelle (fichier dans tmp_path), tables creees par test.
"""

import threading
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from sqlalchemy.orm import Session

from six_cities.domain.entities import Comment, Offer, User
from six_cities.domain.value_objects import City, Coordinates, UserType
from six_cities.infrastructure.persistence import (
    SqlAlchemyCommentRepository,
    SqlAlchemyOfferRepository,
    SqlAlchemyUserRepository,
)


# ============================================================
# Fixtures
# ============================================================


@pytest.fixture
def users(db) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


@pytest.fixture
def offers(db) -> SqlAlchemyOfferRepository:
    return SqlAlchemyOfferRepository(db)


@pytest.fixture
def comments(db) -> SqlAlchemyCommentRepository:
    return SqlAlchemyCommentRepository(db)


@pytest.fixture
def stored_user(users, sample_user) -> User:
    return users.save(sample_user)


@pytest.fixture
def make_offer(offers, stored_user):
    """Factory: persiste une offre publiee il y a `age` minutes."""

    def _make(age: int = 0, city: str = "Amsterdam", is_premium: bool = False) -> Offer:
        offer = Offer.create(
            title="Nice, cozy, warm big bed apartment",
            description="A quiet cozy and picturesque place that hides behind a river.",
            city=city,
            preview="https://example.com/preview.jpg",
            images=[f"https://example.com/{i}.jpg" for i in range(1, 7)],
            is_premium=is_premium,
            type="apartment",
            bedrooms=3,
            guests=4,
            price=120,
            amenities=["Breakfast", "Washer"],
            coordinates=Coordinates(latitude=52.370216, longitude=4.895168),
            author_id=stored_user.id,
            date=datetime.now() - timedelta(minutes=age),
        )
        return offers.save(offer)

    return _make


# ============================================================
# Users
# ============================================================


class TestSqlAlchemyUserRepository:
    """Tests pour SqlAlchemyUserRepository."""

    def test_save_and_get_by_id(self, users, stored_user):
        """Un utilisateur persiste est relu a l'identique."""
        loaded = users.get_by_id(stored_user.id)

        assert loaded.email == "keks@example.com"
        assert loaded.type is UserType.PRO
        assert loaded.verify_password("secret1")

    def test_get_by_email(self, users, stored_user):
        """Recherche par email."""
        assert users.get_by_email("keks@example.com") == stored_user
        assert users.get_by_email("ghost@example.com") is None

    def test_exists(self, users, stored_user):
        """exists repond sans charger l'entite."""
        assert users.exists(stored_user.id) is True
        assert users.exists(uuid4()) is False

    def test_update_avatar(self, users, stored_user):
        """save met a jour un utilisateur existant."""
        stored_user.set_avatar("/uploads/a.png")
        users.save(stored_user)

        assert users.get_by_id(stored_user.id).avatar == "/uploads/a.png"

    def test_find_by_ids(self, users, stored_user):
        """Chargement groupe."""
        other = users.save(User.create("Other", "other@example.com", "secret1"))

        found = users.find_by_ids({stored_user.id, other.id, uuid4()})

        assert {u.id for u in found} == {stored_user.id, other.id}

    def test_favorites_are_idempotent(self, users, stored_user, make_offer):
        """Ajouter deux fois ou retirer un absent ne change rien."""
        offer = make_offer()

        assert users.add_favorite(stored_user.id, offer.id) is True
        assert users.add_favorite(stored_user.id, offer.id) is False
        assert users.get_favorite_ids(stored_user.id) == {offer.id}
        assert users.get_by_id(stored_user.id).has_favorite(offer.id)

        assert users.remove_favorite(stored_user.id, offer.id) is True
        assert users.remove_favorite(stored_user.id, offer.id) is False
        assert users.get_favorite_ids(stored_user.id) == set()

    def test_add_favorite_when_check_misses_existing_row(
        self, users, stored_user, make_offer, monkeypatch
    ):
        """Favori insere entre la verification et l'insert: False, sans erreur."""
        offer = make_offer()
        users.add_favorite(stored_user.id, offer.id)
        monkeypatch.setattr(Session, "get", lambda self, *args, **kwargs: None)

        assert users.add_favorite(stored_user.id, offer.id) is False
        assert users.get_favorite_ids(stored_user.id) == {offer.id}

    def test_concurrent_adds_of_same_favorite(
        self, users, stored_user, make_offer, monkeypatch
    ):
        """Deux ajouts simultanes: un seul ajoute, aucun ne leve."""
        offer = make_offer()
        barrier = threading.Barrier(2)
        original_get = Session.get

        def get_then_wait(self, *args, **kwargs):
            found = original_get(self, *args, **kwargs)
            barrier.wait(timeout=5)
            return found

        monkeypatch.setattr(Session, "get", get_then_wait)
        results, errors = [], []

        def add():
            try:
                results.append(users.add_favorite(stored_user.id, offer.id))
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=add) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert errors == []
        assert sorted(results) == [False, True]
        monkeypatch.undo()
        assert users.get_favorite_ids(stored_user.id) == {offer.id}


# ============================================================
# Offers
# ============================================================


class TestSqlAlchemyOfferRepository:
    """Tests pour SqlAlchemyOfferRepository."""

    def test_save_and_get(self, offers, make_offer):
        """Les value objects survivent a la persistance."""
        offer = make_offer(city="Cologne")

        loaded = offers.get_by_id(offer.id)

        assert loaded.city is City.COLOGNE
        assert loaded.images == offer.images
        assert loaded.amenities == offer.amenities
        assert loaded.coordinates == offer.coordinates
        assert loaded.rating == 0.0

    def test_find_latest_orders_and_limits(self, offers, make_offer):
        """Plus recentes en premier, limite respectee."""
        old = make_offer(age=30)
        new = make_offer(age=1)
        middle = make_offer(age=10)

        assert [o.id for o in offers.find_latest(10)] == [new.id, middle.id, old.id]
        assert [o.id for o in offers.find_latest(2)] == [new.id, middle.id]

    def test_find_premium_by_city(self, offers, make_offer):
        """Seulement les offres premium de la ville demandee."""
        premium = make_offer(city="Paris", is_premium=True)
        make_offer(city="Paris", is_premium=False)
        make_offer(city="Hamburg", is_premium=True)

        found = offers.find_premium_by_city(City.PARIS, 3)

        assert [o.id for o in found] == [premium.id]

    def test_find_favorites_of(self, offers, users, stored_user, make_offer):
        """Offres favorites d'un utilisateur."""
        favorite = make_offer()
        make_offer()
        users.add_favorite(stored_user.id, favorite.id)

        assert [o.id for o in offers.find_favorites_of(stored_user.id)] == [favorite.id]

    def test_update_stats(self, offers, make_offer):
        """update_stats n'ecrit que les champs derives."""
        offer = make_offer()

        offers.update_stats(offer.id, 2, 4.5)

        loaded = offers.get_by_id(offer.id)
        assert loaded.comment_count == 2
        assert loaded.rating == 4.5
        assert loaded.title == offer.title

    def test_delete_removes_favorites(self, offers, users, stored_user, make_offer):
        """La suppression retire l'offre des favoris."""
        offer = make_offer()
        users.add_favorite(stored_user.id, offer.id)

        assert offers.delete(offer.id) is True

        assert offers.exists(offer.id) is False
        assert users.get_favorite_ids(stored_user.id) == set()
        assert offers.delete(offer.id) is False


# ============================================================
# Comments
# ============================================================


class TestSqlAlchemyCommentRepository:
    """Tests pour SqlAlchemyCommentRepository."""

    def test_aggregates(self, comments, stored_user, make_offer):
        """count et moyenne calcules en base."""
        offer = make_offer()
        for rating in (5, 4, 4):
            comments.save(Comment.create("Great place to stay", rating, stored_user.id, offer.id))

        assert comments.count_by_offer(offer.id) == 3
        assert comments.average_rating(offer.id) == pytest.approx(13 / 3)

    def test_aggregates_without_comments(self, comments, make_offer):
        """Sans commentaire: 0 et None."""
        offer = make_offer()

        assert comments.count_by_offer(offer.id) == 0
        assert comments.average_rating(offer.id) is None

    def test_find_by_offer(self, comments, stored_user, make_offer):
        """Plus recents en premier, limites, filtres par offre."""
        offer, other = make_offer(), make_offer()
        first = Comment.create("First comment", 3, stored_user.id, offer.id)
        first.created_at = datetime.now() - timedelta(minutes=5)
        comments.save(first)
        second = comments.save(Comment.create("Second comment", 4, stored_user.id, offer.id))
        comments.save(Comment.create("Elsewhere comment", 1, stored_user.id, other.id))

        found = comments.find_by_offer(offer.id, 50)

        assert [c.id for c in found] == [second.id, first.id]
        assert len(comments.find_by_offer(offer.id, 1)) == 1

    def test_delete_by_offer(self, comments, stored_user, make_offer):
        """Suppression en masse des commentaires d'une offre."""
        offer = make_offer()
        comments.save(Comment.create("Great place to stay", 5, stored_user.id, offer.id))
        comments.save(Comment.create("Great place again", 4, stored_user.id, offer.id))

        assert comments.delete_by_offer(offer.id) == 2
        assert comments.count_by_offer(offer.id) == 0
