"""
Tests unitaires pour les services applicatifs.

Les repositories sont remplaces par des Mock.
"""

from uuid import uuid4
from unittest.mock import Mock

import pytest

from six_cities.application.ports import DocumentLookup
from six_cities.application.services import CommentService, OfferService, UserService
from six_cities.domain.exceptions import (
    EmailAlreadyExistsError,
    EntityNotFoundError,
    InvalidEntityError,
)
from six_cities.domain.value_objects import City


class TestUserService:
    """Tests pour UserService."""

    def test_create_saves_new_user(self):
        """create persiste un nouvel utilisateur."""
        # Arrange
        user_repo = Mock()
        user_repo.get_by_email.return_value = None
        user_repo.save.side_effect = lambda u: u
        service = UserService(user_repo)

        # Act
        user = service.create("Keks", "Keks@Mail.com", "secret1", "pro")

        # Assert
        assert user.email == "keks@mail.com"
        user_repo.get_by_email.assert_called_once_with("keks@mail.com")
        user_repo.save.assert_called_once()

    def test_create_rejects_duplicate_email(self, sample_user):
        """create leve EmailAlreadyExistsError si l'email existe."""
        user_repo = Mock()
        user_repo.get_by_email.return_value = sample_user
        service = UserService(user_repo)

        with pytest.raises(EmailAlreadyExistsError):
            service.create("Other", "KEKS@example.com", "secret1")

        user_repo.save.assert_not_called()

    def test_verify_credentials_valid(self, sample_user):
        """Credentials valides: retourne l'utilisateur."""
        user_repo = Mock()
        user_repo.get_by_email.return_value = sample_user
        service = UserService(user_repo)

        assert service.verify_credentials("keks@example.com", "secret1") == sample_user

    def test_verify_credentials_wrong_password(self, sample_user):
        """Mauvais mot de passe: None."""
        user_repo = Mock()
        user_repo.get_by_email.return_value = sample_user
        service = UserService(user_repo)

        assert service.verify_credentials("keks@example.com", "nope123") is None

    def test_verify_credentials_unknown_email(self):
        """Email inconnu: None."""
        user_repo = Mock()
        user_repo.get_by_email.return_value = None
        service = UserService(user_repo)

        assert service.verify_credentials("ghost@example.com", "secret1") is None

    def test_update_avatar(self, sample_user):
        """update_avatar modifie et persiste l'utilisateur."""
        user_repo = Mock()
        user_repo.get_by_id.return_value = sample_user
        user_repo.save.side_effect = lambda u: u
        service = UserService(user_repo)

        user = service.update_avatar(sample_user.id, "/uploads/a.png")

        assert user.avatar == "/uploads/a.png"
        user_repo.save.assert_called_once_with(sample_user)

    def test_update_avatar_unknown_user(self):
        """update_avatar leve EntityNotFoundError si l'utilisateur manque."""
        user_repo = Mock()
        user_repo.get_by_id.return_value = None
        service = UserService(user_repo)

        with pytest.raises(EntityNotFoundError):
            service.update_avatar(uuid4(), "/uploads/a.png")

    def test_favorites_delegate_to_repository(self):
        """Les favoris sont delegues au repository."""
        user_repo = Mock()
        user_repo.add_favorite.return_value = True
        user_repo.remove_favorite.return_value = False
        user_repo.get_favorite_ids.return_value = set()
        service = UserService(user_repo)
        user_id, offer_id = uuid4(), uuid4()

        assert service.add_to_favorites(user_id, offer_id) is True
        assert service.remove_from_favorites(user_id, offer_id) is False
        assert service.get_favorite_offers(user_id) == set()
        user_repo.add_favorite.assert_called_once_with(user_id, offer_id)
        user_repo.remove_favorite.assert_called_once_with(user_id, offer_id)


class TestOfferService:
    """Tests pour OfferService."""

    def test_create_sets_author(self, sample_offer):
        """create publie l'offre au nom de l'auteur."""
        offer_repo = Mock()
        offer_repo.save.side_effect = lambda o: o
        service = OfferService(offer_repo, Mock())
        author_id = uuid4()
        data = {
            "title": sample_offer.title,
            "description": sample_offer.description,
            "city": "Paris",
            "preview": sample_offer.preview,
            "images": sample_offer.images,
            "is_premium": False,
            "type": "house",
            "bedrooms": 2,
            "guests": 3,
            "price": 300,
            "amenities": ["Fridge"],
            "coordinates": sample_offer.coordinates,
        }

        offer = service.create(data, author_id)

        assert offer.author_id == author_id
        assert offer.city is City.PARIS
        assert offer.rating == 0.0
        offer_repo.save.assert_called_once()

    def test_find_many_passes_limit(self):
        """find_many transmet la limite."""
        offer_repo = Mock()
        offer_repo.find_latest.return_value = []
        service = OfferService(offer_repo, Mock())

        service.find_many()
        offer_repo.find_latest.assert_called_with(60)

        service.find_many(limit=5)
        offer_repo.find_latest.assert_called_with(5)

    def test_find_premium_by_city(self):
        """find_premium_by_city convertit la ville et limite a 3."""
        offer_repo = Mock()
        offer_repo.find_premium_by_city.return_value = []
        service = OfferService(offer_repo, Mock())

        service.find_premium_by_city("Hamburg")

        offer_repo.find_premium_by_city.assert_called_once_with(City.HAMBURG, 3)

    def test_update_applies_changes(self, sample_offer):
        """update applique les changements et persiste."""
        offer_repo = Mock()
        offer_repo.get_by_id.return_value = sample_offer
        offer_repo.save.side_effect = lambda o: o
        service = OfferService(offer_repo, Mock())

        offer = service.update(sample_offer.id, {"price": 999, "title": None})

        assert offer.price == 999
        assert offer.title == "Nice, cozy, warm big bed apartment"

    def test_update_unknown_offer(self):
        """update leve EntityNotFoundError si l'offre manque."""
        offer_repo = Mock()
        offer_repo.get_by_id.return_value = None
        service = OfferService(offer_repo, Mock())

        with pytest.raises(EntityNotFoundError):
            service.update(uuid4(), {"price": 10})

    def test_delete_removes_comments_first(self):
        """delete supprime les commentaires puis l'offre."""
        manager = Mock()
        manager.offers.delete.return_value = True
        service = OfferService(manager.offers, manager.comments)
        offer_id = uuid4()

        assert service.delete(offer_id) is True

        assert [c[0] for c in manager.mock_calls] == [
            "comments.delete_by_offer",
            "offers.delete",
        ]

    def test_is_owner(self, sample_offer):
        """is_owner compare l'auteur."""
        offer_repo = Mock()
        offer_repo.get_by_id.return_value = sample_offer
        service = OfferService(offer_repo, Mock())

        assert service.is_owner(sample_offer.id, sample_offer.author_id)
        assert not service.is_owner(sample_offer.id, uuid4())

    def test_is_owner_missing_offer(self):
        """Offre absente: pas proprietaire."""
        offer_repo = Mock()
        offer_repo.get_by_id.return_value = None
        service = OfferService(offer_repo, Mock())

        assert not service.is_owner(uuid4(), uuid4())


class TestCommentService:
    """Tests pour CommentService."""

    def _service(self, count, average):
        comment_repo = Mock()
        comment_repo.save.side_effect = lambda c: c
        comment_repo.count_by_offer.return_value = count
        comment_repo.average_rating.return_value = average
        offer_service = Mock()
        return CommentService(comment_repo, offer_service), comment_repo, offer_service

    def test_create_recalculates_stats(self):
        """create persiste puis ecrit les stats recalculees."""
        # Arrange
        service, comment_repo, offer_service = self._service(3, 13 / 3)
        offer_id = uuid4()

        # Act
        comment = service.create("Great place to stay", 4, uuid4(), offer_id)

        # Assert
        assert comment.rating == 4
        comment_repo.save.assert_called_once()
        offer_service.update_stats.assert_called_once_with(offer_id, 3, 4.3)

    def test_create_invalid_comment_writes_nothing(self):
        """Commentaire invalide: ni sauvegarde ni stats."""
        service, comment_repo, offer_service = self._service(0, None)

        with pytest.raises(InvalidEntityError):
            service.create("bad", 9, uuid4(), uuid4())

        comment_repo.save.assert_not_called()
        offer_service.update_stats.assert_not_called()

    def test_recalculate_without_comments(self):
        """Sans commentaire, stats remises a zero."""
        service, _, offer_service = self._service(0, None)
        offer_id = uuid4()

        stats = service.recalculate_offer_stats(offer_id)

        assert stats.comment_count == 0
        assert stats.rating == 0.0
        offer_service.update_stats.assert_called_once_with(offer_id, 0, 0.0)

    def test_find_by_offer_id_default_limit(self):
        """find_by_offer_id limite a 50 par defaut."""
        service, comment_repo, _ = self._service(0, None)
        comment_repo.find_by_offer.return_value = []
        offer_id = uuid4()

        service.find_by_offer_id(offer_id)

        comment_repo.find_by_offer.assert_called_once_with(offer_id, 50)


class TestDocumentLookup:
    """Les services exposant exists() satisfont DocumentLookup."""

    def test_services_are_document_lookups(self):
        assert isinstance(OfferService(Mock(), Mock()), DocumentLookup)
        assert isinstance(UserService(Mock()), DocumentLookup)
        assert not isinstance(CommentService(Mock(), Mock()), DocumentLookup)
