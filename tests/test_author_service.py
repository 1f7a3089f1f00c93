"""Tests for author creation, merge updates and deletion."""

import pytest

from quote_keeper_api.app.core.errors import NotFoundError, UnauthorizedError, ValidationError
from quote_keeper_api.app.schemas.author import AuthorCreate, AuthorUpdate
from quote_keeper_api.app.schemas.quote import QuoteCreate
from quote_keeper_api.app.services.author_service import merge_author


class TestCreateAuthor:
    def test_create_then_get_returns_payload_plus_identity_fields(
        self, author_service, query_service, alice
    ):
        author = author_service.create_author(AuthorCreate(name="Seneca", birth_year=4), alice)

        stored = query_service.get_author(author.id)
        assert stored == author
        assert stored.name == "Seneca"
        assert stored.birth_year == 4
        assert stored.id
        assert stored.created_at == 1_000
        assert stored.updated_at is None
        assert stored.creator == alice

    def test_each_author_gets_a_fresh_id(self, author_service, alice):
        first = author_service.create_author(AuthorCreate(name="Plato", birth_year=428), alice)
        second = author_service.create_author(AuthorCreate(name="Plato", birth_year=428), alice)

        assert first.id != second.id

    @pytest.mark.parametrize(
        "name, birth_year",
        [("", 4), ("   ", 4), ("Seneca", 0), ("Seneca", -4)],
    )
    def test_invalid_payload_is_rejected_without_writing(
        self, author_service, query_service, alice, name, birth_year
    ):
        with pytest.raises(ValidationError):
            author_service.create_author(AuthorCreate(name=name, birth_year=birth_year), alice)

        assert query_service.list_authors() == []


class TestUpdateAuthor:
    @pytest.fixture
    def author(self, author_service, alice):
        return author_service.create_author(AuthorCreate(name="Seneca", birth_year=4), alice)

    def test_partial_update_keeps_unspecified_fields(self, author_service, author, alice):
        updated = author_service.update_author(author.id, AuthorUpdate(name="Lucius Seneca"), alice)

        assert updated.name == "Lucius Seneca"
        assert updated.birth_year == 4
        assert updated.id == author.id
        assert updated.created_at == author.created_at
        assert updated.creator == alice
        assert updated.updated_at is not None
        assert updated.updated_at > author.created_at

    def test_update_is_persisted(self, author_service, query_service, author, alice):
        author_service.update_author(author.id, AuthorUpdate(birth_year=5), alice)

        assert query_service.get_author(author.id).birth_year == 5

    def test_missing_author(self, author_service, alice):
        with pytest.raises(NotFoundError):
            author_service.update_author("nope", AuthorUpdate(name="X"), alice)

    def test_other_principal_is_refused(self, author_service, query_service, author, bob):
        with pytest.raises(UnauthorizedError):
            author_service.update_author(author.id, AuthorUpdate(name="Hacked"), bob)

        assert query_service.get_author(author.id) == author

    def test_provided_fields_are_still_validated(self, author_service, query_service, author, alice):
        with pytest.raises(ValidationError):
            author_service.update_author(author.id, AuthorUpdate(birth_year=0), alice)

        assert query_service.get_author(author.id) == author


class TestDeleteAuthor:
    def test_creator_can_delete(self, author_service, query_service, alice):
        author = author_service.create_author(AuthorCreate(name="Kant", birth_year=1724), alice)

        message = author_service.delete_author(author.id, alice)

        assert message == "Author deleted successfully."
        with pytest.raises(NotFoundError):
            query_service.get_author(author.id)

    def test_deleting_nonexistent_author_is_not_a_silent_noop(self, author_service, alice):
        with pytest.raises(NotFoundError):
            author_service.delete_author("nope", alice)

    def test_other_principal_is_refused(self, author_service, query_service, alice, bob):
        author = author_service.create_author(AuthorCreate(name="Kant", birth_year=1724), alice)

        with pytest.raises(UnauthorizedError):
            author_service.delete_author(author.id, bob)

        assert query_service.get_author(author.id) == author

    def test_quotes_of_deleted_author_are_left_dangling(
        self, author_service, quote_service, query_service, alice
    ):
        author = author_service.create_author(AuthorCreate(name="Kant", birth_year=1724), alice)
        quote = quote_service.upload_quote(
            QuoteCreate(content="Sapere aude.", author_id=author.id, collector_id="c-1"), alice
        )

        author_service.delete_author(author.id, alice)

        assert query_service.get_quote(quote.id).author_id == author.id
        assert query_service.quotes_by_author_id(author.id) == [quote]


class TestMergeAuthor:
    def test_returns_new_record_and_leaves_original_untouched(self, author_service, alice):
        author = author_service.create_author(AuthorCreate(name="Seneca", birth_year=4), alice)

        merged = merge_author(author, {"name": "Other"}, now=99_999)

        assert merged is not author
        assert author.name == "Seneca"
        assert author.updated_at is None
        assert merged.name == "Other"
        assert merged.updated_at == 99_999

    def test_immutable_fields_are_ignored(self, author_service, alice, bob):
        author = author_service.create_author(AuthorCreate(name="Seneca", birth_year=4), alice)

        merged = merge_author(
            author, {"id": "forged", "created_at": 0, "creator": bob}, now=5_000
        )

        assert merged.id == author.id
        assert merged.created_at == author.created_at
        assert merged.creator == alice
