"""Tests for the requests-based API client.

The client is pointed at the in-process app by handing it a
``TestClient`` as its session; both expose the same ``request``
signature.
"""

import pytest
import requests

from quote_keeper_client import QuoteKeeperAPI

from .conftest import make_token


@pytest.fixture
def api_for(client):
    def _api(principal=None):
        return QuoteKeeperAPI(
            base_url="http://testserver",
            api_key=make_token(principal) if principal else None,
            session=client,
        )

    return _api


class TestQuoteKeeperAPI:
    def test_full_flow(self, api_for):
        alice = api_for("alice")

        author, error = alice.create_author("Seneca", 4)
        assert error is None
        collector, error = alice.register_collector("alice")
        assert error is None
        quote, error = alice.upload_quote("Omnia aliena sunt", author["id"], collector["id"])
        assert error is None

        assert alice.my_quotes() == ([quote], None)
        assert alice.quotes_by_author_name("SENECA") == ([quote], None)
        assert alice.quotes_by_collector_id(collector["id"]) == ([quote], None)
        assert alice.total_quote_count() == (1, None)
        assert alice.unique_author_names() == (["Seneca"], None)

        updated, error = alice.update_quote(quote["id"], content="Tempus")
        assert error is None
        assert updated["content"] == "Tempus"

        confirmation, error = alice.delete_quote(quote["id"])
        assert error is None
        assert confirmation["detail"] == "Quote deleted successfully."

    def test_errors_are_returned_not_raised(self, api_for):
        alice, bob = api_for("alice"), api_for("bob")
        author, _ = alice.create_author("Kant", 1724)

        data, error = bob.update_author(author["id"], name="Hijacked")
        assert data is None
        assert error["status_code"] == 403
        assert "not authorized" in error["message"]

        data, error = alice.get_quote("nope")
        assert data is None
        assert error["status_code"] == 404

        _, error = alice.oldest_and_newest_quotes()
        assert error["status_code"] == 409

    def test_anonymous_write_is_rejected(self, api_for):
        data, error = api_for().create_author("Seneca", 4)

        assert data is None
        assert error["status_code"] == 401

    def test_transport_failure(self, monkeypatch):
        session = requests.Session()

        def fail(*args, **kwargs):
            raise requests.ConnectionError("refused")

        monkeypatch.setattr(session, "request", fail)
        api = QuoteKeeperAPI(base_url="http://localhost:1", session=session)

        data, error = api.list_quotes()

        assert data is None
        assert error == {"status_code": None, "message": "refused"}
