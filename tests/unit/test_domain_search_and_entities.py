"""Unit tests for provider search, the Provider/Connection entities and enums."""

from datetime import UTC, datetime

import pytest

from gamelink.core.enums import ErrorCode
from gamelink.domain.entities import Connection, Provider
from gamelink.domain.enums import AuthKind
from gamelink.domain.search import search_providers
from tests.conftest import create_connection, create_provider

CATALOG = [
    create_provider("destiny-2", "Destiny 2", vendor="bungie"),
    create_provider("path-of-exile", "Path of Exile", vendor="ggg"),
    create_provider("lol", "League of Legends", vendor="riot", slug="league-of-legends"),
]


@pytest.mark.unit
class TestSearchProviders:
    """Test search_providers()."""

    def test_blank_query_returns_everything_in_order(self):
        assert search_providers(CATALOG, "   ") == CATALOG

    def test_matches_display_name_case_insensitive(self):
        result = search_providers(CATALOG, "DESTINY")

        assert [p.id for p in result] == ["destiny-2"]

    def test_matches_vendor(self):
        result = search_providers(CATALOG, "riot")

        assert [p.id for p in result] == ["lol"]

    def test_matches_slug(self):
        result = search_providers(CATALOG, "league-of")

        assert [p.id for p in result] == ["lol"]

    def test_preserves_input_order(self):
        """Test "e" matches several providers in catalog order."""
        result = search_providers(CATALOG, "e")

        assert [p.id for p in result] == ["destiny-2", "path-of-exile", "lol"]

    def test_no_match(self):
        assert search_providers(CATALOG, "halo") == []


@pytest.mark.unit
class TestProviderEntity:
    """Test Provider validation and helpers."""

    def test_route_slug_defaults_to_id(self):
        assert create_provider().route_slug == "destiny-2"
        assert create_provider(slug="d2").route_slug == "d2"

    @pytest.mark.parametrize("bad_id", ["", "   ", "destiny 2"])
    def test_invalid_id_rejected(self, bad_id):
        with pytest.raises(ValueError):
            Provider(
                id=bad_id,
                display_name="Destiny 2",
                auth_kind=AuthKind.OAUTH,
                requires_authorization=True,
            )

    def test_empty_display_name_rejected(self):
        with pytest.raises(ValueError, match="display name"):
            Provider(
                id="destiny-2",
                display_name="",
                auth_kind=AuthKind.OAUTH,
                requires_authorization=True,
            )


@pytest.mark.unit
class TestConnectionEntity:
    """Test Connection validation and matching."""

    def test_matches_canonical_on_account_or_provider_reference(self):
        by_account = create_connection("bungie", canonical_account_id="acct-1")
        by_provider = create_connection("game-uuid")

        assert by_account.matches_canonical("acct-1") is True
        assert by_provider.matches_canonical("game-uuid") is True
        assert by_account.matches_canonical("other") is False

    def test_empty_ids_rejected(self):
        with pytest.raises(ValueError):
            Connection(
                connection_id="",
                provider_id="destiny-2",
                canonical_account_id=None,
                is_active=True,
                connected_at=datetime(2025, 1, 1, tzinfo=UTC),
            )


@pytest.mark.unit
class TestAuthKind:
    """Test AuthKind.from_connection_type()."""

    def test_api_maps_to_oauth(self):
        assert AuthKind.from_connection_type("api") == AuthKind.OAUTH

    def test_known_values_pass_through(self):
        assert AuthKind.from_connection_type("Preference") == AuthKind.PREFERENCE
        assert AuthKind.from_connection_type("manual") == AuthKind.MANUAL

    def test_unknown_uses_oauth_flag(self):
        assert AuthKind.from_connection_type("weird", requires_oauth=True) == AuthKind.OAUTH
        assert AuthKind.from_connection_type(None) == AuthKind.MANUAL

    def test_values(self):
        assert AuthKind.values() == ["oauth", "preference", "manual"]


@pytest.mark.unit
class TestErrorCode:
    """Test the ErrorCode catalog."""

    def test_codes_cover_catalog_backend_and_link_errors_only(self):
        assert {code.value for code in ErrorCode} == {
            "provider_not_found",
            "backend_unavailable",
            "backend_authentication_failed",
            "backend_invalid_response",
            "link_initiation_failed",
            "link_refresh_failed",
            "link_timed_out",
        }
