import pytest

from authserver.adapters.configuration.config import Settings
from authserver.adapters.outbound.directory.in_memory_client_directory import InMemoryClientDirectory
from authserver.adapters.outbound.security.secret_matcher import HashedSecretMatcher
from authserver.domain.models.authentication import (
    Authenticated,
    ClientSecretAuthenticationRequest,
    Rejected,
)
from authserver.domain.models.registered_client import RegisteredClient
from authserver.domain.services.client_authenticator import ClientAuthenticator
from authserver.domain.services.secret_comparison import ConstantTimeSecretMatcher
from authserver.main import build_client_authentication_service


@pytest.fixture
def hashed_matcher():
    return HashedSecretMatcher(schemes=["pbkdf2_sha256"])


@pytest.mark.parametrize(
    "claimed, stored, expected",
    [
        ("secret", "secret", True),
        ("secret", "secret-invalid", False),
        ("secret-invalid", "secret", False),
        ("", "secret", False),
        (None, "secret", False),
        ("secret", "", False),
        ("secret", None, False),
        ("", "", False),
        (None, None, False),
        ("sécret", "sécret", True),
    ],
)
def test_constant_time_matcher(claimed, stored, expected):
    assert ConstantTimeSecretMatcher().matches(claimed, stored) is expected


def test_hashed_matcher_verifies_hash(hashed_matcher):
    stored = hashed_matcher.hash_secret("secret")

    assert stored != "secret"
    assert hashed_matcher.matches("secret", stored)
    assert not hashed_matcher.matches("secret-invalid", stored)


def test_hashed_matcher_rejects_absent_values(hashed_matcher):
    stored = hashed_matcher.hash_secret("secret")

    assert not hashed_matcher.matches(None, stored)
    assert not hashed_matcher.matches("", stored)
    assert not hashed_matcher.matches("secret", None)


def test_hashed_matcher_treats_unrecognized_hash_as_mismatch(hashed_matcher, caplog):
    assert not hashed_matcher.matches("secret", "secret")
    assert "not a recognized hash" in caplog.text


def test_authenticator_with_hashed_secrets(hashed_matcher):
    client = RegisteredClient(
        id="registration-1",
        client_id="web-client",
        client_secret=hashed_matcher.hash_secret("secret"),
    )
    authenticator = ClientAuthenticator(InMemoryClientDirectory(client), hashed_matcher)

    result = authenticator.authenticate(ClientSecretAuthenticationRequest("web-client", "secret"))
    assert isinstance(result, Authenticated)
    assert result.principal == "web-client"

    result = authenticator.authenticate(ClientSecretAuthenticationRequest("web-client", "secret-invalid"))
    assert isinstance(result, Rejected)


# =============================================================================
# Default schemes
# =============================================================================

def test_default_hashed_matcher_uses_bcrypt():
    matcher = HashedSecretMatcher()
    stored = matcher.hash_secret("secret")

    assert stored.startswith("$2b$")
    assert matcher.matches("secret", stored)
    assert not matcher.matches("secret-invalid", stored)


def test_default_settings_schemes_verify_bcrypt_hash():
    settings = Settings(_env_file=None, CLIENT_SECRET_ENCODING="hashed")
    matcher = HashedSecretMatcher(schemes=settings.SECRET_HASH_SCHEMES)
    stored = HashedSecretMatcher(schemes=["bcrypt"]).hash_secret("secret")
    client = RegisteredClient(id="registration-1", client_id="web-client", client_secret=stored)

    service = build_client_authentication_service(InMemoryClientDirectory(client), settings)

    result = service.authenticate(ClientSecretAuthenticationRequest("web-client", "secret"))
    assert isinstance(result, Authenticated)
    assert result.principal == "web-client"
    assert matcher.matches("secret", stored)


# =============================================================================
# Dummy comparisons and backend errors
# =============================================================================

def test_dummy_match_never_matches(hashed_matcher):
    assert ConstantTimeSecretMatcher().dummy_match("secret") is False
    assert ConstantTimeSecretMatcher().dummy_match(None) is False
    assert hashed_matcher.dummy_match("secret") is False


def test_hashed_matcher_runs_dummy_verify_when_nothing_is_stored(hashed_matcher, monkeypatch):
    calls = []
    monkeypatch.setattr(hashed_matcher.crypt_context, "dummy_verify", lambda *args: calls.append(args))

    assert not hashed_matcher.matches("secret", None)
    assert len(calls) == 1


def test_unknown_client_runs_dummy_verify_with_hashed_matcher(hashed_matcher, monkeypatch):
    calls = []
    monkeypatch.setattr(hashed_matcher.crypt_context, "dummy_verify", lambda *args: calls.append(args))
    client = RegisteredClient(
        id="registration-1",
        client_id="web-client",
        client_secret=hashed_matcher.hash_secret("secret"),
    )
    authenticator = ClientAuthenticator(InMemoryClientDirectory(client), hashed_matcher)

    assert authenticator.authenticate(ClientSecretAuthenticationRequest("nobody", "secret")) == Rejected()
    assert len(calls) == 1


def test_hashing_backend_errors_propagate(hashed_matcher, monkeypatch):
    stored = hashed_matcher.hash_secret("secret")

    def broken_verify(secret, hash):
        raise ValueError("password cannot be longer than 72 bytes")

    monkeypatch.setattr(hashed_matcher.crypt_context, "verify", broken_verify)

    with pytest.raises(ValueError, match="72 bytes"):
        hashed_matcher.matches("secret", stored)
