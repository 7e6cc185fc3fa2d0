"""Principals — the configured credential set and HTTP Basic header parsing.

Invariants:
    - Password checks use secrets.compare_digest (constant time per candidate)
    - Unknown usernames still cost one comparison (no username enumeration by timing)
    - A malformed Authorization header is treated exactly like a missing one

Design Decisions:
    - Plain-text passwords held in memory: principals come from environment
      settings, there is no user table to hash against
    - Generated password when none is configured: the service never starts
      with a guessable default secret; main.py logs it once at startup
"""

import base64
import secrets
from dataclasses import dataclass, field

GENERATED_PASSWORD_BYTES = 18


@dataclass(frozen=True)
class PrincipalSet:
    """Username -> password map checked on every request."""
    credentials: dict[str, str] = field(default_factory=dict)
    generated_password: str | None = None

    def authenticate(self, username: str, password: str) -> bool:
        expected = self.credentials.get(username)
        candidate = password.encode("utf-8")
        if expected is None:
            secrets.compare_digest(candidate, candidate)
            return False
        return secrets.compare_digest(candidate, expected.encode("utf-8"))


def build_principals(
    username: str,
    password: str | None,
    extra_users: dict[str, str] | None = None,
) -> PrincipalSet:
    """Merge the primary principal with extra users; generate a password if unset."""
    generated = None
    if not password:
        generated = secrets.token_urlsafe(GENERATED_PASSWORD_BYTES)
        password = generated
    credentials = dict(extra_users or {})
    credentials[username] = password
    return PrincipalSet(credentials=credentials, generated_password=generated)


def parse_basic_authorization(header: str | None) -> tuple[str, str] | None:
    """Decode `Basic base64(user:pass)` into (user, pass), or None if unusable."""
    if not header:
        return None
    scheme, _, encoded = header.strip().partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        return None
    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except ValueError:  # non-ASCII input, bad padding, non-UTF-8 payload
        return None
    username, sep, password = decoded.partition(":")
    if not sep or not username:
        return None
    return username, password
