# authserver/domain/services/secret_comparison.py

import hashlib
import hmac
from typing import Optional

from authserver.domain.interfaces import ISecretMatcher

# Stand-in compared against when the claimed client does not exist
_DUMMY_DIGEST = hashlib.sha256(b"unregistered-client-secret").digest()


class ConstantTimeSecretMatcher(ISecretMatcher):
    """
    Matcher for secrets stored in plain text.

    Both sides are reduced to SHA-256 digests before ``hmac.compare_digest``,
    so comparison time depends on neither the length nor the content of
    either secret.
    """

    def matches(self, claimed_secret: Optional[str], stored_secret: Optional[str]) -> bool:
        claimed_digest = hashlib.sha256((claimed_secret or "").encode("utf-8")).digest()
        stored_digest = hashlib.sha256((stored_secret or "").encode("utf-8")).digest()
        digests_equal = hmac.compare_digest(claimed_digest, stored_digest)
        return bool(claimed_secret) and bool(stored_secret) and digests_equal

    def dummy_match(self, claimed_secret: Optional[str]) -> bool:
        claimed_digest = hashlib.sha256((claimed_secret or "").encode("utf-8")).digest()
        hmac.compare_digest(claimed_digest, _DUMMY_DIGEST)
        return False
