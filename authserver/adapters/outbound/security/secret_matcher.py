# authserver/adapters/outbound/security/secret_matcher.py

import logging
from typing import List, Optional

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

from authserver.application.ports.outbound import ISecretMatcher

logger = logging.getLogger(__name__)


class HashedSecretMatcher(ISecretMatcher):
    """
    Matcher for client secrets stored as passlib hashes.

    Hashing backend failures propagate; only a stored value passlib cannot
    identify counts as a mismatch.
    """

    def __init__(self, schemes: Optional[List[str]] = None):
        self.crypt_context = CryptContext(schemes=schemes or ["bcrypt"], deprecated="auto")

    def hash_secret(self, secret: str) -> str:
        """
        Generate secure secret hash for storage in the client directory.
        """
        return self.crypt_context.hash(secret)

    def matches(self, claimed_secret: Optional[str], stored_secret: Optional[str]) -> bool:
        """
        Compare plain text secret with stored hash.
        """
        if not stored_secret:
            return self.dummy_match(claimed_secret)
        try:
            # An empty claim is still verified so it costs the same as a wrong one
            verified = self.crypt_context.verify(claimed_secret or "", stored_secret)
        except UnknownHashError:
            logger.warning("Stored client secret is not a recognized hash")
            return False
        return bool(claimed_secret) and verified

    def dummy_match(self, claimed_secret: Optional[str]) -> bool:
        """
        Hash the claimed secret with the default scheme and discard the result.
        """
        self.crypt_context.dummy_verify()
        return False
