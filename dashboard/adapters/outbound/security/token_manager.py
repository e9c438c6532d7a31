# dashboard/adapters/outbound/security/token_manager.py

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
from uuid import UUID

from jose import jwt, JWTError

from dashboard.adapters.configuration.config import Settings
from dashboard.domain.exceptions import InvalidTokenException, ExpiredTokenException
from dashboard.domain.models.identity_domain_model import IssuedToken, TokenClaims

logger = logging.getLogger(__name__)

TOKEN_TYPE = "access"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """
    JWT issuer and verifier for user access tokens.

    Each token binds the subject id, a unique token id (jti), the issue time
    and the expiry time under the server secret. Tokens are stateless;
    revocation is checked separately against the token blacklist.
    """

    def __init__(self, settings: Settings, clock: Callable[[], datetime] = utc_now):
        self._secret_key = settings.SECRET_KEY
        self._algorithm = settings.ALGORITHM
        self.default_ttl = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        self._clock = clock

    def _now(self) -> datetime:
        # JWT times are whole seconds
        return self._clock().replace(microsecond=0)

    def issue(self, subject_id: UUID, ttl: Optional[timedelta] = None) -> IssuedToken:
        """
        Create a signed access token for the given subject.

        - subject_id: the identity's UUID.
        - ttl: custom lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES.
        """
        if ttl is None:
            ttl = self.default_ttl

        issued_at = self._now()
        expires_at = issued_at + ttl
        jti = str(uuid.uuid4())

        payload = {
            "sub": str(subject_id),
            "jti": jti,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "type": TOKEN_TYPE,
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return IssuedToken(token=token, token_id=jti, issued_at=issued_at, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify the signature and expiry of an access token.

        Raises:
            InvalidTokenException: bad signature, malformed token or claims
            ExpiredTokenException: the current time is at or past ``exp``
        """
        if not token or not isinstance(token, str):
            raise InvalidTokenException()

        try:
            # expiry is checked below against the injected clock
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_iat": False},
            )
        except JWTError as e:
            logger.debug(f"Token rejected during decode: {type(e).__name__}: {e}")
            raise InvalidTokenException()

        if payload.get("type") != TOKEN_TYPE:
            logger.debug("Token rejected: unexpected type claim")
            raise InvalidTokenException()

        try:
            subject_id = UUID(str(payload["sub"]))
            token_id = str(payload["jti"])
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (KeyError, TypeError, ValueError) as e:
            logger.debug(f"Token rejected: malformed claims ({type(e).__name__})")
            raise InvalidTokenException()

        if self._now() >= expires_at:
            raise ExpiredTokenException()

        return TokenClaims(
            subject_id=subject_id,
            token_id=token_id,
            issued_at=issued_at,
            expires_at=expires_at,
        )
