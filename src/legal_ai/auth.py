"""
Auth module: signed-in identity kept in a local session file.

Only presence of an identity matters to the rest of the SDK: it is the gate
for document generation.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from legal_ai.errors import AuthError
from legal_ai.models.identity import Identity

logger = logging.getLogger(__name__)


class Auth:
    def __init__(self, session_file: Optional[Path] = None):
        self._session_file = session_file
        self._identity: Optional[Identity] = None
        self._loaded = False

    def login(self, email: str, phone: Optional[str] = None) -> Identity:
        """Sign in. Persists the identity so it survives restarts."""
        email = (email or "").strip()
        if not email or "@" not in email:
            raise AuthError("Please enter a valid email address", code="invalid_email")
        identity = Identity(email=email, phone=phone or None)
        self._identity = identity
        self._loaded = True
        if self._session_file:
            self._session_file.parent.mkdir(parents=True, exist_ok=True)
            self._session_file.write_text(identity.model_dump_json())
        logger.info("Signed in as %s", email)
        return identity

    def logout(self) -> None:
        self._identity = None
        self._loaded = True
        if self._session_file:
            self._session_file.unlink(missing_ok=True)

    def current_identity(self) -> Optional[Identity]:
        if not self._loaded:
            self._identity = self._load()
            self._loaded = True
        return self._identity

    def require_identity(self) -> Identity:
        identity = self.current_identity()
        if identity is None:
            raise AuthError("Sign in to generate documents", code="not_authenticated")
        return identity

    def _load(self) -> Optional[Identity]:
        if not self._session_file:
            return None
        try:
            return Identity.model_validate(json.loads(self._session_file.read_text()))
        except FileNotFoundError:
            return None
        except ValueError:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            logger.warning("Discarding unreadable session file %s", self._session_file)
            self._session_file.unlink(missing_ok=True)
            return None
