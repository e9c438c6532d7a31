# dashboard/shared/utils/input_validation.py

import re
from typing import Optional, Tuple


class InputValidator:
    """
    Validation rules that complement the Pydantic field types.
    """

    # Limits
    MAX_NAME_LENGTH = 100
    MAX_PASSWORD_BYTES = 72  # bcrypt only hashes the first 72 bytes
    MAX_EMAIL_LENGTH = 255

    # Top-level domains accepted for sign-up and sign-in emails
    ALLOWED_EMAIL_TLDS = ("com", "net", "org", "edu")
    MIN_DOMAIN_SEGMENTS = 2
    MAX_DOMAIN_SEGMENTS = 3

    # Potentially dangerous characters in free-form names
    DANGEROUS_CHARS = re.compile(r'[<>{}\[\]]')

    @classmethod
    def validate_name(cls, name: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a display name.

        Returns:
            Tuple (valid, error_message)
        """
        if not name or not name.strip():
            return False, "Username must not be empty"

        if len(name) > cls.MAX_NAME_LENGTH:
            return False, f"Username is too long (maximum {cls.MAX_NAME_LENGTH} characters)"

        if cls.DANGEROUS_CHARS.search(name):
            return False, "Username contains characters that are not allowed"

        return True, None

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a password before it is hashed.

        Returns:
            Tuple (valid, error_message)
        """
        if not password:
            return False, "Password must not be empty"

        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
            return False, f"Password is too long (maximum {cls.MAX_PASSWORD_BYTES} bytes)"

        return True, None

    @classmethod
    def validate_email(cls, email: str) -> Tuple[bool, Optional[str]]:
        """
        Check the domain part of an already syntax-checked email.

        The domain must have two or three labels and end in one of the
        allowed top-level domains.

        Returns:
            Tuple (valid, error_message)
        """
        if len(email) > cls.MAX_EMAIL_LENGTH:
            return False, f"Email is too long (maximum {cls.MAX_EMAIL_LENGTH} characters)"

        domain = email.rsplit("@", 1)[-1]
        segments = domain.split(".")
        if not cls.MIN_DOMAIN_SEGMENTS <= len(segments) <= cls.MAX_DOMAIN_SEGMENTS:
            return False, "Email must be valid"

        if segments[-1].lower() not in cls.ALLOWED_EMAIL_TLDS:
            return False, "Email must be valid"

        return True, None
