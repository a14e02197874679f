# Standard library imports
import asyncio
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

# Local application imports
from ..constants import UserFields

EMAIL_PATTERN = re.compile(r".+@.+\..+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _trim(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    The plaintext password only ever lives in ``_pending_password``: it is set
    through set_password(), excluded from repr/equality, never part of the
    stored document, and cleared once its hash has been computed.
    """
    id: Optional[str]
    email: str
    name: str
    hashed_password: str = ""
    about: Optional[str] = None
    photo: Optional[bytes] = None
    photo_content_type: Optional[str] = None
    created: datetime = field(default_factory=_utcnow)
    updated: Optional[datetime] = None
    following: List[str] = field(default_factory=list)
    followers: List[str] = field(default_factory=list)

    _pending_password: str = field(default="", init=False, repr=False, compare=False)
    _persist_lock: asyncio.Lock = field(
        default_factory=asyncio.Lock, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Trim string fields the way the stored schema does"""
        self.email = _trim(self.email) or ""
        self.name = _trim(self.name) or ""
        self.about = _trim(self.about)

    @property
    def is_new(self) -> bool:
        """True until the record has been written once"""
        return self.id is None

    @property
    def has_pending_password(self) -> bool:
        return bool(self._pending_password)

    @property
    def pending_password(self) -> str:
        """Plaintext waiting to be hashed (empty when none)"""
        return self._pending_password

    @property
    def persist_lock(self) -> asyncio.Lock:
        """Serializes persist operations on this record instance"""
        return self._persist_lock

    def set_password(self, plain_password: str) -> None:
        """
        Stage a new plaintext password.

        None stages nothing; other non-string values are stored as str().

        Nothing is validated or hashed here; both happen right before the
        record is written.
        """
        if plain_password is None:
            plain_password = ""
        elif not isinstance(plain_password, str):
            plain_password = str(plain_password)
        self._pending_password = plain_password

    def store_hash(self, hashed_password: str, hashed_from: str) -> None:
        """
        Replace the stored hash and clear the pending plaintext.

        The pending plaintext is only cleared when it is still the value the
        hash was computed from; a newer set_password() stays pending.
        """
        self.hashed_password = hashed_password
        if self._pending_password == hashed_from:
            self._pending_password = ""

    def set_photo(self, data: Optional[bytes], content_type: Optional[str]) -> None:
        self.photo = data
        self.photo_content_type = content_type if data else None

    def validate_fields(self, name_max_length: int) -> Dict[str, str]:
        """
        Business validations for profile fields

        Args:
            name_max_length: Maximum allowed length of the trimmed name

        Returns:
            Mapping of field name to error message (empty when valid)
        """
        errors: Dict[str, str] = {}

        if not self.email:
            errors[UserFields.EMAIL] = "Email is required"
        elif not EMAIL_PATTERN.search(self.email):
            errors[UserFields.EMAIL] = "Please fill a valid email address"

        if not self.name:
            errors[UserFields.NAME] = "Name is required"
        elif len(self.name) > name_max_length:
            errors[UserFields.NAME] = f"Name length cannot exceed {name_max_length}"

        # New records are covered by the password rules instead
        if not self.is_new and not self.hashed_password and not self.has_pending_password:
            errors[UserFields.HASHED_PASSWORD] = "Password is required"

        return errors

    def is_following(self, user_id: str) -> bool:
        return user_id in self.following
