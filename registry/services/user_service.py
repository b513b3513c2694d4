from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from registry.errors import ConflictError, MalformedInputError, ValidationError
from registry.models.schemas import User
from registry.observability.metrics import get_metrics
from registry.services.user_store import UserStore

logger = logging.getLogger(__name__)


def decode_candidate(body: bytes) -> User:
    """Parse a raw request body into a candidate ``User``.

    Missing fields decode to empty strings and are left for ``create_user`` to reject.
    """
    try:
        return User.model_validate_json(body or b"")
    except PydanticValidationError as exc:
        get_metrics().observe_user_rejected()
        raise MalformedInputError("invalid request body", cause=exc) from exc


class UserRegistryService:
    def __init__(self, store: UserStore | None = None) -> None:
        self.store = store if store is not None else UserStore()

    def list_users(self) -> list[User]:
        return self.store.snapshot()

    def create_user(self, candidate: User) -> User:
        try:
            if not candidate.first_name:
                raise ValidationError("first name is required")
            if not candidate.last_name:
                raise ValidationError("last name is required")
            if not self.store.add_if_absent(candidate):
                raise ConflictError("user already exists")
        except (ValidationError, ConflictError):
            get_metrics().observe_user_rejected()
            raise

        get_metrics().observe_user_created()
        logger.info("users.created", extra={"first_name": candidate.first_name, "last_name": candidate.last_name})
        return candidate
