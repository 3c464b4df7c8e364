# SPDX-License-Identifier: BSL-1.1
# Copyright (c) 2026 MuVeraAI Corporation
from __future__ import annotations


class AumOSReputationError(Exception):
    """Base class for all aumos-reputation SDK errors."""

    def __init__(self, message: str, code: str = "REPUTATION_ERROR") -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class UnauthorizedError(AumOSReputationError):
    """
    Raised when a privileged operation is requested by a non-administrator.

    Attributes:
        requester: The identity that made the request.
        administrator: The identity allowed to perform the operation.
    """

    def __init__(self, requester: str, administrator: str) -> None:
        super().__init__(
            f"'{requester}' is not authorized to perform this operation; "
            f"only the administrator '{administrator}' may.",
            code="UNAUTHORIZED",
        )
        self.requester = requester
        self.administrator = administrator


class NotFoundError(AumOSReputationError):
    """Raised when a referenced category or reputation record does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="NOT_FOUND")


class CategoryNotFoundError(NotFoundError):
    """Raised when an attestation references an unregistered category."""

    def __init__(self, category_id: int) -> None:
        super().__init__(
            f"Category {category_id} does not exist. "
            "Categories are created by the administrator with add_category()."
        )
        self.category_id = category_id


class ReputationNotFoundError(NotFoundError):
    """Raised when a user has no reputation record."""

    def __init__(self, user: str) -> None:
        super().__init__(f"No reputation record exists for '{user}'.")
        self.user = user


class CooldownActiveError(AumOSReputationError):
    """
    Raised when a sender attests to the same target again too soon.

    Attributes:
        sender: The attesting identity.
        target: The identity being attested to.
        prior_timestamp: Timestamp of the sender's previous attestation.
        available_after: Earliest timestamp at which a new attestation
            from ``sender`` to ``target`` is accepted.
    """

    def __init__(
        self,
        sender: str,
        target: str,
        prior_timestamp: int,
        available_after: int,
    ) -> None:
        super().__init__(
            f"'{sender}' attested to '{target}' at {prior_timestamp}; "
            f"the next attestation is accepted from {available_after}.",
            code="COOLDOWN_ACTIVE",
        )
        self.sender = sender
        self.target = target
        self.prior_timestamp = prior_timestamp
        self.available_after = available_after


class SelfAttestationError(AumOSReputationError):
    """Raised when an identity attempts to attest to itself."""

    def __init__(self, identity: str) -> None:
        super().__init__(
            f"'{identity}' cannot make an attestation about itself.",
            code="SELF_ATTESTATION",
        )
        self.identity = identity
