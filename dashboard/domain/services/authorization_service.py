# dashboard/domain/services/authorization_service.py

from typing import Any

from dashboard.domain.exceptions import PermissionDeniedException


class OwnershipPolicy:
    """
    Domain service for ownership-based authorization.

    Only the identity that created a resource may update or delete it.
    Reads are not owner-restricted.
    """

    @staticmethod
    def can_mutate(owner_id: Any, caller_id: Any) -> bool:
        """
        Decide whether the caller may mutate a resource owned by owner_id.

        Ids are compared by their string form so UUID objects and their
        textual representation are treated alike.
        """
        if owner_id is None or caller_id is None:
            return False
        return str(owner_id) == str(caller_id)

    @classmethod
    def ensure_can_mutate(cls, owner_id: Any, caller_id: Any, action: str, resource_name: str) -> None:
        """
        Raise PermissionDeniedException unless the caller owns the resource.

        Args:
            owner_id: Id stored in the resource's created_by field
            caller_id: Id of the authenticated identity
            action: Verb used in the error message ("update", "delete")
            resource_name: Human-readable resource name ("announcement")
        """
        if not cls.can_mutate(owner_id, caller_id):
            raise PermissionDeniedException(
                detail=f"You are not authorized to {action} this {resource_name}"
            )


can_mutate = OwnershipPolicy.can_mutate
