"""Authorization checks used by the use cases.

Ownership is answered by the repositories with a dedicated query; the admin
flag only ever comes from the authenticated user.
"""

from geothing.core.errors import AdminRequiredError
from geothing.core.schemas import AuthenticatedUser


def require_admin(user: AuthenticatedUser) -> None:
    """Raise AdminRequiredError unless the user carries the admin flag."""
    if not user.is_admin:
        raise AdminRequiredError()
