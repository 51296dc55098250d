"""Tests for the admin guard."""

import pytest

from geothing.core.authorization import require_admin
from geothing.core.errors import AdminRequiredError


def test_admin_passes(admin_user):
    require_admin(admin_user)


def test_regular_user_is_refused(owner_user):
    with pytest.raises(AdminRequiredError):
        require_admin(owner_user)
