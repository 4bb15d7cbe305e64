# growth-tracker/growth_tracker/core/permissions.py
# Role capability sets. Roles arrive as passed-in trust; nothing here authenticates.
from growth_tracker.db.models import UserRole

# Roles allowed to manage people and approve goals
APPROVER_ROLES = frozenset({
    UserRole.MANAGER.value,
    UserRole.HR_ADMIN.value,
    UserRole.SYSTEM_ADMIN.value,
})

# Roles that may act on any goal regardless of reporting lines
ADMIN_ROLES = frozenset({
    UserRole.HR_ADMIN.value,
    UserRole.SYSTEM_ADMIN.value,
})


def _role_of(user) -> str:
    role = user.role
    return role.value if isinstance(role, UserRole) else role


def can_manage(user) -> bool:
    return _role_of(user) in APPROVER_ROLES


def is_admin(user) -> bool:
    return _role_of(user) in ADMIN_ROLES
