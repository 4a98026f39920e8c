"""Page access policy.

Both the edge middleware in ``main.py`` and the page dependency in
``routes/deps.py`` ask ``is_allowed`` for their decision, so the two layers
always agree for a given (path, role) pair.
"""
from typing import Dict, FrozenSet, Optional
from urllib.parse import urlencode

LOGIN_PATH = "/"

OWNER_ONLY = frozenset({"owner"})
STAFF = frozenset({"owner", "therapist", "manager"})

ROUTE_ACCESS: Dict[str, FrozenSet[str]] = {
    "/dashboard": OWNER_ONLY,
    "/users": OWNER_ONLY,
    "/services": OWNER_ONLY,
    "/hours": OWNER_ONLY,
    "/test-data": OWNER_ONLY,
    "/pos": STAFF,
    "/reports": STAFF,
    "/customers": STAFF,
    "/consultation-form": STAFF,
    "/welcome": STAFF,
}


def route_key(path: str) -> str:
    """'/consultation-form/CU123' -> '/consultation-form'"""
    first = path.split("?", 1)[0].strip("/").split("/", 1)[0]
    return f"/{first}"


def is_protected_page(path: str) -> bool:
    return route_key(path) in ROUTE_ACCESS


def is_allowed(path: str, role: Optional[str]) -> bool:
    """Whether a signed-in user with ``role`` may view ``path``.

    Paths without an entry in ROUTE_ACCESS are open to every role.
    """
    if not role:
        return False
    allowed_roles = ROUTE_ACCESS.get(route_key(path))
    if allowed_roles is None:
        return True
    return role in allowed_roles


def landing_page(role: Optional[str]) -> str:
    return "/dashboard" if role == "owner" else "/pos"


def login_url(callback_path: str) -> str:
    return f"{LOGIN_PATH}?{urlencode({'callbackUrl': callback_path}, safe='/')}"


def is_safe_callback(callback_url: Optional[str]) -> bool:
    """Only local paths may be used as post-login destinations."""
    if not callback_url or not callback_url.startswith("/") or "\\" in callback_url:
        return False
    return not callback_url.startswith("//")


def post_login_destination(role: Optional[str], callback_url: Optional[str]) -> str:
    if is_safe_callback(callback_url) and callback_url != LOGIN_PATH:
        return callback_url
    return landing_page(role)
