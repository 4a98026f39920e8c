import pytest
from services.access_control import (
    is_allowed, is_protected_page, landing_page, login_url, post_login_destination, route_key
)


@pytest.mark.parametrize("path", ["/dashboard", "/users", "/services", "/hours", "/test-data"])
def test_owner_only_pages(path):
    assert is_allowed(path, "owner")
    assert not is_allowed(path, "therapist")
    assert not is_allowed(path, "manager")


@pytest.mark.parametrize("path", ["/pos", "/reports", "/customers", "/consultation-form/CUABC1234", "/welcome"])
def test_staff_pages(path):
    for role in ("owner", "therapist", "manager"):
        assert is_allowed(path, role)
    assert not is_allowed(path, "user")


def test_no_role_is_never_allowed():
    assert not is_allowed("/pos", None)
    assert not is_allowed("/somewhere-else", "")


def test_unmapped_paths_are_open_to_any_role():
    assert is_allowed("/somewhere-else", "user")
    assert not is_protected_page("/somewhere-else")
    assert not is_protected_page("/api/users")


def test_route_key_uses_first_segment():
    assert route_key("/consultation-form/CU123") == "/consultation-form"
    assert route_key("/reports?x=1") == "/reports"


def test_landing_pages():
    assert landing_page("owner") == "/dashboard"
    assert landing_page("therapist") == "/pos"
    assert landing_page("manager") == "/pos"


def test_login_url_keeps_callback_readable():
    assert login_url("/reports") == "/?callbackUrl=/reports"


def test_post_login_destination():
    assert post_login_destination("therapist", "/reports") == "/reports"
    assert post_login_destination("owner", None) == "/dashboard"
    assert post_login_destination("therapist", "/") == "/pos"
    assert post_login_destination("owner", "https://evil.example") == "/dashboard"
    assert post_login_destination("owner", "//evil.example") == "/dashboard"
    assert post_login_destination("owner", "/\\evil.example") == "/dashboard"
    assert post_login_destination("therapist", "/pos\\..\\x") == "/pos"
