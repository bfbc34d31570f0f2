"""Login gate applied before any page is shown."""

from typing import Dict, Optional

LOGIN_PATH = '/login'
HOME_PATH = '/'
LOGIN_COOKIE = 'isLoggedIn'

# Paths that are never gated
UNGATED_PREFIXES = ('/_next', '/api', '/static', '/favicon.ico')


def is_logged_in(cookies: Dict[str, str]) -> bool:
    return cookies.get(LOGIN_COOKIE) == 'true'


def resolve_redirect(path: str, cookies: Dict[str, str]) -> Optional[str]:
    """Return the path to redirect to, or None to let the request through."""
    if path.startswith(UNGATED_PREFIXES):
        return None
    logged_in = is_logged_in(cookies)
    on_login_page = path == LOGIN_PATH
    if not logged_in and not on_login_page:
        return LOGIN_PATH
    if logged_in and on_login_page:
        return HOME_PATH
    return None
