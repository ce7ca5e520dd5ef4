"""WordPress connection setup.

Walks the user through creating an Application Password, checks the
credentials against ``/wp-json/wp/v2/users/me`` and stores them with the
secrets CLI.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, Optional

import requests

from .config import active_config
from .errors import ConnectionCheckError
from .prompts import ask, ask_secret
from .secrets_cli import set_secrets

logger = logging.getLogger(__name__)

INSTRUCTIONS = """\
WordPress Connection Setup
==========================

To let the content pipeline publish posts you need an Application Password:

  1. Log in to your WordPress admin (https://your-site/wp-admin)
  2. Go to Users -> Profile
  3. Scroll down to "Application Passwords"
  4. Enter a name such as "Content Pipeline" and click "Add New Application Password"
  5. Copy the generated password (it is only shown once)
"""

TROUBLESHOOTING = [
    "Check that the site URL is correct and reachable from this machine",
    "Make sure you are using an Application Password, not your login password",
    "Confirm the REST API is enabled (visit <site-url>/wp-json/ in a browser)",
]


@dataclass
class ConnectionResult:
    success: bool
    user: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def display_name(self) -> str:
        return (self.user or {}).get('name', '')


def users_me_url(site_url: str, api_path: Optional[str] = None) -> str:
    api_path = api_path or active_config.WORDPRESS_API_PATH
    return f"{site_url.rstrip('/')}{api_path}/users/me"


def fetch_current_user(site_url: str, username: str, app_password: str) -> Dict[str, Any]:
    """GET users/me with Basic auth; raises ConnectionCheckError on failure."""
    url = users_me_url(site_url)
    logger.info(f"Checking WordPress credentials: GET {url} as {username}")

    try:
        response = requests.get(
            url,
            auth=(username, app_password),
            headers={'Content-Type': 'application/json'},
            timeout=active_config.WORDPRESS_TIMEOUT
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"WordPress request failed: {e}")
        raise ConnectionCheckError(str(e))

    if not response.ok:
        logger.error(f"WordPress returned {response.status_code} for {url}")
        raise ConnectionCheckError(
            f"HTTP {response.status_code}: {response.reason}",
            status_code=response.status_code
        )

    try:
        user = response.json()
    except ValueError:
        raise ConnectionCheckError(f"Invalid JSON response from {url}")

    if not isinstance(user, dict) or 'name' not in user:
        logger.error(f"WordPress response from {url} has no user name: {user!r}")
        raise ConnectionCheckError(f"Unexpected response from {url}: no user name")
    return user


def verify_credentials(site_url: str, username: str, app_password: str) -> ConnectionResult:
    """Check credentials and fold any failure into a ConnectionResult."""
    try:
        user = fetch_current_user(site_url, username, app_password)
    except ConnectionCheckError as e:
        return ConnectionResult(success=False, error=str(e))
    return ConnectionResult(success=True, user=user)


def wordpress_secrets(site_url: str, username: str, app_password: str) -> Dict[str, str]:
    """The four secrets the pipeline reads, in the order they are set."""
    return {
        'WORDPRESS_URL': site_url,
        'WORDPRESS_USERNAME': username,
        'WORDPRESS_PASSWORD': app_password,
        'WORDPRESS_API_PATH': active_config.WORDPRESS_API_PATH,
    }


def print_troubleshooting(error: str) -> None:
    print(f"\nConnection failed: {error}")
    print("\nTroubleshooting:")
    for hint in TROUBLESHOOTING:
        print(f"  - {hint}")


def setup_wordpress_connection() -> bool:
    """Interactive flow. Returns True once all four secrets are stored.

    Secrets CLI failures propagate as SecretsCommandError.
    """
    print(INSTRUCTIONS)

    site_url = ask("WordPress site URL (e.g. https://example.com): ")
    username = ask("WordPress username: ")
    app_password = ask_secret("Application Password: ")

    print("\nTesting WordPress connection...")
    result = verify_credentials(site_url, username, app_password)

    if not result.success:
        print_troubleshooting(result.error)
        return False

    print(f"Connection successful! Connected as: {result.display_name}")

    print("\nStoring credentials as secrets...")
    for key in set_secrets(wordpress_secrets(site_url, username, app_password)):
        print(f"  Set {key}")

    print("\nWordPress connection setup complete!")
    return True
