"""Multi-site menu: prints site-type and setup-method choices with next steps.

Nothing is provisioned; the output is a checklist for the user.
"""

import logging
from typing import Dict, List, Optional

from .prompts import ask
from .sites import site_type_menu

logger = logging.getLogger(__name__)

SETUP_METHODS = [
    ('A', 'Local by Flywheel (sites on this machine)'),
    ('B', 'WordPress.com (hosted free sites)'),
    ('C', 'Self-hosted WordPress at a hosting provider'),
]

SUGGESTED_SITES: Dict[str, List[str]] = {
    'A': [
        'tech-blog.local',
        'business-news.local',
        'health-wellness.local',
        'travel-lifestyle.local',
    ],
    'B': [
        'yourtechblog.wordpress.com',
        'yourbusinessnews.wordpress.com',
        'yourhealthwellness.wordpress.com',
        'yourtravellifestyle.wordpress.com',
    ],
    'C': [
        'tech.yourdomain.com',
        'business.yourdomain.com',
        'health.yourdomain.com',
        'travel.yourdomain.com',
    ],
}

NEXT_STEPS: Dict[str, List[str]] = {
    'A': [
        "Open Local and click '+' to create each site above",
        "Create a 'content-bot' user with the Editor role on each site",
        "Run 'pipeline-setup site' once per site to save its configuration",
    ],
    'B': [
        "Sign up at https://wordpress.com and create each site above",
        "Application Passwords require a Business plan or higher",
        "Run 'pipeline-setup site' once per site to save its configuration",
    ],
    'C': [
        "Install WordPress on each domain from your hosting control panel",
        "Make sure each site is served over HTTPS",
        "Run 'pipeline-setup site' once per site to save its configuration",
    ],
}


def print_menus() -> None:
    print("Multi-Site WordPress Setup")
    print("==========================")
    print("\nSite types:")
    for line in site_type_menu():
        print(f"  {line}")
    print("\nSetup methods:")
    for letter, label in SETUP_METHODS:
        print(f"  {letter}. {label}")


def normalize_choice(choice: str) -> str:
    return choice.strip().upper()


def print_plan(choice: str) -> None:
    print("\nSuggested sites:")
    for hostname in SUGGESTED_SITES[choice]:
        print(f"  - {hostname}")
    print("\nNext steps:")
    for i, step in enumerate(NEXT_STEPS[choice], start=1):
        print(f"  {i}. {step}")


def run_multisite_menu() -> Optional[str]:
    """Show the menus, read one choice and print its plan.

    Returns the matched setup method letter, or None for anything else.
    """
    print_menus()
    choice = normalize_choice(ask("\nChoose a setup method (A/B/C): "))

    if choice not in SUGGESTED_SITES:
        logger.debug(f"Unrecognized multi-site choice: {choice!r}")
        print(f"\nUnrecognized choice '{choice}'. Run again and pick A, B or C.")
        return None

    print_plan(choice)
    return choice
