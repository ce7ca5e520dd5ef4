"""Site configuration manager.

Predefined site types, per-site JSON configuration and site-scoped secrets.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .config import active_config
from .errors import SecretsCommandError
from .prompts import ask, ask_secret
from .secrets_cli import set_secrets
from .wordpress import verify_credentials

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteType:
    key: str
    name: str
    topics: List[str]
    categories: List[str]
    tags: List[str]


@dataclass
class SiteConfig:
    site_id: str
    name: str
    url: str = ''
    username: str = ''
    password: str = ''
    api_path: str = '/wp-json/wp/v2'
    topics: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    default_settings: Dict[str, Any] = field(default_factory=lambda: {
        'status': 'publish',
        'featured_image': False,
        'excerpt': True,
        'seo': True,
    })

    @classmethod
    def from_site_type(cls, site_type: SiteType) -> 'SiteConfig':
        return cls(
            site_id=site_type.key,
            name=site_type.name,
            topics=list(site_type.topics),
            categories=list(site_type.categories),
            tags=list(site_type.tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


SITE_TYPES = [
    SiteType(
        key='tech-blog',
        name='Technology Blog',
        topics=['artificial intelligence', 'programming', 'software development', 'cybersecurity',
                'cloud computing', 'data science', 'machine learning', 'web development',
                'mobile apps', 'gaming'],
        categories=['AI & Machine Learning', 'Programming', 'Cybersecurity', 'Cloud Computing',
                    'Web Development', 'Mobile Development', 'Gaming'],
        tags=['tech', 'programming', 'AI', 'development', 'software', 'innovation'],
    ),
    SiteType(
        key='business-news',
        name='Business News',
        topics=['business strategy', 'entrepreneurship', 'finance', 'marketing', 'leadership',
                'startups', 'investing', 'economy', 'management', 'sales'],
        categories=['Business Strategy', 'Finance', 'Marketing', 'Leadership', 'Startups',
                    'Economy', 'Management'],
        tags=['business', 'finance', 'marketing', 'leadership', 'entrepreneurship', 'strategy'],
    ),
    SiteType(
        key='health-wellness',
        name='Health & Wellness',
        topics=['nutrition', 'fitness', 'mental health', 'wellness', 'diet', 'exercise',
                'meditation', 'yoga', 'healthy living', 'medical advice'],
        categories=['Nutrition', 'Fitness', 'Mental Health', 'Wellness', 'Exercise',
                    'Meditation', 'Healthy Living'],
        tags=['health', 'wellness', 'fitness', 'nutrition', 'mental-health', 'lifestyle'],
    ),
    SiteType(
        key='travel-lifestyle',
        name='Travel & Lifestyle',
        topics=['travel destinations', 'lifestyle tips', 'food', 'culture', 'adventure',
                'photography', 'fashion', 'home decor', 'entertainment', 'hobbies'],
        categories=['Travel Destinations', 'Lifestyle Tips', 'Food & Culture', 'Adventure',
                    'Photography', 'Fashion', 'Home Decor'],
        tags=['travel', 'lifestyle', 'food', 'culture', 'adventure', 'photography', 'fashion'],
    ),
]

CUSTOM_SITE_LABEL = 'Custom Site'


def site_type_menu() -> List[str]:
    """Numbered menu lines: the predefined types followed by the custom option."""
    lines = [f"{i}. {t.name} ({t.key})" for i, t in enumerate(SITE_TYPES, start=1)]
    lines.append(f"{len(SITE_TYPES) + 1}. {CUSTOM_SITE_LABEL}")
    return lines


def slugify_site_name(name: str) -> str:
    """Lower-case, whitespace runs to '-', anything outside [a-z0-9_-] dropped."""
    slug = re.sub(r'\s+', '-', name.strip().lower())
    return re.sub(r'[^a-z0-9_-]', '', slug).strip('-')


def secret_suffix(site_id: str) -> str:
    return site_id.upper().replace('-', '_')


def site_secrets(config: SiteConfig) -> Dict[str, str]:
    suffix = secret_suffix(config.site_id)
    return {
        f'WORDPRESS_URL_{suffix}': config.url,
        f'WORDPRESS_USERNAME_{suffix}': config.username,
        f'WORDPRESS_PASSWORD_{suffix}': config.password,
    }


def site_config_path(site_id: str, directory: Optional[Union[str, os.PathLike]] = None) -> Path:
    base = Path(directory) if directory is not None else Path(active_config.SITES_CONFIG_DIR)
    return base / f"{site_id}.json"


def save_site_config(config: SiteConfig, directory: Optional[Union[str, os.PathLike]] = None) -> Path:
    path = site_config_path(config.site_id, directory)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2) + '\n', encoding='utf-8')
    logger.info(f"Saved site configuration {config.site_id} to {path}")
    return path


def load_site_configs(directory: Optional[Union[str, os.PathLike]] = None) -> Dict[str, SiteConfig]:
    """Read every saved site configuration, keyed by site id."""
    base = Path(directory) if directory is not None else Path(active_config.SITES_CONFIG_DIR)
    sites = {}
    if not base.is_dir():
        return sites

    for path in sorted(base.glob('*.json')):
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
            config = SiteConfig(**data)
        except (ValueError, TypeError) as e:
            logger.warning(f"Skipping unreadable site configuration {path}: {e}")
            continue
        sites[config.site_id] = config
    return sites


def choose_site_config(choice: str) -> SiteConfig:
    """Map a menu choice to a fresh SiteConfig; anything else is a custom site."""
    if choice.isdigit() and 1 <= int(choice) <= len(SITE_TYPES):
        return SiteConfig.from_site_type(SITE_TYPES[int(choice) - 1])

    while True:
        name = ask("Enter site name: ")
        site_id = slugify_site_name(name)
        if site_id:
            return SiteConfig(site_id=site_id, name=name)
        print("Site name must contain at least one letter or digit.")


def list_sites(directory: Optional[Union[str, os.PathLike]] = None) -> Dict[str, SiteConfig]:
    """Print the saved site configurations."""
    sites = load_site_configs(directory)
    if not sites:
        print("No sites configured yet. Run 'pipeline-setup site' to add one.")
        return sites

    print("Configured sites:")
    for site_id, config in sites.items():
        print(f"  {site_id}: {config.name} ({config.url or 'no URL'})")
    return sites


def configure_site(directory: Optional[Union[str, os.PathLike]] = None) -> bool:
    """Interactive site configuration. Returns True once the config is saved."""
    print("WordPress Site Configuration Manager")
    print("====================================")
    print("\nAvailable Site Types:")
    for line in site_type_menu():
        print(line)

    choice = ask(f"Choose site type (1-{len(SITE_TYPES) + 1}): ")
    config = choose_site_config(choice)

    config.url = ask("Enter WordPress site URL: ")
    config.username = ask("Enter WordPress username: ")
    config.password = ask_secret("Enter Application Password: ")

    print("\nTesting WordPress connection...")
    result = verify_credentials(config.url, config.username, config.password)
    if not result.success:
        print("WordPress connection failed!")
        print(f"Error: {result.error}")
        return False

    print("WordPress connection successful!")
    print(f"Connected as: {result.display_name}")

    path = save_site_config(config, directory)
    print(f"\nSite configuration saved to: {path}")

    print("\nUpdating secrets...")
    try:
        set_secrets(site_secrets(config))
        print("Secrets updated successfully!")
    except SecretsCommandError as e:
        logger.warning(f"Site secrets not stored for {config.site_id}: {e}")
        print(f"Warning: failed to update secrets: {e}")

    print("\nSite configuration complete!")
    print(f"Site: {config.name}")
    print(f"URL: {config.url}")
    print(f"Topics: {', '.join(config.topics)}")
    return True
