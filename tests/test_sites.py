import json

import pytest
import requests

from pipeline_setup.sites import (
    SITE_TYPES,
    SiteConfig,
    configure_site,
    list_sites,
    load_site_configs,
    save_site_config,
    secret_suffix,
    site_type_menu,
    slugify_site_name,
)
from conftest import secrets_set


@pytest.fixture
def answers(mocker):
    def _answers(*values, password='app pass word'):
        mocker.patch('pipeline_setup.sites.ask', side_effect=list(values))
        mocker.patch('pipeline_setup.sites.ask_secret', return_value=password)
    return _answers


def test_site_type_menu_has_custom_option():
    menu = site_type_menu()
    assert len(menu) == 5
    assert menu[0] == '1. Technology Blog (tech-blog)'
    assert menu[-1] == '5. Custom Site'


def test_slugify_and_secret_suffix():
    assert slugify_site_name('  My  Cooking   Site ') == 'my-cooking-site'
    assert secret_suffix('tech-blog') == 'TECH_BLOG'


def test_configure_predefined_site(answers, mock_wp_get, mock_subprocess, tmp_path, capsys):
    answers('1', 'https://tech.example.com', 'content-bot')

    assert configure_site(tmp_path) is True

    saved = json.loads((tmp_path / 'tech-blog.json').read_text(encoding='utf-8'))
    assert saved['site_id'] == 'tech-blog'
    assert saved['name'] == 'Technology Blog'
    assert saved['url'] == 'https://tech.example.com'
    assert saved['api_path'] == '/wp-json/wp/v2'
    assert saved['topics'] == SITE_TYPES[0].topics

    assert secrets_set(mock_subprocess) == [
        'WORDPRESS_URL_TECH_BLOG=https://tech.example.com',
        'WORDPRESS_USERNAME_TECH_BLOG=content-bot',
        'WORDPRESS_PASSWORD_TECH_BLOG=app pass word',
    ]
    assert 'Connected as: Content Bot' in capsys.readouterr().out


def test_configure_custom_site(answers, mock_wp_get, mock_subprocess, tmp_path):
    answers('5', 'Garden Notes', 'https://garden.example.com', 'editor')

    assert configure_site(tmp_path) is True

    saved = json.loads((tmp_path / 'garden-notes.json').read_text(encoding='utf-8'))
    assert saved['name'] == 'Garden Notes'
    assert saved['topics'] == []


def test_configure_site_connection_failure_writes_nothing(answers, mocker, mock_subprocess, tmp_path, capsys):
    answers('2', 'https://biz.example.com', 'content-bot')
    mocker.patch('pipeline_setup.wordpress.requests.get',
                 side_effect=requests.exceptions.Timeout('timed out'))

    assert configure_site(tmp_path / 'sites') is False

    assert not (tmp_path / 'sites').exists()
    mock_subprocess.assert_not_called()
    assert 'Error: timed out' in capsys.readouterr().out


def test_configure_site_keeps_config_when_secrets_fail(answers, mock_wp_get, mocker, tmp_path, capsys):
    answers('3', 'https://health.example.com', 'content-bot')
    mocker.patch('pipeline_setup.secrets_cli.subprocess.run', side_effect=FileNotFoundError())

    assert configure_site(tmp_path) is True

    assert (tmp_path / 'health-wellness.json').exists()
    assert 'Warning: failed to update secrets' in capsys.readouterr().out


def test_load_site_configs_round_trip(tmp_path):
    config = SiteConfig.from_site_type(SITE_TYPES[3])
    config.url = 'https://travel.example.com'
    save_site_config(config, tmp_path)
    (tmp_path / 'broken.json').write_text('{not json', encoding='utf-8')

    sites = load_site_configs(tmp_path)

    assert list(sites) == ['travel-lifestyle']
    assert sites['travel-lifestyle'] == config


def test_load_site_configs_missing_directory(tmp_path):
    assert load_site_configs(tmp_path / 'nope') == {}


@pytest.mark.parametrize('name, slug', [
    ('../x', 'x'),
    ('a/b\\c', 'abc'),
    ('  !!  ', ''),
    ('Tech & Code', 'tech--code'),
])
def test_slugify_drops_unsafe_characters(name, slug):
    assert slugify_site_name(name) == slug


def test_custom_site_name_is_asked_again_until_usable(answers, mock_wp_get, mock_subprocess, tmp_path, capsys):
    answers('5', '', '../..', 'Food Blog', 'https://food.example.com', 'editor')

    assert configure_site(tmp_path) is True

    assert [p.name for p in tmp_path.iterdir()] == ['food-blog.json']
    assert 'must contain at least one letter or digit' in capsys.readouterr().out


def test_list_sites(tmp_path, capsys):
    config = SiteConfig.from_site_type(SITE_TYPES[0])
    config.url = 'https://tech.example.com'
    save_site_config(config, tmp_path)

    sites = list_sites(tmp_path)

    assert list(sites) == ['tech-blog']
    assert 'tech-blog: Technology Blog (https://tech.example.com)' in capsys.readouterr().out
