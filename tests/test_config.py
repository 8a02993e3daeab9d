"""Tests for configuration loading."""

import pytest

from jisho_cli import __version__
from jisho_cli.config import DEFAULT_BASE_URL, JishoConfig, load_config


def test_defaults():
    config = load_config({})
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == 10.0
    assert config.user_agent.startswith(f"jisho-cli v{__version__} (")


def test_environment_overrides():
    config = load_config({
        'JISHO_BASE_URL': 'http://localhost:8080/',
        'JISHO_TIMEOUT': '2.5',
        'JISHO_USER_AGENT': 'tester/1.0',
    })
    assert config.base_url == 'http://localhost:8080'
    assert config.timeout == 2.5
    assert config.user_agent == 'tester/1.0'


def test_invalid_timeout():
    with pytest.raises(ValueError, match="JISHO_TIMEOUT"):
        load_config({'JISHO_TIMEOUT': 'soon'})


def test_non_positive_timeout():
    with pytest.raises(ValueError, match="Timeout must be positive"):
        JishoConfig(timeout=0)


def test_base_url_must_be_http():
    with pytest.raises(ValueError, match="http"):
        JishoConfig(base_url='ftp://jisho.org')


def test_search_url_quotes_term():
    config = JishoConfig()
    assert config.search_url('#kanji 食') == 'https://jisho.org/search/%23kanji%20%E9%A3%9F'
