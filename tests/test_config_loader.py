"""Unit tests for the site configuration loader.

These tests cover :func:`sitenav.config.load` and
:func:`sitenav.config.load_site_config`: the accepted raw shape, reload
stability, and the field-level failures raised for malformed identity, social
links, and sidebar entries.

Usage
-----
Run ``pytest tests/test_config_loader.py -v`` to execute the suite. No special
fixtures are required beyond pytest's built-in ``tmp_path``.
"""

from __future__ import annotations

import copy
import typing as typ
from pathlib import Path

import pytest

from sitenav.config import (
    NavSection,
    PageLink,
    SchemaError,
    SiteConfigError,
    SocialLink,
    UnknownIconError,
    load,
    load_site_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]

SCENARIO: dict[str, typ.Any] = {
    "title": "ZShellCheck",
    "site": "https://afadesigns.github.io",
    "base": "/zshellcheck",
    "social": [{"icon": "github", "link": "https://github.com/afadesigns/zshellcheck"}],
    "sidebar": [
        {"label": "Start Here", "items": [{"label": "Introduction", "link": "/"}]},
        {
            "label": "Guides",
            "items": [{"label": "Contributing", "link": "/guides/contributing/"}],
        },
    ],
}


def _scenario(**overrides: typ.Any) -> dict[str, typ.Any]:
    """Return a deep copy of the scenario config with top-level overrides."""
    raw = copy.deepcopy(SCENARIO)
    raw.update(overrides)
    return raw


def test_scenario_loads_sections_in_order() -> None:
    """The reference scenario should produce two ordered sections and one link."""
    site = load(_scenario())
    assert [section.label for section in site.nav] == ["Start Here", "Guides"], (
        "expected sidebar sections in declaration order"
    )
    assert site.social == (
        SocialLink("github", "https://github.com/afadesigns/zshellcheck"),
    )
    assert site.identity.title == "ZShellCheck"
    assert site.identity.base_path == "/zshellcheck"
    assert site.get_section("Guides").items == (
        PageLink("Contributing", "/guides/contributing/"),
    )


def test_reload_of_serialized_config_is_identical() -> None:
    """Re-serializing and reloading should yield an equal model."""
    site = load(_scenario())
    assert load(site.to_raw()) == site, "reloaded config should equal the original"
    assert load(site.to_raw()).to_raw() == site.to_raw()


def test_reload_is_stable_after_whitespace_normalization() -> None:
    """Surrounding whitespace is dropped on the first load and stays dropped."""
    site = load(_scenario(title="  ZShellCheck  "))
    assert site.identity.title == "ZShellCheck"
    assert load(site.to_raw()) == site


def test_base_path_defaults_to_root() -> None:
    """Omitting ``base`` should serve the site from the domain root."""
    raw = _scenario()
    del raw["base"]
    site = load(raw)
    assert site.identity.base_path == "/"
    assert site.url_for("/guides/contributing/") == (
        "https://afadesigns.github.io/guides/contributing/"
    )


def test_url_for_joins_origin_base_and_route() -> None:
    """Public URLs should include the base path exactly once."""
    site = load(_scenario())
    assert site.url_for("/guides/contributing/") == (
        "https://afadesigns.github.io/zshellcheck/guides/contributing/"
    )
    assert site.url_for("/") == "https://afadesigns.github.io/zshellcheck/"


@pytest.mark.parametrize("route", ["guides/x", "/guides/../x/", "/a?b"])
def test_url_for_rejects_non_normalized_route(route: str) -> None:
    """Only normalized absolute routes can be turned into public URLs."""
    site = load(_scenario())
    with pytest.raises(SchemaError) as excinfo:
        site.url_for(route)
    assert excinfo.value.field == "route"


def test_loaded_config_is_immutable() -> None:
    """Validated records should reject attribute assignment."""
    site = load(_scenario())
    with pytest.raises(AttributeError):
        site.identity.title = "Other"  # type: ignore[misc]
    assert isinstance(site.nav, tuple)
    assert isinstance(site.nav[0], NavSection)


@pytest.mark.parametrize("base", ["zshellcheck", "docs/", "", "https://x.org/docs"])
def test_base_path_without_leading_slash_is_rejected(base: str) -> None:
    """Base paths must start with ``/``."""
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(base=base))
    assert excinfo.value.field == "base"


@pytest.mark.parametrize("base", ["/docs//v1", "/docs/../etc", "/my docs", "/docs?x=1"])
def test_base_path_must_be_a_clean_path(base: str) -> None:
    """Base paths with empty, dot, or non-path characters are rejected."""
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(base=base))
    assert excinfo.value.field == "base"
    assert excinfo.value.value == base


@pytest.mark.parametrize(
    "site",
    [
        "afadesigns.github.io",
        "/zshellcheck",
        "ftp://x.org",
        "https://",
        "http://[::1",
        "https://x.org:abc",
        "https://x.org:99999",
        "https://:443",
    ],
)
def test_malformed_origin_url_is_rejected(site: str) -> None:
    """The origin must be an absolute http(s) URL."""
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(site=site))
    assert excinfo.value.field == "site"


@pytest.mark.parametrize("field", ["title", "site"])
def test_missing_required_field_is_rejected(field: str) -> None:
    """Title and origin URL are required."""
    raw = _scenario()
    del raw[field]
    with pytest.raises(SchemaError, match="missing required field") as excinfo:
        load(raw)
    assert excinfo.value.field == field


def test_empty_title_is_rejected() -> None:
    """A blank title should not pass validation."""
    with pytest.raises(SchemaError, match="must not be empty"):
        load(_scenario(title="   "))


def test_unknown_top_level_key_is_rejected() -> None:
    """Misspelled keys should fail rather than be ignored."""
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(sidbar=[]))
    assert excinfo.value.field == "sidbar"


def test_duplicate_section_label_is_rejected() -> None:
    """Sibling sections must have distinct labels."""
    sidebar = [
        {"label": "Guides", "items": []},
        {"label": "Guides", "items": [{"label": "Other", "link": "/other/"}]},
    ]
    with pytest.raises(SchemaError, match="duplicate section label") as excinfo:
        load(_scenario(sidebar=sidebar))
    assert excinfo.value.field == "sidebar[1].label"
    assert excinfo.value.value == "Guides"


def test_duplicate_link_label_within_section_is_rejected() -> None:
    """Links inside one section must have distinct labels."""
    sidebar = [
        {
            "label": "Guides",
            "items": [
                {"label": "Intro", "link": "/a/"},
                {"label": "Intro", "link": "/b/"},
            ],
        }
    ]
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(sidebar=sidebar))
    assert excinfo.value.field == "sidebar[0].items[1].label"


def test_same_link_label_in_different_sections_is_allowed() -> None:
    """Label uniqueness only applies among siblings."""
    sidebar = [
        {"label": "Guides", "items": [{"label": "Overview", "link": "/guides/"}]},
        {"label": "Reference", "items": [{"label": "Overview", "link": "/ref/"}]},
    ]
    site = load(_scenario(sidebar=sidebar))
    assert site.routes == ("/guides/", "/ref/")


@pytest.mark.parametrize(
    "route",
    ["guides/contributing/", "./guides/", "/guides/../secret/", "/guides//x/", "/a b/", "/a/#frag"],
)
def test_non_normalized_route_is_rejected(route: str) -> None:
    """Sidebar routes must be normalized absolute paths."""
    sidebar = [{"label": "Guides", "items": [{"label": "Page", "link": route}]}]
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(sidebar=sidebar))
    assert excinfo.value.field == "sidebar[0].items[0].link"


def test_nested_sub_section_is_rejected() -> None:
    """Only section and page link levels are supported."""
    sidebar = [
        {
            "label": "Guides",
            "items": [{"label": "Nested", "items": [{"label": "Deep", "link": "/deep/"}]}],
        }
    ]
    with pytest.raises(SchemaError, match="nested sections") as excinfo:
        load(_scenario(sidebar=sidebar))
    assert excinfo.value.field == "sidebar[0].items[0].items"


@pytest.mark.parametrize("icon", ["GitHub", "myspace", ""])
def test_unknown_icon_is_rejected(icon: str) -> None:
    """Icons outside the known vocabulary fail with UnknownIconError."""
    social = [{"icon": icon, "link": "https://example.org"}]
    expected = SchemaError if not icon else UnknownIconError
    with pytest.raises(expected) as excinfo:
        load(_scenario(social=social))
    assert isinstance(excinfo.value, SiteConfigError)
    assert excinfo.value.field.startswith("social[0]")


def test_unknown_icon_message_names_value() -> None:
    """The error should name the offending field and value."""
    social = [
        {"icon": "github", "link": "https://github.com/x"},
        {"icon": "myspace", "link": "https://myspace.com/x"},
    ]
    with pytest.raises(UnknownIconError) as excinfo:
        load(_scenario(social=social))
    message = str(excinfo.value)
    assert "social[1].icon" in message
    assert "'myspace'" in message
    assert excinfo.value.value == "myspace"


def test_social_link_order_is_preserved() -> None:
    """Social links render in declaration order."""
    social = [
        {"icon": "mastodon", "link": "https://fosstodon.org/@x"},
        {"icon": "github", "link": "https://github.com/x"},
    ]
    site = load(_scenario(social=social))
    assert [link.icon_id for link in site.social] == ["mastodon", "github"]


@pytest.mark.parametrize(
    "link",
    ["github.com/x", "http://[::1", "https://github.com:abc/x", "https://github.com:70000/x"],
)
def test_relative_social_link_is_rejected(link: str) -> None:
    """Social links must be well-formed absolute URLs."""
    social = [{"icon": "github", "link": link}]
    with pytest.raises(SchemaError) as excinfo:
        load(_scenario(social=social))
    assert excinfo.value.field == "social[0].link"


def test_non_mapping_root_is_rejected() -> None:
    """The top level must be a mapping."""
    with pytest.raises(SchemaError, match="expected a mapping"):
        load(["not", "a", "mapping"])  # type: ignore[arg-type]


def test_load_site_config_reads_yaml(tmp_path: Path) -> None:
    """YAML files should load through the same validation."""
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        """
site: https://example.org
title: Example
sidebar:
  - label: Docs
    items:
      - label: Home
        link: /
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    site = load_site_config(config_path)
    assert site.identity.origin_url == "https://example.org"
    assert site.routes == ("/",)
    assert site.social == ()


def test_load_site_config_missing_file(tmp_path: Path) -> None:
    """A missing config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_shipped_config_loads() -> None:
    """The repository's sample config should be valid."""
    site = load_site_config(REPO_ROOT / "config" / "site.yaml")
    assert [section.label for section in site.nav] == [
        "Start Here",
        "Guides",
        "Project Info",
    ]
    assert site.get_section("Project Info").get("Roadmap").route == "/about/roadmap/"
