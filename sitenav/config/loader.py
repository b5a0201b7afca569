"""Load site configuration into typed, validated dataclasses."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .._constants import DEFAULT_BASE_PATH
from .helpers import (
    _reject_unknown_keys,
    _require_list,
    _require_mapping,
    _require_text,
    _validate_absolute_url,
    _validate_base_path,
    _validate_icon,
    _validate_route,
)
from .models import NavSection, PageLink, SchemaError, SiteConfig, SiteIdentity, SocialLink

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = logging.getLogger(__name__)

_TOP_LEVEL_KEYS = frozenset({"site", "base", "title", "social", "sidebar"})
_SOCIAL_KEYS = frozenset({"icon", "link"})
_SECTION_KEYS = frozenset({"label", "items"})
_LINK_KEYS = frozenset({"label", "link"})


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing site identity and sidebar navigation.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Validated, immutable site configuration.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SchemaError
        If the document is not a mapping or any field is invalid.
    UnknownIconError
        If a social link uses an icon outside the known vocabulary.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from sitenav.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> [section.label for section in config.nav]  # doctest: +SKIP
    ['Start Here', 'Guides', 'Project Info']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    logger.debug("read site configuration from %s", path)
    return load(loaded)


def load(raw_config: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Validate declared configuration values and build a :class:`SiteConfig`.

    Validation either fully succeeds or raises on the first violation; no
    partially populated configuration is ever returned.

    Examples
    --------
    >>> site = load(
    ...     {
    ...         "site": "https://example.org",
    ...         "title": "Docs",
    ...         "sidebar": [
    ...             {"label": "Guides", "items": [{"label": "Intro", "link": "/"}]}
    ...         ],
    ...     }
    ... )
    >>> site.identity.base_path
    '/'
    >>> site.routes
    ('/',)
    """
    raw = _require_mapping(raw_config, "<root>")
    _reject_unknown_keys(raw, _TOP_LEVEL_KEYS, "")

    identity = _build_identity(raw)
    social = tuple(
        _build_social_link(payload, f"social[{index}]")
        for index, payload in enumerate(_require_list(raw.get("social"), "social"))
    )
    nav = _build_nav_tree(_require_list(raw.get("sidebar"), "sidebar"))

    logger.debug(
        "validated site '%s' with %d social links and %d sidebar sections",
        identity.title,
        len(social),
        len(nav),
    )
    return SiteConfig(identity=identity, social=social, nav=nav)


def _build_identity(raw: cabc.Mapping[str, typ.Any]) -> SiteIdentity:
    title = _require_text(raw, "title", "")
    origin_url = _validate_absolute_url(_require_text(raw, "site", ""), "site")
    if raw.get("base") is None:
        base_path = DEFAULT_BASE_PATH
    else:
        base_path = _validate_base_path(_require_text(raw, "base", ""), "base")
    return SiteIdentity(title=title, origin_url=origin_url, base_path=base_path)


def _build_social_link(payload: object, field: str) -> SocialLink:
    mapping = _require_mapping(payload, field)
    _reject_unknown_keys(mapping, _SOCIAL_KEYS, field)
    icon_id = _validate_icon(_require_text(mapping, "icon", field), f"{field}.icon")
    url = _validate_absolute_url(_require_text(mapping, "link", field), f"{field}.link")
    return SocialLink(icon_id=icon_id, url=url)


def _build_nav_tree(sections_raw: list[typ.Any]) -> tuple[NavSection, ...]:
    sections: list[NavSection] = []
    seen: set[str] = set()
    for index, payload in enumerate(sections_raw):
        field = f"sidebar[{index}]"
        section = _build_section(payload, field)
        if section.label in seen:
            raise SchemaError(
                f"{field}.label", section.label, "duplicate section label"
            )
        seen.add(section.label)
        sections.append(section)
    return tuple(sections)


def _build_section(payload: object, field: str) -> NavSection:
    mapping = _require_mapping(payload, field)
    _reject_unknown_keys(mapping, _SECTION_KEYS, field)
    label = _require_text(mapping, "label", field)
    items: list[PageLink] = []
    seen: set[str] = set()
    for index, item in enumerate(_require_list(mapping.get("items"), f"{field}.items")):
        link = _build_page_link(item, f"{field}.items[{index}]")
        if link.label in seen:
            raise SchemaError(
                f"{field}.items[{index}].label",
                link.label,
                f"duplicate link label in section '{label}'",
            )
        seen.add(link.label)
        items.append(link)
    return NavSection(label=label, items=tuple(items))


def _build_page_link(payload: object, field: str) -> PageLink:
    mapping = _require_mapping(payload, field)
    if "items" in mapping:
        raise SchemaError(
            f"{field}.items",
            mapping["items"],
            "nested sections are not supported; use section and page link only",
        )
    _reject_unknown_keys(mapping, _LINK_KEYS, field)
    label = _require_text(mapping, "label", field)
    route = _validate_route(_require_text(mapping, "link", field), f"{field}.link")
    return PageLink(label=label, route=route)


__all__ = ["load", "load_site_config"]
