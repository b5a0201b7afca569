"""Typed dataclasses describing sitenav site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class SchemaError(SiteConfigError):
    """Raised when a field is missing, malformed, or structurally invalid."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {reason} (got {value!r})")


class UnknownIconError(SiteConfigError):
    """Raised when a social link names an icon the generator cannot render."""

    def __init__(self, field: str, value: object, known: cabc.Iterable[str]) -> None:
        self.field = field
        self.value = value
        available = ", ".join(sorted(known))
        super().__init__(
            f"{field}: unknown icon {value!r}. Known icons: {available}"
        )


@dc.dataclass(frozen=True, slots=True)
class SiteIdentity:
    """Title, canonical origin, and base path of the generated site."""

    title: str
    origin_url: str
    base_path: str = "/"


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Header icon pointing at an external profile or repository."""

    icon_id: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class PageLink:
    """Sidebar entry linking to a content page by its site-relative route."""

    label: str
    route: str


@dc.dataclass(frozen=True, slots=True)
class NavSection:
    """Labelled sidebar group holding page links in display order."""

    label: str
    items: tuple[PageLink, ...] = ()

    def get(self, label: str) -> PageLink:
        """Return the link with ``label`` or raise ``KeyError``."""
        for item in self.items:
            if item.label == label:
                return item
        available = ", ".join(item.label for item in self.items)
        msg = f"Unknown link '{label}' in section '{self.label}'. Known links: {available}"
        raise KeyError(msg)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Validated site identity, social links, and sidebar navigation tree."""

    identity: SiteIdentity
    social: tuple[SocialLink, ...] = ()
    nav: tuple[NavSection, ...] = ()

    @property
    def routes(self) -> tuple[str, ...]:
        """All sidebar routes in render order."""
        return tuple(link.route for _, link in self.iter_links())

    def iter_links(self) -> cabc.Iterator[tuple[NavSection, PageLink]]:
        """Yield ``(section, link)`` pairs top-to-bottom."""
        for section in self.nav:
            for link in section.items:
                yield section, link

    def get_section(self, label: str) -> NavSection:
        """Return the sidebar section with ``label`` or raise ``KeyError``."""
        for section in self.nav:
            if section.label == label:
                return section
        available = ", ".join(section.label for section in self.nav)
        msg = f"Unknown section '{label}'. Known sections: {available}"
        raise KeyError(msg)

    def url_for(self, route: str) -> str:
        """Return the public URL of ``route`` once served under the base path.

        Examples
        --------
        >>> site = SiteConfig(SiteIdentity("Docs", "https://example.org", "/docs"))
        >>> site.url_for("/guides/intro/")
        'https://example.org/docs/guides/intro/'
        >>> site.url_for("/")
        'https://example.org/docs/'

        Raises
        ------
        SchemaError
            If ``route`` is not a normalized absolute path.
        """
        from .helpers import _validate_route

        _validate_route(route, "route")
        origin = self.identity.origin_url.rstrip("/")
        base = self.identity.base_path.rstrip("/")
        return f"{origin}{base}/{route.lstrip('/')}"

    def to_raw(self) -> dict[str, typ.Any]:
        """Re-serialize into the declared mapping shape accepted by the loader."""
        return {
            "site": self.identity.origin_url,
            "base": self.identity.base_path,
            "title": self.identity.title,
            "social": [
                {"icon": link.icon_id, "link": link.url} for link in self.social
            ],
            "sidebar": [
                {
                    "label": section.label,
                    "items": [
                        {"label": item.label, "link": item.route}
                        for item in section.items
                    ],
                }
                for section in self.nav
            ],
        }


__all__ = [
    "NavSection",
    "PageLink",
    "SchemaError",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
    "UnknownIconError",
]
