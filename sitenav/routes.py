"""Cross-check sidebar routes against the content a site will publish.

:func:`resolve_routes` compares every sidebar link with a
:class:`~sitenav.content_index.ContentIndex` and reports two kinds of
findings, neither of which fails the build:

* dangling links, where a sidebar entry points at a route with no page, and
* orphaned content, where a page exists but no sidebar entry reaches it.

Typical usage pairs the loader with a scanned content directory:

>>> from pathlib import Path
>>> from sitenav.config import load_site_config
>>> from sitenav.content_index import ContentIndex
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> index = ContentIndex.from_directory(Path("docs/src/content/docs"))  # doctest: +SKIP
>>> report = resolve_routes(site.nav, index)  # doctest: +SKIP
>>> report.is_clean  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
import warnings

from .config.helpers import _canonical_route

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config.models import NavSection
    from .content_index import ContentIndex

logger = logging.getLogger(__name__)


class RouteWarning(UserWarning):
    """Non-fatal finding about a route in the sidebar or the content tree."""

    def __init__(self, route: str, message: str) -> None:
        self.route = route
        super().__init__(message)


class DanglingRouteWarning(RouteWarning):
    """A sidebar link points at a route with no matching content page."""

    def __init__(self, route: str, *, section: str, label: str) -> None:
        self.section = section
        self.label = label
        super().__init__(
            route,
            f"sidebar link '{section} > {label}' points at missing page {route}",
        )


class OrphanedContentWarning(RouteWarning):
    """A content page is not reachable from any sidebar link."""

    def __init__(self, route: str) -> None:
        super().__init__(route, f"content page {route} is not linked from the sidebar")


@dc.dataclass(frozen=True, slots=True)
class ValidationReport:
    """Findings collected while resolving sidebar routes."""

    dangling: tuple[DanglingRouteWarning, ...] = ()
    orphaned: tuple[OrphanedContentWarning, ...] = ()

    @property
    def warnings(self) -> tuple[RouteWarning, ...]:
        """Dangling links followed by orphaned content."""
        return (*self.dangling, *self.orphaned)

    @property
    def is_clean(self) -> bool:
        """Whether the sidebar and content tree match exactly."""
        return not self.dangling and not self.orphaned

    def emit(self) -> None:
        """Re-issue every finding through :mod:`warnings`."""
        for warning in self.warnings:
            warnings.warn(warning, stacklevel=2)


def resolve_routes(
    tree: cabc.Iterable[NavSection], content_index: ContentIndex
) -> ValidationReport:
    """Report dangling sidebar links and orphaned content pages.

    Parameters
    ----------
    tree : Iterable[NavSection]
        Sidebar sections in render order, typically ``SiteConfig.nav``.
    content_index : ContentIndex
        Routes of the pages that exist in the content tree.

    Returns
    -------
    ValidationReport
        Dangling links in sidebar order and orphaned routes sorted by path.
    """
    linked: set[str] = set()
    dangling: list[DanglingRouteWarning] = []
    for section in tree:
        for link in section.items:
            canonical = _canonical_route(link.route)
            linked.add(canonical)
            if canonical not in content_index.routes:
                dangling.append(
                    DanglingRouteWarning(
                        link.route, section=section.label, label=link.label
                    )
                )

    orphaned = tuple(
        OrphanedContentWarning(route)
        for route in sorted(content_index.routes - linked)
    )
    logger.info(
        "resolved %d sidebar routes: %d dangling, %d orphaned",
        len(linked),
        len(dangling),
        len(orphaned),
    )
    return ValidationReport(dangling=tuple(dangling), orphaned=orphaned)


__all__ = [
    "DanglingRouteWarning",
    "OrphanedContentWarning",
    "RouteWarning",
    "ValidationReport",
    "resolve_routes",
]
