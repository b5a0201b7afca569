"""Enumerate the content routes a documentation site will publish.

The external generator maps every Markdown file under its content directory to
a route: the path relative to the content root with its suffix dropped,
``index`` files collapsing onto their directory, and each segment slugified.
:class:`ContentIndex` reproduces that mapping so sidebar links can be checked
against the pages that actually exist before a build starts.

Examples
--------
>>> index = ContentIndex.from_routes(["/", "/guides/contributing/"])
>>> "/guides/contributing/" in index
True
>>> "/guides/contributing" in index
True
>>> list(index)
['/', '/guides/contributing/']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import re
import typing as typ

import frontmatter
import yaml

from ._constants import CONTENT_SUFFIXES
from .config.helpers import _canonical_route, _validate_route
from .config.models import SchemaError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dc.dataclass(frozen=True, slots=True)
class ContentIndex:
    """Set of canonical content routes (always ending in ``/``)."""

    routes: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        canonical = set()
        for route in self.routes:
            if not isinstance(route, str):
                raise SchemaError("routes", route, "expected a string")
            canonical.add(_canonical_route(_validate_route(route, "routes")))
        object.__setattr__(self, "routes", frozenset(canonical))

    def __contains__(self, route: object) -> bool:
        if not isinstance(route, str):
            return False
        return _canonical_route(route) in self.routes

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(sorted(self.routes))

    def __len__(self) -> int:
        return len(self.routes)

    @classmethod
    def from_routes(cls, routes: cabc.Iterable[str]) -> ContentIndex:
        """Build an index from routes reported by the generator."""
        canonical: set[str] = set()
        for index, route in enumerate(routes):
            if not isinstance(route, str):
                raise SchemaError(f"content[{index}]", route, "expected a string")
            canonical.add(_canonical_route(_validate_route(route, f"content[{index}]")))
        return cls(frozenset(canonical))

    @classmethod
    def from_directory(cls, root: Path) -> ContentIndex:
        """Scan ``root`` for Markdown pages and derive their routes.

        Parameters
        ----------
        root : Path
            Content directory, e.g. ``docs/src/content/docs``.

        Returns
        -------
        ContentIndex
            Routes of every non-draft page under ``root``.

        Raises
        ------
        FileNotFoundError
            If ``root`` is not an existing directory.
        """
        if not root.is_dir():
            msg = f"Content directory '{root}' not found."
            raise FileNotFoundError(msg)

        routes: set[str] = set()
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in CONTENT_SUFFIXES:
                continue
            front_matter = _read_front_matter(path)
            if front_matter.get("draft") is True:
                logger.debug("skipping draft page %s", path)
                continue
            slug = front_matter.get("slug")
            if isinstance(slug, str):
                route = _validate_route(_route_from_slug(slug), f"{path}: slug")
            else:
                route = _validate_route(
                    _route_from_path(path.relative_to(root)), str(path)
                )
            routes.add(route)
        logger.debug("indexed %d content routes under %s", len(routes), root)
        return cls(frozenset(routes))


def _route_from_path(relative: Path) -> str:
    """Map a content file path to the route the generator serves it at."""
    parts = [*relative.parent.parts, relative.stem]
    if parts[-1].lower() == "index":
        parts = parts[:-1]
    return _route_from_slug("/".join(_slugify(part) for part in parts))


def _route_from_slug(slug: str) -> str:
    stripped = slug.strip().strip("/")
    if not stripped or stripped == "index":
        return "/"
    return f"/{stripped}/"


def _slugify(segment: str) -> str:
    return _WHITESPACE.sub("-", segment.strip().lower())


def _read_front_matter(path: Path) -> cabc.Mapping[str, typ.Any]:
    """Return the YAML front matter of ``path`` (empty when absent)."""
    try:
        return frontmatter.load(str(path)).metadata
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise SchemaError(str(path), None, f"unreadable front matter: {exc}") from exc


__all__ = ["ContentIndex"]
