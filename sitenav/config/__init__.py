"""Load and validate documentation site configuration for sitenav.

This subpackage parses the project's ``site.yaml`` file (or an equivalent
mapping), checks site identity, social links, and the sidebar tree, and
produces frozen dataclasses (:class:`SiteConfig`, :class:`NavSection`, etc.)
that the external site generator consumes. The primary entry points are
:func:`load`, which validates a plain mapping, and :func:`load_site_config`,
which reads YAML from disk first.

Examples
--------
>>> from pathlib import Path
>>> from sitenav.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.url_for("/guides/contributing/")  # doctest: +SKIP
'https://afadesigns.github.io/zshellcheck/guides/contributing/'
"""

from .loader import load, load_site_config
from .models import (
    NavSection,
    PageLink,
    SchemaError,
    SiteConfig,
    SiteConfigError,
    SiteIdentity,
    SocialLink,
    UnknownIconError,
)

__all__ = [
    "NavSection",
    "PageLink",
    "SchemaError",
    "SiteConfig",
    "SiteConfigError",
    "SiteIdentity",
    "SocialLink",
    "UnknownIconError",
    "load",
    "load_site_config",
]
