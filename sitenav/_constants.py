"""Common literal values used across sitenav.

These constants keep the icon vocabulary, default paths, and content file
suffixes centralized so the loader, the CLI, and tests can import the same
values without drifting. Intended for internal use within the sitenav package.

Examples
--------
>>> from sitenav import _constants
>>> "github" in _constants.SOCIAL_ICONS
True
>>> _constants.DEFAULT_BASE_PATH
'/'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_BASE_PATH = "/"

# Icon identifiers the generator knows how to render in the site header.
SOCIAL_ICONS: frozenset[str] = frozenset(
    {
        "bitbucket",
        "blueSky",
        "codeberg",
        "codePen",
        "discord",
        "discourse",
        "email",
        "facebook",
        "github",
        "gitlab",
        "gitter",
        "instagram",
        "linkedin",
        "mastodon",
        "matrix",
        "npm",
        "openCollective",
        "patreon",
        "reddit",
        "rss",
        "signal",
        "slack",
        "sourcehut",
        "stackOverflow",
        "telegram",
        "threads",
        "twitch",
        "twitter",
        "x.com",
        "youtube",
        "zulip",
    }
)

CONTENT_SUFFIXES: tuple[str, ...] = (".md", ".mdx", ".markdown")
