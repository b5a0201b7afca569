"""Cyclopts CLI entrypoint for checking and exporting documentation site config.

The ``sitenav`` console script defined here validates ``site.yaml`` before the
external site generator runs, cross-checks the sidebar against the content
directory, writes the validated configuration as JSON for the generator to
consume, and lists the public URL of every sidebar route. Typical usage
involves running ``sitenav check --content-dir docs/src/content/docs`` locally
or in CI ahead of the docs build.

Examples
--------
Validate the default configuration:

>>> from sitenav.cli import main
>>> main()  # doctest: +SKIP

Fail the run when the sidebar points at missing pages:

>>> from sitenav.cli import app
>>> app(
...     ["check", "--content-dir", "docs/src/content/docs", "--strict"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG
from .config import SiteConfig, SiteConfigError, load_site_config
from .content_index import ContentIndex
from .routes import resolve_routes

app = App(name="sitenav", config=cyclopts.config.Env("SITENAV_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_or_exit(config: Path) -> SiteConfig:
    """Load ``config`` or exit with status 1 and the validation message."""
    try:
        return load_site_config(config)
    except (FileNotFoundError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


@app.command(help="Validate the site config and cross-check sidebar routes.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None,
        Parameter(
            help="Content directory to resolve sidebar routes against",
            env_var="SITENAV_CONTENT_DIR",
        ),
    ] = None,
    strict: typ.Annotated[
        bool, Parameter(help="Fail when sidebar links point at missing pages")
    ] = False,
) -> None:
    """Validate the site configuration and optionally resolve its routes.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``SITENAV_CONFIG``).
    content_dir : Path or None, optional
        Content directory scanned into a :class:`ContentIndex`; when ``None``
        only the configuration itself is validated.
    strict : bool, optional
        Exit with status 1 when dangling sidebar links are found. Orphaned
        content never fails the run.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is invalid, the content directory
        is missing, or ``strict`` is set and dangling links exist.
    """
    site_config = _load_or_exit(config)
    print(
        f"{_format_path(config)}: {len(site_config.nav)} sections, "
        f"{len(site_config.routes)} links, {len(site_config.social)} social links"
    )
    if content_dir is None:
        return

    try:
        content_index = ContentIndex.from_directory(content_dir)
    except (FileNotFoundError, SiteConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    report = resolve_routes(site_config.nav, content_index)
    for warning in report.dangling:
        print(f"warning: dangling link: {warning}", file=sys.stderr)
    for warning in report.orphaned:
        print(f"warning: orphaned content: {warning}", file=sys.stderr)
    print(
        f"{_format_path(content_dir)}: {len(content_index)} pages, "
        f"{len(report.dangling)} dangling, {len(report.orphaned)} orphaned"
    )
    if strict and report.dangling:
        raise SystemExit(1)


@app.command(help="Write the validated site config as JSON for the generator.")
def export(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write JSON here instead of stdout", env_var="SITENAV_OUTPUT"),
    ] = None,
) -> None:
    """Serialize the validated configuration into the generator's raw shape."""
    site_config = _load_or_exit(config)
    payload = json.dumps(site_config.to_raw(), indent=2, ensure_ascii=False)
    if output is None:
        print(payload)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n", encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="List every sidebar route with its public URL.")
def routes(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="SITENAV_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print ``section > label: route -> url`` for each sidebar link."""
    site_config = _load_or_exit(config)
    for section, link in site_config.iter_links():
        print(
            f"{section.label} > {link.label}: {link.route} -> "
            f"{site_config.url_for(link.route)}"
        )


def main() -> None:
    """Invoke the Cyclopts application that powers the `sitenav` console command.

    The log level is read from ``SITENAV_LOG_LEVEL`` (default ``WARNING``).

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(
        level=os.getenv("SITENAV_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
