"""Validate documentation site configuration ahead of a static-site build.

This package exposes the CLI entry points used by ``sitenav`` to check the
sidebar, export the validated config, and list public route URLs.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sitenav import main
>>> main()  # doctest: +SKIP
>>> from sitenav import app
>>> app(["check", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
