# topmark:header:start
#
#   project      : ArtPaint
#   file         : __main__.py
#   file_relpath : src/artpaint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ArtPaint via ``python -m artpaint``.

It delegates directly to :func:`artpaint.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ArtPaint is launched.

Examples:
    Render a design using the module interface::

        python -m artpaint render banner.toml
"""

from __future__ import annotations

from artpaint.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
