# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for ArtPaint.

The console script ``artpaint`` (and ``python -m artpaint``) resolves to
[`artpaint.cli.main.cli`][].
"""
