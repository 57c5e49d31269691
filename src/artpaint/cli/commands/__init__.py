# topmark:header:start
#
#   project      : ArtPaint
#   file         : __init__.py
#   file_relpath : src/artpaint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ArtPaint CLI subcommands (``render``, ``validate``, ``schema``, ``version``)."""
