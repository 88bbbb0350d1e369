# topmark:header:start
#
#   project      : flagenum
#   file         : __init__.py
#   file_relpath : src/flagenum/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for flagenum (logging setup driven by the environment)."""

from __future__ import annotations
