# topmark:header:start
#
#   project      : flagenum
#   file         : __main__.py
#   file_relpath : src/flagenum/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running the demo via ``python -m flagenum``.

Delegates to :func:`flagenum.cli.main.cli`, the same command installed as the
``flagenum`` console script.
"""

from __future__ import annotations

from flagenum.cli.main import cli

if __name__ == "__main__":
    cli()
