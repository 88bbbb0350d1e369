# topmark:header:start
#
#   project      : flagenum
#   file         : __init__.py
#   file_relpath : src/flagenum/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Demo command line interface for flagenum."""
