# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/flagenum/exit_codes.py
#   project      : flagenum
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes used by flagenum errors and the demo CLI.

Values follow the BSD `sysexits` convention where practical. Rejected
command-line values are reported by Click as usage errors, which keep Click's
own exit status (2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        CLICK_USAGE_ERROR: Exit status Click uses for `click.UsageError`,
            including rejected enumerated values.
        CONFIG_ERROR: Invalid flag definition (duplicate or disallowed
            allowed/default values). Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    CLICK_USAGE_ERROR = 2

    CONFIG_ERROR = 78  # EX_CONFIG
