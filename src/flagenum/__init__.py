# topmark:header:start
#
#   project      : flagenum
#   file         : __init__.py
#   file_relpath : src/flagenum/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""flagenum package.

Enumerated options for Click commands: single- and multi-value flags whose
values are restricted to an allow-list, with duplicate detection and
validated defaults.
"""

from __future__ import annotations

from flagenum.errors import (
    ConversionError,
    DuplicateValueError,
    FlagDefinitionError,
    FlagError,
    FlagSetupError,
    FlagValueError,
    InvalidDefaultError,
    InvalidFlagValue,
    NotAllowedError,
)
from flagenum.extension import FlagSetExtension, new
from flagenum.holders import MultipleValues, SingleValue
from flagenum.options import EnumOption
from flagenum.registration import multiple, multiple_var, single, single_var
from flagenum.values import Cell, EnumValue, identity

__all__ = [
    "Cell",
    "ConversionError",
    "DuplicateValueError",
    "EnumOption",
    "EnumValue",
    "FlagDefinitionError",
    "FlagError",
    "FlagSetExtension",
    "FlagSetupError",
    "FlagValueError",
    "InvalidDefaultError",
    "InvalidFlagValue",
    "MultipleValues",
    "NotAllowedError",
    "SingleValue",
    "identity",
    "multiple",
    "multiple_var",
    "new",
    "single",
    "single_var",
]
