"""
pwordgen.options
Character classes, option defaults and option normalization.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Union
import string


CHARACTER_CLASSES: Dict[str, str] = {
    "lowercase": string.ascii_lowercase,
    "uppercase": string.ascii_uppercase,
    "digits": string.digits,
    "symbols": "!@#$%^&*()_+-=[]{}|;:,.<>?",
}

# Characters that are easy to confuse when read or typed by hand
SIMILAR_CHARACTERS = "il1Lo0O"

# Order in which classes are added to the pool and to the required-class picks
CLASS_ORDER = ("lowercase", "uppercase", "digits", "symbols")


@dataclass(frozen=True)
class PasswordOptions:
    length: int = 16
    lowercase: bool = True
    uppercase: bool = True
    digits: bool = True
    symbols: bool = True
    custom: str = ""
    exclude_similar: bool = False
    exclude: str = ""
    require_each_selected_class: bool = False


DEFAULT_OPTIONS = PasswordOptions()

OPTION_NAMES = tuple(f.name for f in fields(PasswordOptions))

OptionsLike = Union[None, PasswordOptions, Mapping[str, Any]]


def normalize_options(options: OptionsLike = None, **overrides: Any) -> PasswordOptions:
    """
    Merge partial options over the defaults.

    `options` may be None, a PasswordOptions or a mapping of option names.
    Keyword overrides are applied last. A value of None keeps the default.
    Unknown option names raise TypeError.
    """
    if isinstance(options, PasswordOptions):
        base = options
        merged: Dict[str, Any] = {}
    else:
        base = DEFAULT_OPTIONS
        merged = dict(options or {})
    merged.update(overrides)

    unknown = [name for name in merged if name not in OPTION_NAMES]
    if unknown:
        raise TypeError(f"Unknown password option(s): {', '.join(sorted(unknown))}")

    given = {name: value for name, value in merged.items() if value is not None}
    return replace(base, **given)
