"""
pwordgen.generator
Secure password generator: validation and password assembly.
"""

import logging
from typing import List, Optional, Sequence

from .crypto import RandomSource, UniformIntSampler
from .errors import EmptyPool, InsufficientLengthForClasses, InvalidLength
from .options import OptionsLike, PasswordOptions, normalize_options
from .pool import build_character_pool, selected_class_pools

logger = logging.getLogger(__name__)


def validate_options(options: PasswordOptions) -> None:
    """Raise a ValidationError subclass if these options cannot produce a password."""
    length = options.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength("Password length must be an integer")
    if length < 1:
        raise InvalidLength("Password length must be at least 1")

    if not build_character_pool(options):
        raise EmptyPool("Character pool is empty - no characters available for password generation")

    if options.require_each_selected_class:
        required = len(selected_class_pools(options))
        if required > length:
            raise InsufficientLengthForClasses(required, length)


def generate_basic(pool: str, length: int, sampler: UniformIntSampler) -> str:
    return "".join(sampler.choice(pool) for _ in range(length))


def generate_with_required_classes(
    pool: str,
    class_pools: Sequence[str],
    length: int,
    sampler: UniformIntSampler,
) -> str:
    """
    One character from every class pool, the rest from the full pool, then a
    Fisher-Yates shuffle so the guaranteed characters do not sit at the front.
    """
    password_chars: List[str] = [sampler.choice(chars) for chars in class_pools]

    remaining = length - len(password_chars)
    for _ in range(remaining):
        password_chars.append(sampler.choice(pool))

    sampler.shuffle(password_chars)
    return "".join(password_chars)


def assemble_password(
    pool: str,
    class_pools: Sequence[str],
    length: int,
    require_each_class: bool,
    sampler: UniformIntSampler,
) -> str:
    if require_each_class:
        return generate_with_required_classes(pool, class_pools, length, sampler)
    return generate_basic(pool, length, sampler)


def generate_password(
    options: OptionsLike = None,
    *,
    source: Optional[RandomSource] = None,
    **overrides,
) -> str:
    """
    Generate a cryptographically secure password.

    Options are validated before any random bytes are drawn. Pass `source` to
    replace the OS CSPRNG, e.g. with a fixed byte sequence in tests.
    """
    opts = normalize_options(options, **overrides)
    validate_options(opts)

    pool = build_character_pool(opts)
    class_pools = selected_class_pools(opts) if opts.require_each_selected_class else []
    logger.debug(
        "generating password: length=%d pool_size=%d required_classes=%d",
        opts.length,
        len(pool),
        len(class_pools),
    )

    sampler = UniformIntSampler(source)
    return assemble_password(
        pool, class_pools, opts.length, opts.require_each_selected_class, sampler
    )
