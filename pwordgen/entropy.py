"""
pwordgen.entropy

Entropy is estimated as length * log2(pool_size), treating every position as
drawn independently and uniformly from the full pool. With
require_each_selected_class the real figure is slightly lower; the estimate
deliberately ignores that.
"""

import logging
import math

from .options import OptionsLike, normalize_options
from .pool import build_character_pool

logger = logging.getLogger(__name__)


def entropy_bits(length, pool_size: int) -> float:
    if length < 1 or pool_size == 0:
        return 0.0
    return length * math.log2(pool_size)


def estimate_entropy_bits(options: OptionsLike = None, **overrides) -> float:
    """
    Estimated entropy in bits of a password generated with these options.

    Returns 0.0 instead of raising when the length is not a positive integer
    or the resulting pool is empty.
    """
    opts = normalize_options(options, **overrides)
    length = opts.length
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        return 0.0

    pool = build_character_pool(opts)
    logger.debug("entropy estimate: length=%d pool_size=%d", length, len(pool))
    return entropy_bits(length, len(pool))
