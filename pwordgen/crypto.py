"""
pwordgen.crypto
Secure random bytes and unbiased random integers.

The sampler turns bytes from a CSPRNG into integers in [0, max) by rejection
sampling: draws above the largest multiple of `max` that fits in the byte
range are thrown away, so `value % max` carries no modulo bias.
"""

import logging
import secrets
from typing import List, Optional, Protocol, TypeVar

from .errors import InvalidArgument, RandomnessExhausted, SourceUnavailable

logger = logging.getLogger(__name__)

# A single draw is rejected with probability < 1/2, so 64 straight
# rejections only happen when the source is broken.
MAX_ATTEMPTS = 64

T = TypeVar("T")


class RandomSource(Protocol):
    def fill(self, n: int) -> bytes:
        ...


def _check_int(value, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG."""

    def fill(self, n: int) -> bytes:
        _check_int(n, "n")
        if n < 0:
            raise InvalidArgument("n must be >= 0")
        if n == 0:
            return b""
        try:
            return secrets.token_bytes(n)
        except NotImplementedError as exc:
            raise SourceUnavailable(
                "No cryptographically secure random number generator available"
            ) from exc


def bytes_needed(max_value: int) -> int:
    """Number of random bytes drawn per attempt when sampling below `max_value`."""
    # (max - 1).bit_length() == ceil(log2(max)) for max >= 2, without float error
    bits = (max_value - 1).bit_length()
    return (bits + 7) // 8


def max_valid_value(max_value: int) -> int:
    """Largest accepted draw: floor(256**n / max) * max - 1."""
    span = 256 ** bytes_needed(max_value)
    return (span // max_value) * max_value - 1


class UniformIntSampler:
    """
    Uniform integers in [0, max) backed by a RandomSource.

    The source defaults to the OS CSPRNG; pass a deterministic one in tests.
    """

    def __init__(self, source: Optional[RandomSource] = None, max_attempts: int = MAX_ATTEMPTS):
        if max_attempts < 1:
            raise InvalidArgument("max_attempts must be >= 1")
        self.source = source if source is not None else SystemRandomSource()
        self.max_attempts = max_attempts

    def _try_sample(self, max_value: int, n_bytes: int, threshold: int) -> Optional[int]:
        """One draw: the sampled value, or None when the draw is rejected."""
        data = self.source.fill(n_bytes)
        if len(data) != n_bytes:
            raise InvalidArgument(f"random source returned {len(data)} bytes, expected {n_bytes}")
        value = int.from_bytes(data, "big")
        if value <= threshold:
            return value % max_value
        return None

    def sample(self, max_value: int) -> int:
        _check_int(max_value, "max")
        if max_value <= 0:
            raise InvalidArgument("max must be a positive integer")
        if max_value == 1:
            return 0

        n_bytes = bytes_needed(max_value)
        threshold = max_valid_value(max_value)
        for _ in range(self.max_attempts):
            result = self._try_sample(max_value, n_bytes, threshold)
            if result is not None:
                return result

        logger.error(
            "rejection sampling for max=%d failed %d times in a row", max_value, self.max_attempts
        )
        raise RandomnessExhausted(
            f"Failed to generate unbiased random number after {self.max_attempts} attempts"
        )

    def choice(self, seq: str) -> str:
        return seq[self.sample(len(seq))]

    def shuffle(self, items: List[T]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.sample(i + 1)
            items[i], items[j] = items[j], items[i]


def secure_random_int(max_value: int, source: Optional[RandomSource] = None) -> int:
    return UniformIntSampler(source).sample(max_value)
