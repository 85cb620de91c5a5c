"""
pwordgen.errors
Exceptions raised by the password generator.
"""


class PasswordGenerationError(Exception):
    """Base class for every error raised by pwordgen."""


class ValidationError(PasswordGenerationError, ValueError):
    """Options were rejected before any randomness was consumed."""


class InvalidLength(ValidationError):
    pass


class EmptyPool(ValidationError):
    pass


class InsufficientLengthForClasses(ValidationError):
    def __init__(self, required: int, length: int):
        self.required = required
        self.length = length
        super().__init__(
            f"Cannot require each selected class: need at least {required} characters "
            f"but password length is {length}"
        )


class InvalidArgument(PasswordGenerationError, ValueError):
    """A sampler or random source was called with a bad argument."""


class RandomnessExhausted(PasswordGenerationError, RuntimeError):
    """Rejection sampling did not accept a draw within its attempt budget."""


class SourceUnavailable(PasswordGenerationError, RuntimeError):
    """No cryptographically secure random generator is available."""
