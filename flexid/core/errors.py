"""Errors raised while configuring generators and generating identifiers."""

from flexid.utils.timestamp import format_timestamp


class FlexIdError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.timestamp}] {super().__str__()}"


class ConfigError(FlexIdError, ValueError):
    """Invalid generator configuration."""


class AlphabetTooShortError(ConfigError):
    """Alphabet has fewer than two characters."""

    def __init__(self, length, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["length"] = length
        super().__init__(f"alphabet must contain at least 2 characters, got {length}", context=context, **kwargs)


class AlphabetTooLongError(ConfigError):
    """Alphabet cannot be indexed by a single random byte."""

    def __init__(self, length, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["length"] = length
        super().__init__(f"alphabet must contain at most 256 characters, got {length}", context=context, **kwargs)


class DuplicateAlphabetCharacterError(ConfigError):
    """Alphabet repeats a character."""

    def __init__(self, character, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["character"] = character
        super().__init__(f"alphabet contains duplicate character {character!r}", context=context, **kwargs)


class NegativeRandomLengthError(ConfigError):
    """Number of random characters is negative."""

    def __init__(self, num_random_chars, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["num_random_chars"] = num_random_chars
        super().__init__(
            f"number of random characters cannot be negative, got {num_random_chars}", context=context, **kwargs
        )


class NegativeTickSizeError(ConfigError):
    """Tick size is negative."""

    def __init__(self, tick_size, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["tick_size"] = tick_size
        super().__init__(f"tick size cannot be negative, got {tick_size}ns", context=context, **kwargs)


class InvalidTickSizeError(ConfigError):
    """Tick size is not an int, timedelta or known tick size name."""

    def __init__(self, tick_size, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["tick_size"] = tick_size
        super().__init__(f"invalid tick size {tick_size!r}", context=context, **kwargs)


class GenerationError(FlexIdError):
    """Identifier could not be generated."""


class EpochNotReachedError(GenerationError):
    """Current time is before the configured epoch."""

    def __init__(self, now, epoch, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context.update(now=now, epoch=epoch)
        super().__init__("current time is before the configured epoch", context=context, **kwargs)


class RandomSourceError(GenerationError):
    """Random source failed or ran out of bytes."""


class TickOverflowError(GenerationError):
    """Elapsed ticks do not fit in 64 bits."""

    def __init__(self, ticks, **kwargs):
        context = dict(kwargs.pop("context", {}))
        context["ticks"] = ticks
        super().__init__("elapsed ticks exceed 64 bits", context=context, **kwargs)


class FatalError(FlexIdError):
    """Unrecoverable failure from a must-style call or the default generator."""
