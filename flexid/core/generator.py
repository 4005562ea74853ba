"""
Identifier generator.

An identifier is the number of ticks elapsed since the epoch, encoded in the
configured alphabet, followed by a fixed number of random characters from the
same alphabet. Identifiers produced at increasing ticks sort lexicographically
as long as the alphabet is in ascending character order and the encoded tick
count keeps the same length.
"""

import threading

from flexid.config import GeneratorConfig
from flexid.core.errors import EpochNotReachedError, FatalError, FlexIdError, TickOverflowError
from flexid.internal.logging import get_logger
from flexid.utils.encoding import MAX_UINT64, decode, encode
from flexid.utils.sampling import sample
from flexid.utils.timestamp import from_nanos, to_nanos, to_utc

_default_generator = None
_default_lock = threading.Lock()


class Generator:
    """Generates identifiers from a fixed, validated configuration.

    Holds no per-call state, so one instance can be shared between threads.
    """

    __slots__ = ("_config", "_base", "_epoch_ns")

    def __init__(self, config=None):
        config = (config if config is not None else GeneratorConfig()).validate()
        self._config = config.with_epoch(to_utc(config.epoch))
        self._base = len(config.alphabet)
        self._epoch_ns = to_nanos(self._config.epoch)

    @property
    def config(self):
        return self._config

    @property
    def base(self):
        return self._base

    def generate(self):
        """Return a new identifier.

        Raises EpochNotReachedError when the clock is behind the epoch,
        TickOverflowError when the tick count needs more than 64 bits and
        RandomSourceError when the random source fails.
        """
        config = self._config
        time_part = ""
        if config.tick_size > 0:
            now_ns = to_nanos(config.time_source())
            if now_ns < self._epoch_ns:
                raise EpochNotReachedError(from_nanos(now_ns), config.epoch)

            ticks = (now_ns - self._epoch_ns) // config.tick_size
            if ticks > MAX_UINT64:
                raise TickOverflowError(ticks)
            time_part = encode(ticks, config.alphabet, self._base)

        random_part = sample(config.num_random_chars, config.alphabet, config.random_source, self._base)
        return time_part + random_part

    def must_generate(self):
        """Like generate(), but any failure becomes a FatalError."""
        try:
            return self.generate()
        except FlexIdError as exc:
            get_logger().error("identifier generation failed", error=exc, kind=type(exc).__name__)
            raise FatalError("identifier generation failed", context=dict(exc.context), cause=exc) from exc

    def time_of(self, identifier):
        """Start of the tick encoded in ``identifier``, as a UTC datetime."""
        config = self._config
        if config.tick_size == 0:
            raise ValueError("generator has no time component")

        time_len = len(identifier) - config.num_random_chars
        if time_len < 1:
            raise ValueError(f"identifier {identifier!r} is too short")

        ticks = decode(identifier[:time_len], config.alphabet)
        return from_nanos(self._epoch_ns + ticks * config.tick_size)

    def __repr__(self):
        return f"Generator({self._config!r})"


def create_generator(config=None):
    return Generator(config)


def must_create_generator(config=None):
    """Like create_generator(), but an invalid configuration becomes a FatalError."""
    try:
        return Generator(config)
    except FlexIdError as exc:
        get_logger().error("invalid generator configuration", error=exc, kind=type(exc).__name__)
        raise FatalError("invalid generator configuration", context=dict(exc.context), cause=exc) from exc


def get_default_generator():
    """Process-wide generator with the default configuration, built on first use."""
    global _default_generator
    if _default_generator is None:
        with _default_lock:
            if _default_generator is None:
                try:
                    _default_generator = Generator(GeneratorConfig())
                except FlexIdError as exc:
                    raise FatalError("failed to initialize default generator", cause=exc) from exc
                get_logger().debug("default generator initialized", base=_default_generator.base)
    return _default_generator


def generate():
    """Generate an identifier with the default generator."""
    return get_default_generator().generate()


def must_generate():
    return get_default_generator().must_generate()
