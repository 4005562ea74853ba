import json
import os
from datetime import datetime
from pathlib import Path

from flexid.core.errors import (
    AlphabetTooLongError,
    AlphabetTooShortError,
    DuplicateAlphabetCharacterError,
    InvalidTickSizeError,
    NegativeRandomLengthError,
    NegativeTickSizeError,
)
from flexid.utils.encoding import ALPHABETS, DEFAULT_ALPHABET
from flexid.utils.timestamp import MILLISECOND, UNIX_EPOCH, now_nanos, to_duration_nanos

_DEFAULT_CONFIG = Path("flexid.json")

MAX_ALPHABET_SIZE = 256


class GeneratorConfig:
    """Immutable generator settings. Refine with the ``with_*`` methods."""

    __slots__ = ("epoch", "tick_size", "alphabet", "num_random_chars", "time_source", "random_source")

    def __init__(
        self,
        epoch=UNIX_EPOCH,
        tick_size=MILLISECOND,
        alphabet=DEFAULT_ALPHABET,
        num_random_chars=5,
        time_source=now_nanos,
        random_source=os.urandom,
    ):
        if hasattr(random_source, "read"):
            random_source = random_source.read
        try:
            tick_nanos = to_duration_nanos(tick_size)
        except (TypeError, ValueError) as exc:
            raise InvalidTickSizeError(tick_size, cause=exc) from exc
        object.__setattr__(self, "epoch", epoch)
        object.__setattr__(self, "tick_size", tick_nanos)
        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "num_random_chars", num_random_chars)
        object.__setattr__(self, "time_source", time_source)
        object.__setattr__(self, "random_source", random_source)

    def __setattr__(self, name, value):
        raise AttributeError(f"GeneratorConfig is immutable, use with_{name}() instead")

    def __eq__(self, other):
        if not isinstance(other, GeneratorConfig):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __hash__(self):
        return hash(tuple(getattr(self, name) for name in self.__slots__))

    def __repr__(self):
        return (
            f"GeneratorConfig(epoch={self.epoch!r}, tick_size={self.tick_size}, "
            f"alphabet={self.alphabet!r}, num_random_chars={self.num_random_chars})"
        )

    def _replace(self, **changes):
        values = {name: getattr(self, name) for name in self.__slots__}
        values.update(changes)
        return GeneratorConfig(**values)

    def with_epoch(self, epoch):
        return self._replace(epoch=epoch)

    def with_tick_size(self, tick_size):
        return self._replace(tick_size=tick_size)

    def with_alphabet(self, alphabet):
        return self._replace(alphabet=alphabet)

    def with_num_random_chars(self, num_random_chars):
        return self._replace(num_random_chars=num_random_chars)

    def with_time_source(self, time_source):
        return self._replace(time_source=time_source)

    def with_random_source(self, random_source):
        return self._replace(random_source=random_source)

    def validate(self):
        """Raise a ConfigError subclass if the settings cannot build a generator."""
        if len(self.alphabet) < 2:
            raise AlphabetTooShortError(len(self.alphabet))
        if len(self.alphabet) > MAX_ALPHABET_SIZE:
            raise AlphabetTooLongError(len(self.alphabet))

        seen = set()
        for char in self.alphabet:
            if char in seen:
                raise DuplicateAlphabetCharacterError(char)
            seen.add(char)

        if self.num_random_chars < 0:
            raise NegativeRandomLengthError(self.num_random_chars)
        if self.tick_size < 0:
            raise NegativeTickSizeError(self.tick_size)
        return self

    @classmethod
    def from_dict(cls, d):
        kwargs = {}
        if "epoch" in d:
            kwargs["epoch"] = datetime.fromisoformat(d["epoch"])
        if "tick_size" in d:
            kwargs["tick_size"] = d["tick_size"]
        if "alphabet" in d:
            kwargs["alphabet"] = ALPHABETS.get(d["alphabet"], d["alphabet"])
        if "num_random_chars" in d:
            kwargs["num_random_chars"] = d["num_random_chars"]
        return cls(**kwargs)


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("generator", "logging")

    def __init__(self, generator=None, logging=None):
        self.generator = generator or GeneratorConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            GeneratorConfig.from_dict(d.get("generator", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def new_config():
    """Default settings: Unix epoch, 1ms ticks, base62 alphabet, 5 random chars."""
    return GeneratorConfig()


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
