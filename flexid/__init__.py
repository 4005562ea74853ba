"""Short, sortable identifiers: an encoded tick count followed by random characters."""

from flexid.bootstrap import bootstrap
from flexid.config import Config, GeneratorConfig, LoggingConfig, load_config, new_config
from flexid.core.errors import (
    AlphabetTooLongError,
    AlphabetTooShortError,
    ConfigError,
    DuplicateAlphabetCharacterError,
    EpochNotReachedError,
    FatalError,
    FlexIdError,
    GenerationError,
    InvalidTickSizeError,
    NegativeRandomLengthError,
    NegativeTickSizeError,
    RandomSourceError,
    TickOverflowError,
)
from flexid.core.generator import (
    Generator,
    create_generator,
    generate,
    get_default_generator,
    must_create_generator,
    must_generate,
)
from flexid.utils.encoding import (
    ALPHABETS,
    BASE16_LOWER_ALPHABET,
    BASE16_UPPER_ALPHABET,
    BASE36_ALPHABET,
    BASE62_ALPHABET,
    BASE64_URL_ALPHABET,
    CROCKFORD_BASE32_ALPHABET,
    DEFAULT_ALPHABET,
    decode,
    encode,
)
from flexid.utils.sampling import sample
from flexid.utils.timestamp import (
    CENTISECOND,
    DAY,
    DECISECOND,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    TICK_SIZES,
    UNIX_EPOCH,
)

__version__ = "0.3.0"

__all__ = [
    "ALPHABETS",
    "AlphabetTooLongError",
    "AlphabetTooShortError",
    "BASE16_LOWER_ALPHABET",
    "BASE16_UPPER_ALPHABET",
    "BASE36_ALPHABET",
    "BASE62_ALPHABET",
    "BASE64_URL_ALPHABET",
    "CENTISECOND",
    "CROCKFORD_BASE32_ALPHABET",
    "Config",
    "ConfigError",
    "DAY",
    "DECISECOND",
    "DEFAULT_ALPHABET",
    "DuplicateAlphabetCharacterError",
    "EpochNotReachedError",
    "FatalError",
    "FlexIdError",
    "GenerationError",
    "Generator",
    "GeneratorConfig",
    "HOUR",
    "InvalidTickSizeError",
    "LoggingConfig",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "NegativeRandomLengthError",
    "NegativeTickSizeError",
    "RandomSourceError",
    "SECOND",
    "TICK_SIZES",
    "TickOverflowError",
    "UNIX_EPOCH",
    "bootstrap",
    "create_generator",
    "decode",
    "encode",
    "generate",
    "get_default_generator",
    "load_config",
    "must_create_generator",
    "must_generate",
    "new_config",
    "sample",
]
