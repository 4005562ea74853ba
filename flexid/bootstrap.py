"""Process setup from a flexid.json settings file."""

from flexid.config import load_config
from flexid.core.generator import Generator
from flexid.internal.logging import StructuredLogger, get_logger, parse_level
from flexid.utils.crash import configure as configure_crash, install_crash_handler


def bootstrap(path=None, install_crash=False):
    """Apply logging and crash settings, then build the configured generator."""
    config = load_config(path)

    StructuredLogger.configure(parse_level(config.logging.level))
    configure_crash(config.logging.crash_file)
    if install_crash:
        install_crash_handler()

    generator = Generator(config.generator)
    get_logger().info(
        "flexid ready",
        tick_size=generator.config.tick_size,
        base=generator.base,
        num_random_chars=generator.config.num_random_chars,
    )
    return generator
