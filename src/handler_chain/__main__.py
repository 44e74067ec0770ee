import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import loguru

from handler_chain.chain import HandlerChain
from handler_chain.config_models import Config
from handler_chain.locales.i18n import I18n
from handler_chain.locales.i18n import gettext as _
from handler_chain.utils.storage import ConfigStorage

logger = loguru.logger

DEFAULT_REQUESTS = ("A", "B", "C", "D")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="handler-chain",
                                     description="Route request tags through a chain of handlers.")
    parser.add_argument("-c", "--config", type=Path, help="Path to the config base folder")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("requests", nargs="*", default=list(DEFAULT_REQUESTS), help="Request tags to dispatch")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    def logger_level_setup(config: Config):
        logger.remove()
        if config.debug or args.debug:
            logger.add(sys.stderr, level="DEBUG")
            logger.warning(_("Debug mode is enabled."))
        else:
            logger.add(sys.stderr, level=config.log_level)

    try:
        config = ConfigStorage.load(args.config).config
    except (ValueError, OSError) as e:
        logger.error(_("Failed to load the config: {}").format(e))
        return 2

    I18n.get_instance().set_locale(config.program_display_language)
    logger_level_setup(config)

    chain = HandlerChain.from_config(config)
    for request in args.requests:
        outcome = chain.handle(request)
        print(outcome.message)
    return 0


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
