"""Run the newsletter service: ``python -m nts`` or the ``nts`` console script."""

import asyncio

from nts.core.config import get_configuration
from nts.core.logging_config import setup_logging
from nts.server.startup import Application


def main() -> None:
    settings = get_configuration()
    setup_logging(settings.log_level, settings.log_format)
    application = Application.build(settings)
    asyncio.run(application.run_until_stopped())


if __name__ == "__main__":
    main()
