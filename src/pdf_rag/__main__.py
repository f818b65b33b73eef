"""Command-line entry point: ``python -m pdf_rag`` / ``pdf-rag``.

Everything is configured through the environment (see
:class:`pdf_rag.config.Settings`); there are no flags.
"""

from __future__ import annotations

import logging
import sys

from pdf_rag.config import Settings, settings
from pdf_rag.pipeline import run

logger = logging.getLogger("pdf_rag")


def main(config: Settings = settings) -> int:
    """Run the pipeline once; return the process exit code."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        answer = run(config)
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    logger.info("Answer: %s", answer)
    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
