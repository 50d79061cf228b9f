from __future__ import annotations

import logging
import os
import sys

from search.config import SimilarityConfig
from search.pipeline import SAMPLE_DOCUMENTS, run_similarity

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        stream=sys.stderr,
        level=os.getenv("DOCSIM_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    report = run_similarity(SAMPLE_DOCUMENTS, SimilarityConfig.from_env())
    if report.most_similar is None:
        logger.warning("no document to compare against the reference")
        return 1
    sys.stdout.write(str(report.most_similar))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
