from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class SimilarityConfig:
    strict_empty: bool = False  # raise on documents without words instead of tf = 0

    @classmethod
    def from_env(cls) -> SimilarityConfig:
        raw = os.getenv("DOCSIM_STRICT_EMPTY", "")
        return cls(strict_empty=raw.strip().lower() in _TRUTHY)
