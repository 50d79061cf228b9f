from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from index.tfidf import TfidfError
from search.config import SimilarityConfig
from search.pipeline import SAMPLE_DOCUMENTS, run_similarity

app = FastAPI(title="docsim API", version="0.1.0")


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


class SimilarityRequest(BaseModel):
    documents: list[str]
    strict_empty: bool | None = None  # falls back to DOCSIM_STRICT_EMPTY


def _report(documents: list[str], cfg: SimilarityConfig) -> dict[str, Any]:
    try:
        report = run_similarity(documents, cfg)
    except TfidfError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return report.to_dict()


@app.post("/similarity")
def similarity(body: SimilarityRequest) -> dict[str, Any]:
    cfg = SimilarityConfig.from_env()
    if body.strict_empty is not None:
        cfg.strict_empty = body.strict_empty
    return _report(body.documents, cfg)


@app.get("/similarity/sample")
def similarity_sample() -> dict[str, Any]:
    return _report(list(SAMPLE_DOCUMENTS), SimilarityConfig.from_env())
