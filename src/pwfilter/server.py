# src/pwfilter/server.py
import os
from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pwfilter.config import load_config
from pwfilter.core.exceptions import PWFilterConfigError
from pwfilter.core.findings import Candidate
from pwfilter.core.models import FindingRecord
from pwfilter.postprocess.pipeline import evaluate

APP_NAME = "pwfilter"
CONFIG_PATH = os.getenv("PWFILTER_CONFIG")

app = FastAPI(title=APP_NAME)


class PostprocessRequest(BaseModel):
    candidates: List[FindingRecord]


class VerdictOut(BaseModel):
    confidence: int
    ignore: bool
    reasons: List[str]


class PostprocessResponse(BaseModel):
    ok: bool = True
    results: List[VerdictOut]


@app.get("/health")
def health():
    return {"ok": True, "service": APP_NAME}


@app.post("/postprocess", response_model=PostprocessResponse)
def postprocess(req: PostprocessRequest):
    try:
        config = load_config(CONFIG_PATH)
    except PWFilterConfigError as e:
        raise HTTPException(status_code=500, detail=f"config_error: {e}")

    results = [
        evaluate(Candidate(fragment=c.match, line=c.line_text), config).to_dict()
        for c in req.candidates
    ]
    return {"ok": True, "results": results}
