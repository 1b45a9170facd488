from __future__ import annotations
from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import logging, typing as t

# ---- Engine imports ----
from ssb_core import config
from ssb_core.aggregator import analyze_test
from ssb_core.analyzer import analyze_response
from ssb_core.word_bank import WORD_BANK, get_test_words
from ssb_core.stats import summarize_history
from ssb_core.tips import WAT_TIPS
from ssb_core.export import to_json as export_to_json, to_csv as export_to_csv
from ssb_core import oir
from ssb_core.store import ResultStore
from .storage import DATA_ROOT, FileResultStore, utcnow_iso

log = logging.getLogger(__name__)

STORE: ResultStore = FileResultStore(DATA_ROOT)

app = FastAPI(title="SSB Scoring API")

@app.get("/")
def root():
    return {"status": "ok", "service": "ssb-scoring-api"}

ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)

# ---- Schemas ----
class WatItem(BaseModel):
    word: str
    response: str | None = None   # missing == empty

class WatSubmitReq(BaseModel):
    userId: str | None = None
    responses: list[WatItem] | None = None
    totalTimeUsed: float | None = Field(default=None, ge=0)

class AnalyzeReq(BaseModel):
    word: str | None = None
    response: str | None = None

class OirSubmitReq(BaseModel):
    test_id: str | None = None
    answers: dict[str, t.Any] | None = None
    time_taken: float | None = Field(default=None, ge=0)

class OirAnalyticsReq(BaseModel):
    test_result: dict[str, t.Any] | None = None

# ---- Helpers ----
def _load_wat_result(result_id: str) -> dict[str, t.Any]:
    record = STORE.load(result_id)
    if not record or (record.get("meta") or {}).get("kind") != "wat":
        raise HTTPException(404, "result not found")
    return record

# ---- Health ----
@app.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": utcnow_iso(),
        "services": ["wat", "oir"],
        "data_dir": str(STORE.root),
    }

# ---- WAT ----
@app.get("/api/wat/words")
def wat_words(count: int | None = Query(None, description="Number of stimulus words")):
    if count is None or count <= 0:
        count = config.WAT_DEFAULT_WORD_COUNT
    words = get_test_words(count)
    return {"success": True, "words": words, "count": len(words), "message": "Words retrieved successfully"}

@app.post("/api/wat/submit")
def wat_submit(req: WatSubmitReq):
    if not req.userId:
        raise HTTPException(400, "User ID is required")
    if req.responses is None:
        raise HTTPException(400, "Responses array is required")

    total_time = req.totalTimeUsed or 0
    analysis = analyze_test([r.model_dump() for r in req.responses], total_time).to_dict()
    record = dict(analysis, submittedAt=utcnow_iso(), totalTimeUsed=total_time)
    result_id = STORE.save(req.userId, "wat", record)
    log.info("wat submit user=%s responses=%d score=%d result=%s",
             req.userId, analysis["totalResponses"], analysis["overallScore"], result_id)
    return {
        "success": True,
        "message": "Test analyzed successfully",
        "score": analysis["overallScore"],
        "completedWords": analysis["totalResponses"],
        **analysis,
        "resultId": result_id,
    }

@app.post("/api/wat/analyze-response")
def wat_analyze_response(req: AnalyzeReq):
    if not req.word or not req.response:
        raise HTTPException(400, "Word and response are required")
    analysis = analyze_response(req.word, req.response)
    return {"success": True, "analysis": analysis.to_dict(), "message": "Response analyzed successfully"}

@app.get("/api/wat/history/{user_id}")
def wat_history(user_id: str):
    history = STORE.history(user_id, kind="wat", limit=config.HISTORY_LIMIT)
    return {"success": True, "history": history, "message": "History retrieved successfully"}

@app.get("/api/wat/stats/{user_id}")
def wat_stats(user_id: str):
    history = STORE.history(user_id, kind="wat", limit=config.HISTORY_LIMIT)
    stats = summarize_history(list(reversed(history)))
    return {"success": True, "stats": stats, "message": "Statistics retrieved successfully"}

@app.get("/api/wat/tips")
def wat_tips():
    return {"success": True, "tips": WAT_TIPS, "message": "Tips retrieved successfully"}

@app.get("/api/wat/health")
def wat_health():
    return {
        "success": True,
        "service": "WAT Service",
        "status": "running",
        "timestamp": utcnow_iso(),
        "wordBankSize": len(WORD_BANK),
    }

@app.get("/api/wat/results/{result_id}")
def wat_result(result_id: str):
    return _load_wat_result(result_id)

@app.get("/api/wat/results/{result_id}/analysis.json")
def wat_result_json(result_id: str):
    if not config.EXPORT_ENABLED:
        raise HTTPException(404, "export disabled")
    record = _load_wat_result(result_id)
    return {"result_id": result_id, **export_to_json(record.get("detailedAnalysis") or [])}

@app.get("/api/wat/results/{result_id}/analysis.csv")
def wat_result_csv(result_id: str):
    if not config.EXPORT_ENABLED:
        raise HTTPException(404, "export disabled")
    record = _load_wat_result(result_id)
    body = export_to_csv(record.get("detailedAnalysis") or [])
    filename = f"{result_id}_analysis.csv"
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=\"{filename}\""},
    )

@app.delete("/api/wat/results/{result_id}")
def wat_result_delete(result_id: str):
    ok = STORE.delete(result_id)
    if not ok:
        raise HTTPException(404, "result not found")
    return {"ok": True}

# ---- OIR ----
@app.get("/api/oir/generate-test")
def oir_generate():
    return {"success": True, "data": oir.generate_test()}

@app.post("/api/oir/submit-test")
def oir_submit(req: OirSubmitReq):
    if not req.test_id or req.answers is None:
        raise HTTPException(400, "Missing required fields: test_id and answers")
    result = oir.evaluate_test(req.test_id, req.answers, req.time_taken or 0)
    log.info("oir submit test=%s score=%d attempted=%d", req.test_id, result.score, result.attempted_questions)
    return {"success": True, "data": result.to_dict()}

@app.post("/api/oir/get-analytics")
def oir_analytics(req: OirAnalyticsReq):
    if not req.test_result:
        raise HTTPException(400, "Missing required field: test_result")
    return {"success": True, "data": oir.result_analytics(req.test_result)}

@app.get("/api/oir/test-info")
def oir_test_info():
    return {"success": True, "data": oir.TEST_INFO}
