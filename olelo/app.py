import logging
import os
import time
from typing import Any, Dict, List

from flask import Flask, jsonify, request

from olelo.dictionary import Dictionary, SEARCH_FIELDS
from olelo.generator import sample_records
from olelo.log import setup_logging
from olelo.query_engine import QueryEngine
from olelo.records import Record

logger = logging.getLogger(__name__)

app = Flask(__name__)

dictionary = Dictionary()
engine = QueryEngine(dictionary)

STATE: Dict[str, Any] = {"csv_path": None, "csv_loaded": False}

DEFAULT_CSV_PATH = os.environ.get("OLELO_CSV_PATH", "")


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_limit(raw, default: int = 50) -> int:
    try:
        return max(1, min(200, int(raw)))
    except (TypeError, ValueError):
        return default

def warm_start(csv_path: str = None):
    """Ingest the configured CSV, or seed the sample phrases if there is none."""
    csv_path = (csv_path if csv_path is not None else DEFAULT_CSV_PATH).strip()
    STATE["csv_path"] = csv_path or None

    t0 = time.time()
    if csv_path and os.path.exists(csv_path):
        dictionary.ingest_csv(csv_path)
        STATE["csv_loaded"] = True
    else:
        if csv_path:
            logger.warning("[warm_start] CSV not found: %s; seeding sample phrases", csv_path)
        for record in sample_records():
            dictionary.insert(record)
    t1 = time.time()
    logger.info("[warm_start] %d phrases indexed in %.2fs", len(dictionary), t1 - t0)


@app.get("/api/status")
def api_status():
    return ok({
        "csv_path": STATE["csv_path"],
        "csv_loaded": STATE["csv_loaded"],
        "phrases": len(dictionary),
        "index_height": dictionary.index.height(),
    })


@app.get("/api/entries/<text>")
def api_entry(text: str):
    rec = dictionary.lookup(text)
    if rec is None:
        return err("phrase not found", 404)
    return ok(rec.to_dict())

@app.get("/api/entries/<text>/previous")
def api_entry_previous(text: str):
    if text not in dictionary:
        return err("phrase not found", 404)
    rec = dictionary.previous(text)
    if rec is None:
        return err("no previous phrase", 404)
    return ok(rec.to_dict())

@app.get("/api/entries/<text>/next")
def api_entry_next(text: str):
    if text not in dictionary:
        return err("phrase not found", 404)
    rec = dictionary.next(text)
    if rec is None:
        return err("no next phrase", 404)
    return ok(rec.to_dict())

@app.get("/api/first")
def api_first():
    rec = dictionary.first()
    if rec is None:
        return err("dictionary is empty", 404)
    return ok(rec.to_dict())

@app.get("/api/last")
def api_last():
    rec = dictionary.last()
    if rec is None:
        return err("dictionary is empty", 404)
    return ok(rec.to_dict())


@app.get("/api/search")
def api_search():
    q = request.args.get("q", "")
    field = request.args.get("field", "primary")
    if field not in SEARCH_FIELDS:
        return err(f"field must be one of {list(SEARCH_FIELDS)}")

    limit = parse_limit(request.args.get("limit", "50"))

    if field == "primary":
        matches = engine.by_text(q)
    else:
        matches = engine.by_translation(q)

    rows: List[Dict[str, Any]] = [rec.to_dict() for rec in matches[:limit]]
    return ok({"count_total": len(matches), "count_returned": len(rows), "rows": rows})


@app.post("/api/entries")
def api_entry_insert():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return err("request body must be a JSON object")

    required = ["text", "translation"]
    missing = [k for k in required if not str(data.get(k) or "").strip()]
    if missing:
        return err(f"missing fields: {missing}")

    record = Record(
        str(data["text"]).strip(),
        str(data["translation"]).strip(),
        str(data.get("explanation") or "").strip(),
        str(data.get("translated_explanation") or "").strip(),
    )

    if not dictionary.insert(record):
        return err("insert rejected (phrase already exists)", 409)

    logger.info("Inserted phrase %r", record.text)
    return ok(record.to_dict()), 201


if __name__ == "__main__":
    setup_logging()
    warm_start()
    # single-threaded: the index does no locking of its own
    app.run(host="127.0.0.1", port=5000, debug=True, use_reloader=False, threaded=False)
