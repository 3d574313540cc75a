"""
Brand Kit Webhook: HTTP server

FastAPI app that receives form/CRM (GoHighLevel) submissions and answers
with the generated brand kit.

Usage:
    python run_server.py
    # Then POST JSON to http://localhost:8000/api/ghl-webhook
"""
import json
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from brand_kit_pipeline import BrandKitPipeline
from utils.logger import get_logger

logger = get_logger(__name__)

WEBHOOK_PATH = "/api/ghl-webhook"

app = FastAPI(title="Brand Kit Webhook")

# Built on first request so tests can swap in their own pipeline
_pipeline: Optional[BrandKitPipeline] = None


def get_pipeline() -> BrandKitPipeline:
    global _pipeline
    if _pipeline is None:
        _pipeline = BrandKitPipeline()
    return _pipeline


def set_pipeline(pipeline: Optional[BrandKitPipeline]):
    """Replace the pipeline used by the webhook (None resets to default)"""
    global _pipeline
    _pipeline = pipeline


async def _read_json_body(request: Request) -> Any:
    """Parsed body, or {} when it is empty or not JSON"""
    body = await request.body()
    if not body.strip():
        return {}
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Webhook body is not valid JSON, treating as empty intake: {e}")
        return {}


@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.api_route(WEBHOOK_PATH, methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def ghl_webhook(request: Request):
    """
    Generate a brand kit from a submission

    GET doubles as a health check and returns a usage hint; any method
    other than GET/POST is rejected with 405.
    """
    if request.method == "GET":
        return JSONResponse(status_code=200, content={"ok": True, "msg": "Use POST with JSON body."})
    if request.method != "POST":
        return JSONResponse(status_code=405, content={"ok": False, "error": "Method not allowed"})

    try:
        payload = await _read_json_body(request)
        result = await run_in_threadpool(get_pipeline().run, payload)
        return JSONResponse(status_code=200, content=result)
    except Exception as e:
        logger.error(f"Webhook error: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"ok": False, "error": str(e)})
