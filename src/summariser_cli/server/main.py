from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from typing import Dict, List, Optional
from .models import ErrorResponse, SummariseRequest, SummariseResponse, SummaryRow
from ..db import DB
from ..errors import SummariserError
from ..service import SummariseService


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def create_app(service: SummariseService, store: Optional[DB] = None) -> FastAPI:
    store = store if store is not None else service.store

    app = FastAPI(title="Summariser Service", version="0.1")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # dev friendly; tighten later
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        return _error("Invalid request body", 400)

    if store is not None:
        @app.on_event("shutdown")
        def _shutdown():
            store.close()

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.post("/summarise", response_model=SummariseResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
    async def summarise(req: SummariseRequest):
        try:
            result = await service.summarise(text=req.text, url=req.url, translate=req.translate)
        except SummariserError as ex:
            logger.info("Rejected summarise request: {}", ex)
            return _error(str(ex), ex.status_code)
        except Exception as ex:
            logger.exception("Unhandled error while summarising")
            return _error(str(ex) or "Internal server error", 500)
        return SummariseResponse(
            summary=result.summary,
            translated_summary=result.translated_summary,
            original_length=result.original_length,
            summary_length=result.summary_length,
        )

    @app.get("/summaries", response_model=List[SummaryRow])
    def list_summaries(limit: int = 20):
        if store is None:
            return []
        return [SummaryRow(**dict(r)) for r in store.recent_summaries(limit)]

    @app.get("/stats")
    def stats() -> Dict[str, int]:
        if store is None:
            return {}
        return store.stats()

    return app
