"""
FastAPI backend for the Jira Story Generator.
Provides REST endpoints for the web UI: generate, format (copy) and export.
"""
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from typing import Dict, Any
import asyncio
import logging
from datetime import datetime
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from story_generator import __version__
from story_generator.agents.ticket_generator import TicketGeneratorAgent
from story_generator.core.config import Settings
from story_generator.core.models import TicketRecord, ticket_from_dict
from story_generator.utils.formatters import format_ticket, export_filename

settings = Settings.from_env()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Read once at startup; without a key every request uses the fallback tickets
llm_client = settings.build_llm_client()
generator = TicketGeneratorAgent(llm_client)

# Initialize FastAPI app
app = FastAPI(
    title="Jira Story Generator API",
    description="Backend API that turns task descriptions into Jira stories and bugs",
    version=__version__
)

# CORS middleware for React frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.debug("Request validation failed on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())}
    )


# ============================================================================
# Request/Response Models
# ============================================================================

class GenerateRequest(BaseModel):
    task: str
    type: str = "Story"

class FormatRequest(BaseModel):
    ticket: Dict[str, Any]
    show_gherkin: bool = False


def _parse_ticket(payload: Dict[str, Any]) -> TicketRecord:
    try:
        return ticket_from_dict(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


# ============================================================================
# Ticket Generation
# ============================================================================

@app.post("/api/tickets/generate")
async def generate_ticket(request: GenerateRequest):
    """Generate a Story or Bug from a task description."""
    try:
        result = await asyncio.to_thread(generator.generate, request.task, request.type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    response = result.to_dict()
    response["generated_at"] = datetime.now().isoformat()
    return response


@app.post("/api/tickets/format")
async def format_ticket_text(request: FormatRequest):
    """Render a ticket as plain text for the clipboard."""
    ticket = _parse_ticket(request.ticket)
    return {
        "text": format_ticket(ticket, request.show_gherkin),
        "filename": export_filename(ticket.title)
    }


@app.post("/api/tickets/export")
async def export_ticket(request: FormatRequest):
    """Export a ticket as a .txt attachment."""
    ticket = _parse_ticket(request.ticket)
    filename = export_filename(ticket.title)
    return PlainTextResponse(
        format_ticket(ticket, request.show_gherkin),
        headers={
            "Content-Disposition": f"attachment; filename={filename}"
        }
    )


# ============================================================================
# Status & Health Check
# ============================================================================

@app.get("/api/llm/status")
async def llm_status():
    """Report whether tickets come from the LLM or from templates."""
    return {
        "enabled": generator.ai_enabled,
        "label": llm_client.status_label() if llm_client else "AI: OFF (no key)"
    }


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "name": "Jira Story Generator API",
        "version": __version__,
        "status": "running"
    }


@app.get("/api/health")
async def health_check():
    """Detailed health check."""
    return {
        "status": "healthy",
        "ai_enabled": generator.ai_enabled,
        "timestamp": datetime.now().isoformat()
    }


if __name__ == "__main__":
    import uvicorn
    # Set API_HOST=0.0.0.0 to listen on all interfaces
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
