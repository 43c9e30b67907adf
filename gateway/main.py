"""OrgChart Gateway — FastAPI entry point.

Run with:
    uvicorn gateway.main:app --port 3000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gateway.config import settings
from gateway.schemas import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    MoveRequest,
    OrgResponse,
)
from orgchart.app import EmployeeOrgApp
from orgchart.errors import EntityNotFound
from orgchart.org_utils import load_org
from orgchart.traversal import iter_employees

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
)
logger = logging.getLogger("gateway")

# Global chart instance, created on startup
chart: EmployeeOrgApp | None = None


# ---------------------------------------------------------------------------
# Lifespan — startup / shutdown hooks
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI):
    global chart

    logger.info("OrgChart Gateway starting on %s:%s", settings.host, settings.port)
    chart = EmployeeOrgApp(load_org(settings.org_file or None))
    logger.info("Org chart ready (ceo=%d)", chart.ceo.id)

    yield

    chart = None
    logger.info("OrgChart Gateway shutting down")


def get_chart() -> EmployeeOrgApp:
    if chart is None:
        raise HTTPException(status_code=503, detail="Org chart not initialized")
    return chart


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = FastAPI(
    title="OrgChart Gateway",
    version="0.1.0",
    description="Org chart reparenting with undo/redo",
    lifespan=lifespan,
)

origins = [o.strip() for o in settings.cors_origins.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"error": detail})


# ---------------------------------------------------------------------------
# HTTP routes
#
# Handlers are coroutines with no await points, so each chart operation runs
# to completion on the event loop before the next one starts.
# ---------------------------------------------------------------------------


@app.get("/health", response_model=HealthResponse, tags=["system"])
async def health():
    return HealthResponse()


@app.get("/org", response_model=OrgResponse, tags=["org"])
async def get_org(org: EmployeeOrgApp = Depends(get_chart)):
    """Return the live org chart."""
    return OrgResponse(
        ceo=org.ceo,
        size=sum(1 for _ in iter_employees(org.ceo)),
        undo_depth=len(org.history.undo_stack),
        redo_depth=len(org.history.redo_stack),
    )


@app.post(
    "/move",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
    tags=["org"],
)
async def move(body: MoveRequest, org: EmployeeOrgApp = Depends(get_chart)):
    """Move an employee under a new supervisor."""
    try:
        org.move(body.employeeID, body.supervisorID)
    except EntityNotFound as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    return MessageResponse(message="Employee moved successfully")


@app.post("/undo", response_model=MessageResponse, tags=["org"])
async def undo(org: EmployeeOrgApp = Depends(get_chart)):
    """Undo the last move. An empty history is not an error."""
    org.undo()
    return MessageResponse(message="Undo successful")


@app.post("/redo", response_model=MessageResponse, tags=["org"])
async def redo(org: EmployeeOrgApp = Depends(get_chart)):
    """Redo the last undone move. An empty redo stack is not an error."""
    org.redo()
    return MessageResponse(message="Redo successful")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("gateway.main:app", host=settings.host, port=settings.port, reload=settings.debug)
