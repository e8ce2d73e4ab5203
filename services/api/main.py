from __future__ import annotations

import logging
import uuid

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field

from site_drafter.brief_io import BriefImportError, load_brief
from site_drafter.compiler import SiteCompiler
from site_drafter.exporter import ExportBlockedError, export_filename, render_standalone_html
from site_drafter.guardrails import GuardrailEvaluator
from site_drafter.logging_config import set_session_id, setup_logging
from site_drafter.models.brief import Brief
from site_drafter.models.checklist import Checklist
from site_drafter.models.dsl import SiteDocument
from site_drafter.normalizer import BriefForm, brief_to_form, normalize_form
from site_drafter.project_store import (
    FirestoreProjectStore,
    LocalProjectStore,
    ProjectNotFoundError,
    ProjectStore,
)
from site_drafter.settings import Settings


class CompileResponse(BaseModel):
    document: SiteDocument
    checklist: Checklist


class ImportBriefRequest(BaseModel):
    content: str = Field(description="Raw JSON text of a previously exported brief")


class ExportRequest(BaseModel):
    brief: Brief
    project_name: str | None = None


class ProjectListResponse(BaseModel):
    names: list[str]


class ProjectResponse(BaseModel):
    name: str
    brief: Brief
    form: BriefForm


settings = Settings.from_env()
setup_logging(environment=settings.environment, project_id=settings.project_id)
logger = logging.getLogger(__name__)

app = FastAPI(title="Site Drafter API", version="0.1.0")

compiler = SiteCompiler()
evaluator = GuardrailEvaluator()

if settings.store_backend == "firestore":
    _project_store: ProjectStore = FirestoreProjectStore(project_id=settings.project_id)
else:
    _project_store = LocalProjectStore(path=settings.store_path)


def get_project_store() -> ProjectStore:
    return _project_store


@app.middleware("http")
async def bind_session_id(request: Request, call_next):
    set_session_id(request.headers.get("x-session-id") or uuid.uuid4().hex)
    return await call_next(request)


@app.post("/v1/briefs:normalize", response_model=Brief)
async def normalize(form: BriefForm) -> Brief:
    return normalize_form(form)


@app.post("/v1/briefs:compile", response_model=CompileResponse)
async def compile_brief(brief: Brief) -> CompileResponse:
    return CompileResponse(document=compiler.compile(brief), checklist=evaluator.evaluate(brief))


@app.post("/v1/briefs:import", response_model=Brief)
async def import_brief(request: ImportBriefRequest) -> Brief:
    try:
        return load_brief(request.content)
    except BriefImportError as exc:
        logger.info("Rejected brief import", extra={"error": str(exc)})
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/v1/briefs:export", response_class=HTMLResponse)
async def export_html(request: ExportRequest) -> HTMLResponse:
    checklist = evaluator.evaluate(request.brief)
    try:
        html = render_standalone_html(compiler.compile(request.brief), checklist)
    except ExportBlockedError as exc:
        raise HTTPException(status_code=409, detail={"message": str(exc), "failing": exc.failing})
    filename = export_filename(request.project_name or request.brief.company.name)
    return HTMLResponse(html, headers={"Content-Disposition": f'attachment; filename="{filename}"'})


@app.get("/v1/projects", response_model=ProjectListResponse)
async def list_projects(store: ProjectStore = Depends(get_project_store)) -> ProjectListResponse:
    return ProjectListResponse(names=store.list_names())


@app.get("/v1/projects/{name}", response_model=ProjectResponse)
async def get_project(name: str, store: ProjectStore = Depends(get_project_store)) -> ProjectResponse:
    try:
        brief = store.load(name)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ProjectResponse(name=name.strip(), brief=brief, form=brief_to_form(brief))


@app.put("/v1/projects/{name}", response_model=ProjectListResponse)
async def save_project(name: str, brief: Brief, store: ProjectStore = Depends(get_project_store)) -> ProjectListResponse:
    try:
        store.save(name, brief)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ProjectListResponse(names=store.list_names())


@app.delete("/v1/projects/{name}", response_model=ProjectListResponse)
async def delete_project(name: str, store: ProjectStore = Depends(get_project_store)) -> ProjectListResponse:
    try:
        store.delete(name)
    except ProjectNotFoundError:
        raise HTTPException(status_code=404, detail="Project not found")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ProjectListResponse(names=store.list_names())


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})
