import json
import logging

from fastapi import APIRouter, Response, WebSocket, WebSocketDisconnect
from fastapi.responses import HTMLResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from vitae import config
from vitae.models import CamelModel, ResumeData, new_resume, sample_resume
from vitae.services.export_service import build_printable_html, download_filename, generate_pdf
from vitae.services.preview_service import PreviewRenderer
from vitae.services.resume_service import (
    generate_document,
    generate_html_resume_service,
    prepare_export,
)
from vitae.validation import validate_resume_data

router = APIRouter()

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


class RenderRequest(CamelModel):
    resume_data: ResumeData
    template: str = config.DEFAULT_TEMPLATE


class ExportRequest(RenderRequest):
    # TODO: take the user id from an authenticated session once auth lands; the body value is trusted as is
    user_id: str | None = None


# Blank resume for a new builder session
@router.get("/new")
def get_new_resume():
    return new_resume().model_dump(by_alias=True)


# Sample data behind the "Preview" button
@router.get("/sample")
def get_sample_resume():
    return sample_resume().model_dump(by_alias=True)


@router.post("/validate")
def validate_resume(resume_data: ResumeData):
    return validate_resume_data(resume_data).model_dump(by_alias=True)


# Generate HTML resume
@router.post("/render")
def render_resume(req: RenderRequest):
    return generate_html_resume_service(req.resume_data, req.template)


# One-off preview, same document the exports produce
@router.post("/preview", response_class=HTMLResponse)
def preview_resume(req: RenderRequest):
    return HTMLResponse(generate_document(req.resume_data, req.template))


@router.websocket("/preview/ws")
async def preview_socket(websocket: WebSocket):
    await websocket.accept()
    renderer = PreviewRenderer(listener=websocket.send_json)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                req = RenderRequest.model_validate(json.loads(raw))
            except (json.JSONDecodeError, ValidationError) as e:
                logging.warning("Invalid preview message: %s", e)
                await websocket.send_json({"status": "error", "error": "Invalid preview request"})
                continue

            renderer.schedule(req.resume_data, req.template)
    except WebSocketDisconnect:
        logging.info("Preview socket closed")
    finally:
        renderer.cancel()


# Export PDF file
@router.post("/export/pdf")
async def export_pdf(req: ExportRequest):
    # The subscription lookup blocks, so run the gates in the threadpool
    html = await run_in_threadpool(prepare_export, req.resume_data, req.template, req.user_id)
    pdf_bytes = await generate_pdf(html)

    filename = download_filename(req.resume_data.personal_info.name, "pdf")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            **NO_CACHE_HEADERS,
        },
    )


# Printable HTML download (browser print-to-PDF)
@router.post("/export/html")
def export_html(req: ExportRequest):
    html = prepare_export(req.resume_data, req.template, req.user_id)

    filename = download_filename(req.resume_data.personal_info.name, "html")
    return Response(
        content=build_printable_html(html),
        media_type="text/html; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            **NO_CACHE_HEADERS,
        },
    )


# Print path: opens the print dialog once the page has loaded
@router.post("/export/print")
def export_print(req: ExportRequest):
    html = prepare_export(req.resume_data, req.template, req.user_id)

    return Response(
        content=build_printable_html(html, auto_print=True),
        media_type="text/html; charset=utf-8",
        headers={
            "Content-Disposition": "inline; filename=resume.html",
            **NO_CACHE_HEADERS,
        },
    )
