import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vitae import config
from vitae.exceptions import VitaeError
from vitae.routes import drafts, resume, templates

config.configure_logging()

app = FastAPI(
    title="Vitae Resume Builder Backend",
    description="Template catalog, live preview, validation and export of resumes.",
    version="1.0.0"
)

# CORS for the builder frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every failure reaches the client as {"error": ...}
@app.exception_handler(VitaeError)
async def vitae_error_handler(request: Request, exc: VitaeError):
    logging.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# ROUTES
app.include_router(resume.router, prefix="/resume")
app.include_router(templates.router, prefix="/templates")
app.include_router(drafts.router, prefix="/drafts")

@app.get("/")
def root():
    return {"message": "Backend running successfully."}
