"""
Configuration settings for the Vitae rendering backend.

Values are read from the environment (a local .env file is loaded first),
so deployments only need to export the variables they want to override.
"""

from dotenv import load_dotenv
load_dotenv()
import logging
import os

# Live preview: a burst of edits inside this window collapses to one render
PREVIEW_DEBOUNCE_MS = int(os.getenv("PREVIEW_DEBOUNCE_MS", "300"))

# PDF export
# Set to "playwright" (headless Chromium) or "weasyprint"
PDF_ENGINE = os.getenv("PDF_ENGINE", "playwright").lower()
PDF_FORMAT = os.getenv("PDF_FORMAT", "A4")

DEFAULT_TEMPLATE = os.getenv("DEFAULT_TEMPLATE", "modern")

# CORS for the builder frontend
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "resume_backend.log")

# Supabase (subscription lookups only)
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Anonymous drafts kept in memory
DRAFT_MAX_ENTRIES = int(os.getenv("DRAFT_MAX_ENTRIES", "1000"))


def configure_logging():
    handlers = [logging.StreamHandler()]
    if LOG_FILE:
        handlers.append(logging.FileHandler(LOG_FILE))

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s - [%(levelname)s] %(message)s",
        handlers=handlers,
    )
