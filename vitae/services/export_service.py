import logging
import os
import re
import tempfile

from playwright.async_api import async_playwright
from starlette.concurrency import run_in_threadpool

from vitae import config
from vitae.exceptions import PdfExportError
from vitae.render_resume import fill_template, load_template
from vitae.utils.export import export_pdf_bytes

AUTO_PRINT_SCRIPT = "window.onload = function() { window.print(); };"


async def html_to_pdf_bytes(html: str) -> bytes:
    """
    Render the given HTML string to a PDF using Playwright/Chromium.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        html_path = os.path.join(tmpdir, "resume.html")
        pdf_path = os.path.join(tmpdir, "resume.pdf")

        with open(html_path, "w", encoding="utf-8") as f:
            f.write(html)

        async with async_playwright() as p:
            browser = await p.chromium.launch(args=["--no-sandbox"])
            try:
                page = await browser.new_page()
                await page.goto(f"file://{html_path}", wait_until="networkidle")
                await page.pdf(
                    path=pdf_path,
                    format=config.PDF_FORMAT,
                    margin={"top": "0", "bottom": "0", "left": "0", "right": "0"},
                    print_background=True,
                    prefer_css_page_size=True,
                )
            finally:
                await browser.close()

        if not os.path.exists(pdf_path):
            raise PdfExportError("PDF was not generated.")

        with open(pdf_path, "rb") as f:
            return f.read()


async def generate_pdf(html: str) -> bytes:
    # Dispatch on the configured engine; any engine failure becomes a PdfExportError
    engine = config.PDF_ENGINE
    logging.info("Generating PDF with %s engine", engine)

    try:
        if engine == "weasyprint":
            # WeasyPrint is synchronous; keep it off the event loop
            pdf_bytes = await run_in_threadpool(export_pdf_bytes, html)
        elif engine == "playwright":
            pdf_bytes = await html_to_pdf_bytes(html)
        else:
            raise PdfExportError(f"unknown PDF engine '{engine}'")
    except PdfExportError:
        raise
    except Exception as e:
        logging.error("PDF generation failed: %s", e)
        raise PdfExportError(str(e)) from e

    if not pdf_bytes:
        raise PdfExportError("PDF was not generated.")

    logging.info("PDF generated successfully, size: %s", len(pdf_bytes))
    return pdf_bytes


def build_printable_html(html: str, auto_print: bool = False) -> str:
    """
    Add print styling, on-screen save-as-PDF instructions and a floating
    print button to a rendered resume.

    With auto_print the print dialog opens as soon as the page has loaded.
    """
    head = fill_template(load_template("print_head"), {
        "auto_print": AUTO_PRINT_SCRIPT if auto_print else "",
    })
    body = load_template("print_body")

    printable = html.replace("</head>", f"{head}</head>", 1)
    printable = printable.replace("<body>", f"<body>\n{body}", 1)
    return printable


def download_filename(name, ext: str = "pdf") -> str:
    slug = re.sub(r"\s+", "-", (name or "").strip().lower())
    slug = re.sub(r"[^a-z0-9_.-]", "", slug)
    if not slug:
        return f"resume.{ext}"
    return f"resume-{slug}.{ext}"
