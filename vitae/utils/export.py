# PDF EXPORT (WeasyPrint)
def export_pdf_bytes(html_string: str) -> bytes:
    # Imported here: WeasyPrint needs Pango at import time, and only this engine uses it
    from weasyprint import HTML

    return HTML(string=html_string).write_pdf()
