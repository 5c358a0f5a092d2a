"""Error taxonomy for the rendering and export pipeline."""


class VitaeError(Exception):
    """Base class for every error raised by this package."""

    status_code = 500

    def to_payload(self) -> dict:
        return {"error": str(self)}


class ResumeValidationError(VitaeError):
    """Resume data failed the export validation gate."""

    status_code = 400

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("Resume data is incomplete")

    def to_payload(self) -> dict:
        return {"error": str(self), "errors": self.errors}


class DocumentGenerationError(VitaeError):
    """The assembler raised or produced an empty document."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to generate HTML: {reason}")


class PdfExportError(VitaeError):
    """The PDF engine could not turn the document into bytes."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to generate PDF: {reason}")


class TemplateNotFoundError(VitaeError):
    status_code = 404

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__("Template not found")

    def to_payload(self) -> dict:
        return {"error": str(self), "template": self.template_id}


class PremiumTemplateError(VitaeError):
    status_code = 403

    def __init__(self, template_id: str):
        self.template_id = template_id
        super().__init__("This template requires a premium subscription")

    def to_payload(self) -> dict:
        return {"error": str(self), "template": self.template_id}


class SubscriptionLookupError(VitaeError):
    """The subscription store could not be queried."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to check template access: {reason}")

    def to_payload(self) -> dict:
        return {
            "error": "Failed to check template access",
            "isPremium": False,
            "plan": "free",
            "status": "error",
        }
