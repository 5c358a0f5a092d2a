from fastapi import APIRouter, HTTPException, Response

from vitae import config
from vitae.models import CamelModel, ResumeData
from vitae.services.draft_service import autosave_draft, clear_draft, load_draft

router = APIRouter()


class DraftRequest(CamelModel):
    resume_data: ResumeData
    template: str = config.DEFAULT_TEMPLATE
    draft_id: str | None = None


# Autosave an anonymous builder session
@router.post("")
def save_draft(req: DraftRequest):
    draft = autosave_draft(req.resume_data, req.template, req.draft_id)
    if draft is None:
        return Response(status_code=204)
    return draft.model_dump(by_alias=True)


@router.get("/{draft_id}")
def get_draft(draft_id: str):
    draft = load_draft(draft_id)
    if draft is None:
        raise HTTPException(status_code=404, detail="Draft not found")
    return draft.model_dump(by_alias=True)


@router.delete("/{draft_id}")
def delete_draft(draft_id: str):
    if not clear_draft(draft_id):
        raise HTTPException(status_code=404, detail="Draft not found")
    return {"message": "Deleted"}
