import time
import uuid
from collections import OrderedDict

from pydantic import Field

from vitae import config
from vitae.models import CamelModel, ResumeData


class LocalDraft(CamelModel):
    draft_id: str
    resume_data: ResumeData
    selected_template: str
    last_modified: int = Field(description="Milliseconds since the epoch")


# In-memory draft storage for anonymous builder sessions, oldest first
DRAFTS: "OrderedDict[str, LocalDraft]" = OrderedDict()


def _now_ms() -> int:
    return int(time.time() * 1000)


def save_draft(resume_data: ResumeData, selected_template: str, draft_id: str | None = None) -> LocalDraft:
    draft_id = draft_id or str(uuid.uuid4())
    draft = LocalDraft(
        draft_id=draft_id,
        resume_data=resume_data,
        selected_template=selected_template,
        last_modified=_now_ms(),
    )

    DRAFTS.pop(draft_id, None)
    DRAFTS[draft_id] = draft
    while len(DRAFTS) > config.DRAFT_MAX_ENTRIES:
        DRAFTS.popitem(last=False)

    return draft


def autosave_draft(resume_data: ResumeData, selected_template: str, draft_id: str | None = None):
    # Blank forms are not worth keeping
    if not resume_data.has_content():
        return None
    return save_draft(resume_data, selected_template, draft_id)


def load_draft(draft_id: str) -> LocalDraft | None:
    return DRAFTS.get(draft_id)


def clear_draft(draft_id: str) -> bool:
    return DRAFTS.pop(draft_id, None) is not None


def has_draft(draft_id: str) -> bool:
    return draft_id in DRAFTS


def get_last_modified(draft_id: str) -> int | None:
    draft = DRAFTS.get(draft_id)
    return draft.last_modified if draft else None
