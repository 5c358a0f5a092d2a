"""
Live preview: debounced re-rendering of the resume while it is being edited.

The preview goes through the same render_document() as the exports, so what
the user sees is what they download. Every recompute first reports a
loading state (the spinner) and then either the HTML or a generic error.
"""

import asyncio
import inspect
import logging
from enum import Enum

from vitae import config
from vitae.exceptions import DocumentGenerationError
from vitae.services.resume_service import generate_document
from vitae.template_registry import get_template_by_id

PREVIEW_ERROR_MESSAGE = "Error generating preview"


class Debouncer:
    """
    Delay a callback until submissions have been quiet for `delay` seconds.

    Each submit() restarts the timer, so a burst of submissions results in a
    single call with the last submitted value. Callbacks run one at a time as
    tasks on the running loop; a run that fires while the previous one is
    still in flight waits for it to finish.
    """

    def __init__(self, delay: float, callback):
        self.delay = delay
        self.callback = callback
        self._handle = None
        self._value = None
        self._task = None
        self._settled = asyncio.Event()
        self._settled.set()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def submit(self, value):
        if self._handle is not None:
            self._handle.cancel()
        self._value = value
        self._settled.clear()
        self._handle = asyncio.get_running_loop().call_later(self.delay, self._fire)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._value = None
        if self._task is None or self._task.done():
            self._settled.set()

    async def wait(self):
        """Block until the pending timer has fired and its callback finished."""
        await self._settled.wait()

    def _fire(self):
        self._handle = None
        value, self._value = self._value, None

        # Runs are chained so a slow callback never overlaps the next one
        self._task = asyncio.ensure_future(self._run(self._task, value))
        self._task.add_done_callback(self._on_done)

    async def _run(self, previous, value):
        if previous is not None and not previous.done():
            await asyncio.wait([previous])

        result = self.callback(value)
        if inspect.isawaitable(result):
            await result

    def _on_done(self, task):
        if not task.cancelled() and task.exception() is not None:
            logging.error("Debounced callback failed: %s", task.exception())
        # Only the latest run settles, and only if no newer timer is armed
        if task is self._task and self._handle is None:
            self._settled.set()


class PreviewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class PreviewRenderer:
    def __init__(self, delay: float | None = None, listener=None):
        if delay is None:
            delay = config.PREVIEW_DEBOUNCE_MS / 1000
        self.listener = listener
        self.state = PreviewState.IDLE
        self.html = ""
        self.error = None
        self.template_id = None
        self.template_name = None
        self.render_count = 0
        self._debouncer = Debouncer(delay, self._recompute)

    @property
    def pending(self) -> bool:
        return self._debouncer.pending

    def schedule(self, resume_data, template_id: str):
        self._debouncer.submit((resume_data, template_id))

    def cancel(self):
        self._debouncer.cancel()

    async def wait(self):
        await self._debouncer.wait()

    async def _recompute(self, request):
        resume_data, template_id = request
        self.render_count += 1

        template = get_template_by_id(template_id)
        self.template_id = template_id
        self.template_name = template.name if template else None
        self.state = PreviewState.LOADING
        self.error = None
        await self._notify()

        try:
            html = generate_document(resume_data, template_id)
        except DocumentGenerationError:
            self.state = PreviewState.ERROR
            self.html = ""
            self.error = PREVIEW_ERROR_MESSAGE
        else:
            self.state = PreviewState.READY
            self.html = html

        await self._notify()

    async def _notify(self):
        if self.listener is None:
            return
        result = self.listener(self.snapshot())
        if inspect.isawaitable(result):
            await result

    def snapshot(self) -> dict:
        payload = {
            "status": self.state.value,
            "template": self.template_id,
            "templateName": self.template_name,
        }
        if self.state == PreviewState.READY:
            payload["html"] = self.html
        if self.state == PreviewState.ERROR:
            payload["error"] = self.error
        return payload
