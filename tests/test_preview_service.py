import asyncio

from vitae.exceptions import DocumentGenerationError
from vitae.services import preview_service
from vitae.services.preview_service import (
    PREVIEW_ERROR_MESSAGE,
    Debouncer,
    PreviewRenderer,
    PreviewState,
)


def test_debouncer_collapses_a_burst():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.05, calls.append)
        for i in range(10):
            debouncer.submit(i)
            await asyncio.sleep(0.001)
        assert debouncer.pending
        await debouncer.wait()
        assert not debouncer.pending

    asyncio.run(scenario())
    assert calls == [9]


def test_debouncer_fires_again_after_quiet_period():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.01, calls.append)
        debouncer.submit("a")
        await debouncer.wait()
        debouncer.submit("b")
        await debouncer.wait()

    asyncio.run(scenario())
    assert calls == ["a", "b"]


def test_debouncer_cancel_drops_pending_value():
    calls = []

    async def scenario():
        debouncer = Debouncer(0.01, calls.append)
        debouncer.submit("a")
        debouncer.cancel()
        await debouncer.wait()
        await asyncio.sleep(0.03)

    asyncio.run(scenario())
    assert calls == []


def test_debouncer_awaits_coroutine_callbacks():
    calls = []

    async def callback(value):
        await asyncio.sleep(0.01)
        calls.append(value)

    async def scenario():
        debouncer = Debouncer(0.01, callback)
        debouncer.submit("x")
        await debouncer.wait()

    asyncio.run(scenario())
    assert calls == ["x"]


def test_preview_renders_once_for_rapid_edits(complete_resume):
    async def scenario():
        renderer = PreviewRenderer(delay=0.05)
        for i in range(10):
            complete_resume["summary"] = f"Revision {i}"
            renderer.schedule(dict(complete_resume), "simple-professional")
        await renderer.wait()
        return renderer

    renderer = asyncio.run(scenario())

    assert renderer.render_count == 1
    assert renderer.state == PreviewState.READY
    assert "Revision 9" in renderer.html
    assert "Revision 8" not in renderer.html


def test_listener_sees_loading_then_ready(complete_resume):
    events = []

    async def scenario():
        renderer = PreviewRenderer(delay=0.01, listener=events.append)
        renderer.schedule(complete_resume, "pink-minimalist")
        await renderer.wait()

    asyncio.run(scenario())

    assert [e["status"] for e in events] == ["loading", "ready"]
    assert events[0]["templateName"] == "Pink Minimalist"
    assert "html" not in events[0]
    assert "Ada Lovelace" in events[1]["html"]


def test_async_listener_is_awaited(complete_resume):
    events = []

    async def listener(snapshot):
        await asyncio.sleep(0)
        events.append(snapshot["status"])

    async def scenario():
        renderer = PreviewRenderer(delay=0.01, listener=listener)
        renderer.schedule(complete_resume, "modern")
        await renderer.wait()

    asyncio.run(scenario())
    assert events == ["loading", "ready"]


def test_render_failure_becomes_error_state(monkeypatch, complete_resume):
    def broken(resume_data, template_id):
        raise DocumentGenerationError("boom")

    monkeypatch.setattr(preview_service, "generate_document", broken)
    events = []

    async def scenario():
        renderer = PreviewRenderer(delay=0.01, listener=events.append)
        renderer.schedule(complete_resume, "modern")
        await renderer.wait()
        return renderer

    renderer = asyncio.run(scenario())

    assert renderer.state == PreviewState.ERROR
    assert renderer.html == ""
    assert events[-1] == {
        "status": "error",
        "template": "modern",
        "templateName": None,
        "error": PREVIEW_ERROR_MESSAGE,
    }


def test_default_delay_comes_from_config(monkeypatch):
    monkeypatch.setattr(preview_service.config, "PREVIEW_DEBOUNCE_MS", 250)
    renderer = PreviewRenderer()
    assert renderer._debouncer.delay == 0.25
    assert renderer.state == PreviewState.IDLE


def test_debouncer_waits_for_run_started_during_slow_callback():
    started, finished = [], []

    async def slow(value):
        started.append(value)
        await asyncio.sleep(0.1)
        finished.append(value)

    async def scenario():
        debouncer = Debouncer(0.01, slow)
        debouncer.submit("a")
        await asyncio.sleep(0.03)
        debouncer.submit("b")
        await asyncio.sleep(0.03)
        await debouncer.wait()

    asyncio.run(scenario())
    assert finished == ["a", "b"]
    assert started == ["a", "b"]


def test_slow_recomputes_do_not_interleave(complete_resume):
    events = []

    async def listener(snapshot):
        await asyncio.sleep(0.05)
        events.append((snapshot["status"], snapshot["template"]))

    async def scenario():
        renderer = PreviewRenderer(delay=0.01, listener=listener)
        renderer.schedule(complete_resume, "blue-simple")
        await asyncio.sleep(0.03)
        renderer.schedule(complete_resume, "pink-minimalist")
        await renderer.wait()
        return renderer

    renderer = asyncio.run(scenario())

    assert events == [
        ("loading", "blue-simple"),
        ("ready", "blue-simple"),
        ("loading", "pink-minimalist"),
        ("ready", "pink-minimalist"),
    ]
    assert renderer.template_id == "pink-minimalist"
