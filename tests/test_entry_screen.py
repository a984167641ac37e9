import asyncio

import pytest

from fullstack_builder.ui.entry_screen import EXAMPLE_IDEAS, FALLBACK_ERROR, EntryScreen, EntryState


@pytest.mark.asyncio
async def test_submit_success_holds_project(client):
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    assert await screen.submit() is True
    assert screen.state is EntryState.HAS_RESULT
    assert screen.project.project_title == "Calculator"
    assert screen.error is None


@pytest.mark.asyncio
@pytest.mark.parametrize("idea", ["", "   ", "\t\n"])
async def test_blank_idea_is_a_no_op(client, provider, idea):
    screen = EntryScreen(client)
    screen.set_idea(idea)

    assert screen.can_submit is False
    assert await screen.submit() is False
    assert screen.state is EntryState.IDLE
    assert provider.requests == []


@pytest.mark.asyncio
async def test_second_submit_ignored_while_in_flight(client, provider):
    provider.gate = asyncio.Event()
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    task = asyncio.create_task(screen.submit())
    await asyncio.sleep(0)
    assert screen.state is EntryState.SUBMITTING
    assert screen.input_enabled is False
    assert screen.can_submit is False
    assert screen.set_idea("something else") is False

    assert await screen.submit() is False
    assert await screen.submit() is False

    provider.gate.set()
    assert await task is True
    assert len(provider.requests) == 1
    assert screen.state is EntryState.HAS_RESULT


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "message, expected",
    [
        ("HTTP 403 forbidden", "Access denied. Invalid API Key."),
        ("HTTP 429", "Too many requests. Please wait a moment."),
    ],
)
async def test_failure_moves_to_error_with_classified_message(client, provider, message, expected):
    provider.error = RuntimeError(message)
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    await screen.submit()
    assert screen.state is EntryState.ERROR
    assert screen.error == expected
    assert screen.project is None


@pytest.mark.asyncio
async def test_empty_upstream_text_message(client, provider):
    provider.text = ""
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    await screen.submit()
    assert screen.error == "The AI returned an empty response. Please try again."


@pytest.mark.asyncio
async def test_resubmit_from_error_clears_error(client, provider, sample_payload):
    provider.error = RuntimeError("429")
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")
    await screen.submit()
    assert screen.state is EntryState.ERROR

    provider.error = None
    provider.gate = asyncio.Event()
    task = asyncio.create_task(screen.submit())
    await asyncio.sleep(0)
    assert screen.state is EntryState.SUBMITTING
    assert screen.error is None

    provider.gate.set()
    await task
    assert screen.state is EntryState.HAS_RESULT


@pytest.mark.asyncio
async def test_unexpected_exception_never_escapes(client):
    async def explode(idea):
        raise KeyError()

    client.generate = explode
    screen = EntryScreen(client)
    screen.set_idea("x")

    await screen.submit()
    assert screen.state is EntryState.ERROR
    assert screen.error == FALLBACK_ERROR


@pytest.mark.asyncio
async def test_reset_returns_to_idle_and_clears_idea(client):
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")
    await screen.submit()

    screen.reset()
    assert screen.state is EntryState.IDLE
    assert screen.idea == ""
    assert screen.project is None
    assert screen.error is None


@pytest.mark.asyncio
async def test_late_result_after_close_is_discarded(client, provider):
    provider.gate = asyncio.Event()
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    task = asyncio.create_task(screen.submit())
    await asyncio.sleep(0)
    screen.close()
    provider.gate.set()

    assert await task is False
    assert screen.project is None


@pytest.mark.asyncio
async def test_reset_while_in_flight_drops_late_result(client, provider):
    provider.gate = asyncio.Event()
    screen = EntryScreen(client)
    screen.set_idea("Build a calculator")

    task = asyncio.create_task(screen.submit())
    await asyncio.sleep(0)
    screen.reset()
    provider.gate.set()

    assert await task is False
    assert screen.state is EntryState.IDLE
    assert screen.project is None


def test_preset_sets_idea_without_submitting(client, provider):
    screen = EntryScreen(client)
    assert screen.select_preset(0) is True
    assert screen.idea == EXAMPLE_IDEAS[0] == "Build a Calculator"
    assert screen.state is EntryState.IDLE
    assert provider.requests == []

    with pytest.raises(IndexError):
        screen.select_preset(len(EXAMPLE_IDEAS))
