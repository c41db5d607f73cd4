import asyncio
import pytest

from testwright_frappe.decorators import action_result, text_result

##
## We DO NOT want to use pytest-asyncio.
##

@pytest.fixture
def event_loop():
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    yield loop
    loop.close()


def test_success_becomes_single_text_block(event_loop):
    @action_result(on_error=lambda err, args: "never")
    async def tool(name):
        return f"hello {name}"

    result = event_loop.run_until_complete(tool(name="frappe"))
    assert len(result) == 1
    assert result[0].type == "text"
    assert result[0].text == "hello frappe"


def test_error_is_formatted_not_raised(event_loop):
    seen = {}

    def on_error(err, args):
        seen["err"] = err
        seen["args"] = args
        return f"Boom for {args['name']}: {err}"

    @action_result(on_error=on_error)
    async def tool(name):
        raise RuntimeError("kaputt")

    result = event_loop.run_until_complete(tool(name="x"))
    assert result[0].text == "Boom for x: kaputt"
    assert isinstance(seen["err"], RuntimeError)
    assert seen["args"] == {"name": "x"}


def test_missing_required_argument_is_a_tool_failure(event_loop):
    @action_result(on_error=lambda err, args: f"failed: {type(err).__name__}")
    async def tool(url, username):
        return "ok"

    result = event_loop.run_until_complete(tool(url="http://x"))
    assert result[0].text == "failed: TypeError"


def test_cancellation_is_not_absorbed(event_loop):
    @action_result(on_error=lambda err, args: "swallowed")
    async def tool():
        raise asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        event_loop.run_until_complete(tool())


def test_sync_functions_are_rejected():
    with pytest.raises(TypeError):
        @action_result(on_error=lambda err, args: "")
        def tool():
            return "sync"


def test_text_result_shape():
    block, = text_result("abc")
    assert block.type == "text"
    assert block.text == "abc"
