"""Unit tests for the call boundary and its error translation."""

import pytest

from tools.envelope import (
    ToolErrorKind,
    ToolFailure,
    ToolSuccess,
    UNKNOWN_ERROR,
    run_tool,
    to_content,
)


class TestRunTool:
    @pytest.mark.asyncio
    async def test_success(self):
        async def body() -> str:
            return '{"ok": true}'

        outcome = await run_tool("demo", body)

        assert outcome == ToolSuccess(text='{"ok": true}')
        assert outcome.ok is True

    @pytest.mark.asyncio
    async def test_exception_becomes_failure(self):
        async def body() -> str:
            raise RuntimeError("database unavailable")

        outcome = await run_tool("demo", body)

        assert isinstance(outcome, ToolFailure)
        assert outcome.ok is False
        assert outcome.kind is ToolErrorKind.HANDLER_ERROR
        assert outcome.render() == "Error: database unavailable"

    @pytest.mark.asyncio
    async def test_exception_without_message(self):
        async def body() -> str:
            raise ValueError()

        outcome = await run_tool("demo", body)

        assert outcome.render() == f"Error: {UNKNOWN_ERROR}"

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, caplog):
        async def body() -> str:
            raise KeyError("missing")

        await run_tool("demo", body)

        assert "Tool demo failed" in caplog.text


class TestToContent:
    def test_success_envelope(self):
        (block,) = to_content(ToolSuccess(text="hello"))

        assert block.type == "text"
        assert block.text == "hello"

    def test_failure_envelope_has_same_shape(self):
        (block,) = to_content(ToolFailure(ToolErrorKind.HANDLER_ERROR, "boom"))

        assert block.type == "text"
        assert block.text == "Error: boom"
