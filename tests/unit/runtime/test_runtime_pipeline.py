"""Unit tests for the runtime pipeline.

Tests cover:
- Handler ordering and linking
- Adding, inserting, replacing and removing handlers
- Invocation order, sync and async
"""

from unittest.mock import Mock

import pytest

from cumulus.runtime.pipeline import PipelineHandler, RuntimePipeline


class RecordingHandler(PipelineHandler):
    def __init__(self, name, calls):
        super().__init__()
        self.name = name
        self.calls = calls

    def invoke_sync(self, context):
        self.calls.append(f"{self.name}:in")
        super().invoke_sync(context)
        self.calls.append(f"{self.name}:out")

    async def invoke_async(self, context):
        self.calls.append(f"{self.name}:in")
        await super().invoke_async(context)
        self.calls.append(f"{self.name}:out")


class First(RecordingHandler):
    pass


class Second(RecordingHandler):
    pass


class Third(RecordingHandler):
    pass


class Extra(RecordingHandler):
    pass


@pytest.fixture
def calls():
    return []


@pytest.fixture
def pipeline(calls):
    return RuntimePipeline([First("first", calls), Second("second", calls), Third("third", calls)])


def names(pipeline):
    return [handler.name for handler in pipeline.handlers]


@pytest.mark.unit
class TestPipelineStructure:
    """Test suite for pipeline construction and mutation."""

    def test_handlers_in_given_order(self, pipeline):
        """Test handlers are ordered outermost first."""
        assert names(pipeline) == ["first", "second", "third"]
        assert pipeline.handler.name == "first"

    def test_links_are_bidirectional(self, pipeline):
        """Test inner and outer links agree."""
        first, second, third = pipeline.handlers

        assert first.outer_handler is None
        assert first.inner_handler is second
        assert second.outer_handler is first
        assert third.inner_handler is None

    def test_empty_pipeline_rejected(self):
        """Test a pipeline needs at least one handler."""
        with pytest.raises(ValueError):
            RuntimePipeline([])

    def test_single_handler_is_outermost(self, calls):
        """Test a one-handler pipeline exposes that handler."""
        only = First("only", calls)

        pipeline = RuntimePipeline([only])

        assert pipeline.handler is only
        assert pipeline.handlers == [only]

    def test_add_handler_becomes_outermost(self, pipeline, calls):
        """Test add_handler prepends."""
        pipeline.add_handler(Extra("extra", calls))

        assert names(pipeline) == ["extra", "first", "second", "third"]

    def test_add_handler_after(self, pipeline, calls):
        """Test insertion inside a given handler."""
        pipeline.add_handler_after(Second, Extra("extra", calls))

        assert names(pipeline) == ["first", "second", "extra", "third"]
        extra = pipeline.handlers[2]
        assert extra.outer_handler.name == "second"
        assert extra.inner_handler.outer_handler is extra

    def test_add_handler_after_innermost(self, pipeline, calls):
        """Test insertion after the innermost handler."""
        pipeline.add_handler_after(Third, Extra("extra", calls))

        assert names(pipeline) == ["first", "second", "third", "extra"]

    def test_add_handler_before_outermost(self, pipeline, calls):
        """Test insertion outside the outermost handler updates the head."""
        pipeline.add_handler_before(First, Extra("extra", calls))

        assert names(pipeline) == ["extra", "first", "second", "third"]
        assert pipeline.handler.name == "extra"

    def test_replace_handler(self, pipeline, calls):
        """Test replacement keeps neighbours linked and detaches the old handler."""
        old = pipeline.handlers[1]

        pipeline.replace_handler(Second, Extra("extra", calls))

        assert names(pipeline) == ["first", "extra", "third"]
        assert old.inner_handler is None and old.outer_handler is None

    def test_replace_outermost(self, pipeline, calls):
        """Test replacing the head handler."""
        pipeline.replace_handler(First, Extra("extra", calls))

        assert pipeline.handler.name == "extra"

    def test_remove_handler(self, pipeline):
        """Test removal relinks the neighbours."""
        removed = pipeline.remove_handler(Second)

        assert removed.name == "second"
        assert names(pipeline) == ["first", "third"]
        assert pipeline.handlers[1].outer_handler.name == "first"

    def test_remove_outermost(self, pipeline):
        """Test removing the head promotes its inner handler."""
        pipeline.remove_handler(First)

        assert pipeline.handler.name == "second"
        assert pipeline.handler.outer_handler is None

    def test_remove_only_handler_rejected(self, calls):
        """Test the last handler cannot be removed."""
        pipeline = RuntimePipeline([First("first", calls)])

        with pytest.raises(ValueError):
            pipeline.remove_handler(First)

    def test_missing_handler_type(self, pipeline, calls):
        """Test operations on an absent type raise ValueError."""
        with pytest.raises(ValueError):
            pipeline.add_handler_after(Extra, Extra("extra", calls))

        assert pipeline.find_handler(Extra) is None

    def test_attached_handler_rejected(self, pipeline):
        """Test a handler already in a pipeline cannot be added again."""
        with pytest.raises(ValueError):
            pipeline.add_handler(pipeline.handlers[1])


@pytest.mark.unit
class TestPipelineInvocation:
    """Test suite for invoking a pipeline."""

    def test_sync_invocation_order(self, pipeline, calls):
        """Test each handler wraps its inner handlers."""
        context = Mock()

        result = pipeline.invoke_sync(context)

        assert calls == [
            "first:in",
            "second:in",
            "third:in",
            "third:out",
            "second:out",
            "first:out",
        ]
        assert result is context.response_context.response

    @pytest.mark.asyncio
    async def test_async_invocation_order(self, pipeline, calls):
        """Test async invocation follows the same order."""
        await pipeline.invoke_async(Mock())

        assert calls[0] == "first:in"
        assert calls[-1] == "first:out"
        assert len(calls) == 6
