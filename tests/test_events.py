# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Tests for emission and handler installation."""

import asyncio

import pytest
from hypothesis import given, settings, strategies as st

from joblog import (
    CompositeHandler,
    Document,
    FunctionHandler,
    LogEvent,
    MemoryHandler,
    NullHandler,
    PackageName,
    Severity,
    compose,
    current_handler,
    debug,
    emit,
    error,
    info,
    interpret,
    interpreting,
    warn,
)


class TestEmit:
    """Tests for the emission entry points."""

    def test_convenience_wrappers_fix_severity(self):
        """Test debug/info/warn/error tag events correctly."""
        handler = MemoryHandler()

        def program():
            debug("d")
            info("i")
            warn("w")
            error("e")

        interpret(handler, program)

        assert [e.severity for e in handler.events] == [
            Severity.DEBUG,
            Severity.INFO,
            Severity.WARN,
            Severity.ERROR,
        ]
        assert handler.messages() == ["d", "i", "w", "e"]

    def test_emit_renders_value(self):
        """Test that emit renders non-string values."""
        handler = MemoryHandler()
        with interpreting(handler):
            emit(Severity.INFO, PackageName("text-utils"))

        event = handler.events[0]
        assert isinstance(event, LogEvent)
        assert event.document.plain() == "text-utils"
        assert event.document.spans[0].color == "cyan"

    def test_emit_accepts_severity_names(self):
        """Test that emit parses severity names."""
        handler = MemoryHandler()
        with interpreting(handler):
            emit("warning", "x")
        assert handler.events[0].severity is Severity.WARN

    def test_emit_without_handler_is_noop(self):
        """Test that emitting with nothing installed does nothing."""
        assert isinstance(current_handler(), NullHandler)
        info("nobody listens")
        error(Document.text("still nobody", "red"))

    def test_emit_returns_none(self):
        """Test that emission returns to the caller with no value."""
        with interpreting(MemoryHandler()):
            assert info("x") is None


class TestInterpret:
    """Tests for interpret and interpreting."""

    def test_returns_program_result(self):
        """Test interpret returns the program's result unchanged."""
        result = interpret(MemoryHandler(), lambda a, b=0: a + b, 2, b=3)
        assert result == 5

    def test_coroutine_program_runs_with_handler(self):
        """Test an async program emits through the handler when awaited."""
        handler = MemoryHandler()

        async def program(value):
            info("inside coroutine")
            await asyncio.sleep(0)
            warn("after await")
            return value

        result = asyncio.run(interpret(handler, program, 1))

        assert result == 1
        assert handler.messages() == ["inside coroutine", "after await"]
        assert isinstance(current_handler(), NullHandler)

    def test_plain_callable_handler(self):
        """Test that any LogEvent callable can be a handler."""
        seen = []
        interpret(seen.append, info, "hello")
        assert len(seen) == 1
        assert seen[0].document.plain() == "hello"

    def test_interpreting_yields_handler(self):
        """Test the context manager wraps callables."""
        with interpreting(lambda event: None) as handler:
            assert isinstance(handler, FunctionHandler)
            assert current_handler() is handler

    def test_rejects_non_callable(self):
        """Test that non-callables are rejected."""
        with pytest.raises(TypeError, match="Expected a LogHandler or callable"):
            interpret("not a handler", info, "x")

    def test_nested_shadowing_and_restore(self):
        """Test an inner handler shadows the outer one and is removed afterwards."""
        outer = MemoryHandler()
        inner = MemoryHandler()

        def program():
            info("before")
            interpret(inner, info, "inside")
            info("after")

        interpret(outer, program)

        assert outer.messages() == ["before", "after"]
        assert inner.messages() == ["inside"]
        assert isinstance(current_handler(), NullHandler)

    def test_handler_restored_when_program_raises(self):
        """Test the previous handler comes back after an exception."""
        outer = MemoryHandler()

        def failing():
            info("doomed")
            raise RuntimeError("boom")

        with interpreting(outer):
            with pytest.raises(RuntimeError, match="boom"):
                interpret(MemoryHandler(), failing)
            assert current_handler() is outer

    def test_handler_exception_reaches_caller(self):
        """Test that a failing handler's exception propagates through emit."""

        def broken(event):
            raise ConnectionError("store down")

        with pytest.raises(ConnectionError):
            interpret(broken, error, "x")

    def test_async_tasks_use_own_handler(self):
        """Test concurrent tasks route to the handler installed in their context."""
        first = MemoryHandler()
        second = MemoryHandler()

        async def job(handler, name):
            with interpreting(handler):
                for i in range(3):
                    info(f"{name}-{i}")
                    await asyncio.sleep(0)

        async def main():
            await asyncio.gather(job(first, "a"), job(second, "b"))

        asyncio.run(main())

        assert first.messages() == ["a-0", "a-1", "a-2"]
        assert second.messages() == ["b-0", "b-1", "b-2"]


class TestComposition:
    """Tests for fan-out composition."""

    def test_compose_delivers_to_all(self):
        """Test each child sees every event."""
        a, b = MemoryHandler(), MemoryHandler()
        handler = compose(a, b)

        assert isinstance(handler, CompositeHandler)
        interpret(handler, warn, "disk low")

        assert a.messages() == ["disk low"]
        assert b.messages() == ["disk low"]

    def test_compose_order(self):
        """Test children are called in declaration order for each event."""
        calls = []
        handler = compose(
            lambda e: calls.append(("first", e.document.plain())),
            lambda e: calls.append(("second", e.document.plain())),
        )

        def program():
            info("e1")
            info("e2")

        interpret(handler, program)

        assert calls == [("first", "e1"), ("second", "e1"), ("first", "e2"), ("second", "e2")]

    def test_compose_single_handler_is_unwrapped(self):
        """Test composing one handler returns it as is."""
        handler = MemoryHandler()
        assert compose(handler) is handler

    def test_failing_child_stops_later_children(self):
        """Test a raising child propagates and later children miss the event."""
        later = MemoryHandler()

        def broken(event):
            raise OSError("nope")

        with pytest.raises(OSError):
            interpret(compose(broken, later), info, "x")
        assert later.events == []

    def test_close_closes_children(self):
        """Test closing a composite closes every child."""
        closed = []

        class Closing(NullHandler):
            def __init__(self, name):
                self.name = name

            def close(self):
                closed.append(self.name)

        with compose(Closing("a"), Closing("b")):
            pass

        assert closed == ["a", "b"]


class TestOrdering:
    """Property tests for delivery order."""

    @given(st.lists(st.tuples(st.sampled_from(list(Severity)), st.text()), max_size=30))
    @settings(max_examples=100)
    def test_events_arrive_in_emission_order(self, emissions) -> None:
        """Events from one caller reach the handler in the order emitted."""
        handler = MemoryHandler()

        def program():
            for severity, text in emissions:
                emit(severity, text)

        interpret(handler, program)

        assert [(e.severity, e.document) for e in handler.events] == [
            (severity, Document.text(text)) for severity, text in emissions
        ]
