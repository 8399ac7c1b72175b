# tests/core/test_logging.py
"""
日志系统单元测试

测试追踪 ID 生成、追踪上下文注入与 ContextLogger 字段合并。
"""
from unittest.mock import MagicMock

from sigil.core.logging import (
    ContextLogger,
    extra_context_var,
    generate_span_id,
    generate_trace_id,
    get_context_logger,
    get_logger,
    setup_logging,
    span_id_var,
    trace_context,
    trace_id_var,
)


class TestTraceIDGeneration:

    def test_trace_id_format(self):
        tid = generate_trace_id()
        assert len(tid) == 16
        assert all(c in "0123456789abcdef" for c in tid)

    def test_span_id_format(self):
        sid = generate_span_id()
        assert len(sid) == 8
        assert all(c in "0123456789abcdef" for c in sid)


class TestTraceContext:

    def test_context_restored_after_exit(self):
        trace_id_var.set("")
        span_id_var.set("")

        with trace_context() as ctx:
            assert trace_id_var.get() == ctx["trace_id"]
            assert span_id_var.get() == ctx["span_id"]

        assert trace_id_var.get() == ""
        assert span_id_var.get() == ""

    def test_nesting_reuses_trace_id(self):
        with trace_context(request_id="outer") as outer:
            with trace_context(step="extract") as inner:
                assert inner["trace_id"] == outer["trace_id"]
                assert inner["span_id"] != outer["span_id"]
                assert extra_context_var.get() == {"request_id": "outer", "step": "extract"}
            assert extra_context_var.get() == {"request_id": "outer"}


class TestContextLogger:

    def test_fields_enriched_from_context(self):
        base = MagicMock()
        logger = ContextLogger(base)

        with trace_context(trace_id="t-1", span_id="s-1", request_id="r-1"):
            logger.debug("Values extracted", fields=2)

        args, kwargs = base.debug.call_args
        assert args == ("Values extracted",)
        assert kwargs == {
            "trace_id": "t-1",
            "span_id": "s-1",
            "request_id": "r-1",
            "fields": 2,
        }

    def test_control_kwargs_passed_through(self):
        base = MagicMock()
        ContextLogger(base).error("failed", exc_info=True, field="a")
        kwargs = base.error.call_args[1]
        assert kwargs["exc_info"] is True
        assert kwargs["field"] == "a"

    def test_get_context_logger_wraps_structlog(self):
        logger = get_context_logger("sigil.test")
        assert isinstance(logger, ContextLogger)


def test_setup_logging_force_and_json(capsys):
    from sigil.config import configure_settings

    configure_settings(log_format="json", log_level="DEBUG")
    setup_logging(force=True)
    try:
        get_logger("sigil.test").info("hello", answer=42)
        out = capsys.readouterr().out
        assert '"event": "hello"' in out
        assert '"answer": 42' in out
    finally:
        configure_settings()
        setup_logging(force=True)
