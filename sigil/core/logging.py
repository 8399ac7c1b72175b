# sigil/core/logging.py
"""
sigil 结构化日志系统

要点：
1. 使用 structlog 输出结构化日志（console 或 JSON，由 SIGIL_LOG_FORMAT 决定）
2. 支持 trace_id / span_id / 额外上下文注入，便于把一次提取与上层请求关联
3. 使用 ContextVar 保存追踪上下文，兼容多线程 / 异步场景
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
import logging
import uuid
from typing import Any, Dict, Optional

import structlog

from sigil.config import get_settings

# ========= 追踪上下文变量 =========

trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")
span_id_var: ContextVar[str] = ContextVar("span_id", default="")
# default 只在从未 set 时返回，使用时总是 copy 后再 set
extra_context_var: ContextVar[Dict[str, Any]] = ContextVar(
    "extra_context",
    default={},
)


def generate_trace_id() -> str:
    """生成追踪 ID（16 位十六进制字符串）"""
    return uuid.uuid4().hex[:16]


def generate_span_id() -> str:
    """生成 Span ID（8 位十六进制字符串）"""
    return uuid.uuid4().hex[:8]


# ========= 日志初始化 =========

_initialized = False


def setup_logging(
    level: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    初始化日志系统。

    参数：
        level:
            日志级别字符串，如 "DEBUG" / "INFO"。默认为 settings.log_level。
        force:
            为 True 时强制重新配置 structlog。
    """
    global _initialized

    if _initialized and not force:
        return

    settings = get_settings()
    level = level or settings.log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            (
                structlog.processors.JSONRenderer()
                if settings.log_format == "json"
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # 不缓存：force 重新配置与 sys.stdout 替换都能即时生效
        cache_logger_on_first_use=False,
    )

    _initialized = True


def get_logger(name: str) -> Any:
    """
    获取基础 Logger 实例（structlog BoundLogger，不带自动上下文注入）。

    使用示例：
        logger = get_logger(__name__)
        logger.debug("signature built", outputs=2)
    """
    if not _initialized:
        setup_logging()
    return structlog.get_logger(name)


# ========= 追踪上下文管理器 =========

@contextmanager
def trace_context(
    trace_id: Optional[str] = None,
    span_id: Optional[str] = None,
    **extra: Any,
):
    """
    追踪上下文管理器。

    示例：
        logger = get_context_logger(__name__)

        with trace_context(request_id="r-1"):
            values = extract_values(sig, completion)
            # 提取过程中的日志自动包含 trace_id, span_id, request_id

    嵌套时内层复用外层 trace_id、生成新的 span_id，退出时恢复外层上下文。
    """
    tid = trace_id or trace_id_var.get() or generate_trace_id()
    sid = span_id or generate_span_id()

    trace_token = trace_id_var.set(tid)
    span_token = span_id_var.set(sid)

    current_extra = extra_context_var.get().copy()
    current_extra.update(extra)
    extra_token = extra_context_var.set(current_extra)

    try:
        yield {"trace_id": tid, "span_id": sid}
    finally:
        trace_id_var.reset(trace_token)
        span_id_var.reset(span_token)
        extra_context_var.reset(extra_token)


# ========= 带上下文注入的 Logger 包装器 =========

class ContextLogger:
    """
    带上下文的 Logger 包装器。

    自动从 ContextVar 中取出 trace_id / span_id / extra_context，
    合并为 structlog 事件字段。调用方字段优先级最高。
    """

    def __init__(self, logger: Any):
        self._logger = logger

    def _enrich(self, **kwargs: Any) -> Dict[str, Any]:
        """合并顺序：trace/span -> extra_context -> 调用方字段"""
        enriched: Dict[str, Any] = {}

        trace_id = trace_id_var.get()
        if trace_id:
            enriched["trace_id"] = trace_id

        span_id = span_id_var.get()
        if span_id:
            enriched["span_id"] = span_id

        enriched.update(extra_context_var.get())
        enriched.update(kwargs)
        return enriched

    def _log(self, method_name: str, message: str, **kwargs: Any) -> None:
        # exc_info / stack_info 是控制参数，不参与上下文合并
        control_keys = ("exc_info", "stack_info")
        control_kwargs = {k: kwargs.pop(k) for k in control_keys if k in kwargs}

        log_method = getattr(self._logger, method_name)
        log_method(message, **self._enrich(**kwargs), **control_kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("debug", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("error", message, **kwargs)


def get_context_logger(name: str) -> ContextLogger:
    """获取带上下文自动注入能力的 Logger。"""
    return ContextLogger(get_logger(name))


setup_logging()
