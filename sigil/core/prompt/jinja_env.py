# sigil/core/prompt/jinja_env.py
"""
Jinja2 环境封装模块

提供全局单例的 Jinja2 Environment，作为 prompt 渲染与 Jinja2 的解耦层；
后续如需切换为 SandboxedEnvironment 或增加过滤器，在本文件集中处理。
"""

from __future__ import annotations

from typing import Optional

from jinja2 import Environment, StrictUndefined

_jinja2_env: Optional[Environment] = None


def get_jinja2_env() -> Environment:
    """
    获取全局 Jinja2 Environment 单例。

    当前配置：
        - undefined=StrictUndefined：未定义变量直接抛异常，避免静默渲染出空字段
        - autoescape=False：Prompt 为纯文本，不做 HTML 转义
        - keep_trailing_newline=True：保留模板末尾换行
    """
    global _jinja2_env

    if _jinja2_env is None:
        _jinja2_env = Environment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
    return _jinja2_env
