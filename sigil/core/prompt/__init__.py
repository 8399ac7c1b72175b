# sigil/core/prompt/__init__.py
"""
Prompt 子模块入口

- render_prompt: 由 Signature 与输入值渲染 Prompt
- field_hint: 单字段的格式提示
- get_jinja2_env: 共享的 Jinja2 Environment
"""

from sigil.core.prompt.jinja_env import get_jinja2_env
from sigil.core.prompt.renderer import PROMPT_TEMPLATE, field_hint, render_prompt

__all__ = [
    "render_prompt",
    "field_hint",
    "PROMPT_TEMPLATE",
    "get_jinja2_env",
]
