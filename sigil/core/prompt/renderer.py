# sigil/core/prompt/renderer.py
"""
由 Signature 渲染 Prompt

渲染结果与提取约定一致：每个字段以 "Title:" 开头，格式说明与实际输入之间
以 "---" 分隔，末尾停在第一个输出字段的前缀上，模型的补全可直接交给
extract_values 处理。

示例输出：
    Answer questions briefly.

    Follow the following format.

    Question: ${question}
    Answer: ${answer}
    Score: ${score} (JSON number)

    ---

    Question: What is the capital of France?
    Answer:
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional, Tuple

from jinja2 import Template

from sigil.core.exceptions import ErrorCode, PromptError
from sigil.core.logging import get_logger
from sigil.core.prompt.jinja_env import get_jinja2_env
from sigil.core.signature.fields import FieldKind, FieldSpec
from sigil.core.signature.signature import Signature

logger = get_logger(__name__)

PROMPT_TEMPLATE = (
    "{% if description %}{{ description }}\n\n{% endif %}"
    "Follow the following format.\n\n"
    "{% for title, hint in format_lines %}{{ title }}: {{ hint }}\n{% endfor %}"
    "\n---\n\n"
    "{% for title, value in input_lines %}{{ title }}: {{ value }}\n{% endfor %}"
    "{{ next_prefix }}"
)

_compiled: Optional[Template] = None


def _template() -> Template:
    global _compiled
    if _compiled is None:
        _compiled = get_jinja2_env().from_string(PROMPT_TEMPLATE)
    return _compiled


def field_hint(field: FieldSpec) -> str:
    """格式说明中字段的占位提示；需要 JSON 的字段附带形态说明"""
    hint = field.description or f"${{{field.name}}}"
    if field.type is not None and field.type.needs_json:
        hint = f"{hint} (JSON {field.type.describe()})"
    return hint


def _format_value(field: FieldSpec, value: Any) -> str:
    if isinstance(value, str):
        if field.type is None or (field.type.kind is FieldKind.STRING and not field.type.is_array):
            return value
    return json.dumps(value, ensure_ascii=False)


def render_prompt(signature: Signature, values: Mapping[str, Any]) -> str:
    """
    渲染签名对应的 Prompt

    参数:
        signature: 签名
        values: 输入字段 name -> 值

    Raises:
        PromptError: 缺少输入值或签名没有输出字段
    """
    inputs = signature.get_input_fields()
    outputs = signature.get_output_fields()

    if not outputs:
        raise PromptError("Signature has no output fields", code=ErrorCode.INVALID_INPUT)

    missing = [f.name for f in inputs if f.name not in values]
    if missing:
        raise PromptError(
            f"Missing input values: {', '.join(missing)}",
            code=ErrorCode.INVALID_INPUT,
            context={"missing": missing},
        )

    format_lines: List[Tuple[str, str]] = [
        (f.title, field_hint(f)) for f in (*inputs, *outputs)
    ]
    input_lines = [(f.title, _format_value(f, values[f.name])) for f in inputs]

    prompt = _template().render(
        description=signature.get_description(),
        format_lines=format_lines,
        input_lines=input_lines,
        next_prefix=outputs[0].prefix,
    )
    logger.debug("Prompt rendered", length=len(prompt))
    return prompt
