from __future__ import annotations

"""
sigil 顶层包入口

职责：
1. 暴露签名定义、结构化提取与 Prompt 渲染的稳定 API
2. 提供统一的版本号 (__version__)
"""

from sigil.version import __version__

from sigil.core.exceptions import (
    SigilError,
    SchemaError,
    SignatureSyntaxError,
    ExtractionValidationError,
    MissingFieldError,
    PromptError,
)
from sigil.core.signature import (
    Signature,
    FieldKind,
    FieldSpec,
    FieldType,
    RawField,
    normalize_field,
    parse_signature,
    to_title,
    to_json_schema,
    to_openai_tool,
)
from sigil.core.extraction import (
    ExtractionResult,
    FieldSpan,
    extract_values,
    segment_completion,
    try_extract_values,
    validate_value,
)
from sigil.core.prompt import render_prompt

__all__ = [
    # 版本
    "__version__",
    # 签名
    "Signature",
    "FieldKind",
    "FieldSpec",
    "FieldType",
    "RawField",
    "normalize_field",
    "parse_signature",
    "to_title",
    "to_json_schema",
    "to_openai_tool",
    # 提取
    "extract_values",
    "try_extract_values",
    "ExtractionResult",
    "segment_completion",
    "FieldSpan",
    "validate_value",
    # Prompt
    "render_prompt",
    # 异常
    "SigilError",
    "SchemaError",
    "SignatureSyntaxError",
    "ExtractionValidationError",
    "MissingFieldError",
    "PromptError",
]
