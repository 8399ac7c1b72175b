# sigil/core/signature/parser.py
"""
签名源字符串的默认语法解析器

语法：
    signature  := field_list "->" field_list
    field_list := field ("," field)*
    field      := identifier [":" kind ["[]"]] ['"' description '"']

示例：
    'question, context "supporting passages" -> answer, confidence:number'
    'text -> keywords:string[] "up to five keywords"'

说明：
- 解析器只负责“切分 + 识别”，字段合法性（类型是否受支持等）由
  sigil.core.signature.fields.normalize_field 统一校验。
- 引号内的逗号和 "->" 不作为分隔符。
- Signature 允许注入自定义解析器，只要满足 SignatureParser 协议。
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from sigil.core.exceptions import SignatureSyntaxError
from sigil.core.signature.fields import RawField, RawFieldType

_FIELD_RE = re.compile(
    r"""
    ^\s*
    (?P<name>[A-Za-z_][A-Za-z0-9_]*)
    \s*
    (?::\s*(?P<kind>[A-Za-z]*)\s*(?P<array>\[\s*\])?)?
    \s*
    (?:"(?P<desc>[^"]*)")?
    \s*$
    """,
    re.VERBOSE,
)


class ParsedSignature(BaseModel):
    """解析结果：有序的输入 / 输出原始字段列表"""

    inputs: List[RawField] = Field(default_factory=list)
    outputs: List[RawField] = Field(default_factory=list)


SignatureParser = Callable[[str], ParsedSignature]


def _split_outside_quotes(text: str, sep: str) -> List[str]:
    """按 sep 切分，忽略双引号内出现的 sep"""
    parts: List[str] = []
    buf: List[str] = []
    in_quotes = False
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            in_quotes = not in_quotes
        if not in_quotes and text.startswith(sep, i):
            parts.append("".join(buf))
            buf = []
            i += len(sep)
            continue
        buf.append(ch)
        i += 1
    parts.append("".join(buf))
    return parts


def _parse_field(segment: str, source_text: str) -> RawField:
    match = _FIELD_RE.match(segment)
    if match is None:
        raise SignatureSyntaxError(
            f"Invalid field definition: '{segment.strip()}'", source_text
        )

    field_type: Optional[RawFieldType] = None
    # "name:" 后面跟空类型名时保留空 kind，由 normalize_field 报错
    if ":" in segment.split('"', 1)[0]:
        field_type = RawFieldType(
            kind=match.group("kind") or "",
            is_array=match.group("array") is not None,
        )

    return RawField(
        name=match.group("name"),
        description=match.group("desc"),
        type=field_type,
    )


def _parse_field_list(segment: str, side: str, source_text: str) -> List[RawField]:
    if not segment.strip():
        raise SignatureSyntaxError(f"Signature has no {side} fields", source_text)
    return [
        _parse_field(part, source_text)
        for part in _split_outside_quotes(segment, ",")
    ]


def parse_signature(source_text: str) -> ParsedSignature:
    """
    将签名源字符串解析为输入 / 输出原始字段列表

    Raises:
        SignatureSyntaxError: 缺少 "->"、出现多个 "->"、字段列表为空或字段格式错误
    """
    if source_text.count('"') % 2:
        raise SignatureSyntaxError("Unterminated field description", source_text)

    sides = _split_outside_quotes(source_text, "->")
    if len(sides) != 2:
        raise SignatureSyntaxError(
            "Signature must contain exactly one '->' separating inputs and outputs",
            source_text,
        )

    inputs, outputs = sides
    return ParsedSignature(
        inputs=_parse_field_list(inputs, "input", source_text),
        outputs=_parse_field_list(outputs, "output", source_text),
    )
