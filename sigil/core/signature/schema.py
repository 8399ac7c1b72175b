# sigil/core/signature/schema.py
"""
Schema 工具模块

职责：
- 将 Signature 的输出字段转换为 JSON Schema
- 将 Signature 包装为 OpenAI Function Calling / tools 所需的 tool 定义

注意：
- 这里只做 schema 层的转换，不参与文本切分与校验流程。
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional

from sigil.core.signature.fields import FieldKind, FieldSpec
from sigil.core.signature.signature import Signature

_KIND_TO_JSON = {
    FieldKind.STRING: "string",
    FieldKind.NUMBER: "number",
    FieldKind.BOOLEAN: "boolean",
}


def field_json_schema(field: FieldSpec) -> Dict[str, Any]:
    """单个字段的 JSON Schema；未声明类型的字段按字符串处理"""
    if field.type is None:
        schema: Dict[str, Any] = {"type": "string"}
    elif field.type.is_array:
        schema = {"type": "array", "items": {"type": _KIND_TO_JSON[field.type.kind]}}
    else:
        schema = {"type": _KIND_TO_JSON[field.type.kind]}

    schema["title"] = field.title
    if field.description:
        schema["description"] = field.description
    return schema


def to_json_schema(signature: Signature) -> Dict[str, Any]:
    """
    将签名的输出字段转换为 JSON Schema 对象

    返回示例：
        {
            "type": "object",
            "properties": {"answer": {"type": "string", "title": "Answer"}},
            "required": ["answer"],
        }
    """
    fields = signature.get_output_fields()
    schema: Dict[str, Any] = {
        "type": "object",
        "properties": {f.name: field_json_schema(f) for f in fields},
        "required": [f.name for f in fields],
    }
    description = signature.get_description()
    if description:
        schema["description"] = description
    return schema


def to_openai_tool(signature: Signature, name: Optional[str] = None) -> Dict[str, Any]:
    """
    将签名转换为 OpenAI Function Calling 所需的 tool schema

    参数:
        signature: 签名
        name: 工具名称；缺省时由输出字段名拼接生成
    """
    if name is None:
        name = "extract_" + "_".join(f.name for f in signature.get_output_fields())
    name = re.sub(r"\W+", "_", name).lower()

    parameters = to_json_schema(signature)
    return {
        "type": "function",
        "function": {
            "name": name,
            "description": parameters.pop("description", f"Extract {name} data"),
            "parameters": parameters,
        },
    }
