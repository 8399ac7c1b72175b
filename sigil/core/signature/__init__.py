# sigil/core/signature/__init__.py
"""
签名子模块入口

对外主要暴露以下对象：
- Signature: 有序的输入/输出字段容器
- FieldSpec / FieldType / FieldKind / RawField: 字段模型
- normalize_field / to_title: 字段规范化与标题推导
- parse_signature / ParsedSignature / SignatureParser: 默认语法解析器及其协议
- to_json_schema / to_openai_tool: Schema 导出
"""

from sigil.core.signature.titles import to_title
from sigil.core.signature.fields import (
    FieldKind,
    FieldSpec,
    FieldType,
    RawField,
    RawFieldType,
    normalize_field,
)
from sigil.core.signature.parser import ParsedSignature, SignatureParser, parse_signature
from sigil.core.signature.signature import Signature
from sigil.core.signature.schema import to_json_schema, to_openai_tool

__all__ = [
    "Signature",
    "FieldKind",
    "FieldSpec",
    "FieldType",
    "RawField",
    "RawFieldType",
    "normalize_field",
    "to_title",
    "ParsedSignature",
    "SignatureParser",
    "parse_signature",
    "to_json_schema",
    "to_openai_tool",
]
