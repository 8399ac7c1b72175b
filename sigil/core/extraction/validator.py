# sigil/core/extraction/validator.py
"""
字段值类型校验

对一个已声明类型的字段：
1. 标量 string：直接使用切分出的原文（不做 JSON 解码，也不去引号）
2. 其他形态：严格 JSON 解码（拒绝 NaN / Infinity），失败即报错
3. 按形态校验：数组 -> 每个元素匹配 kind；标量 -> 值本身匹配 kind

类型集合是封闭的（FieldKind），_KIND_CHECKS 必须覆盖全部成员。
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict

from sigil.core.exceptions import ErrorCode, ExtractionValidationError
from sigil.core.signature.fields import FieldKind, FieldSpec, FieldType


def _is_number(value: Any) -> bool:
    # bool 是 int 的子类，必须单独排除
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_KIND_CHECKS: Dict[FieldKind, Callable[[Any], bool]] = {
    FieldKind.STRING: lambda v: isinstance(v, str),
    FieldKind.NUMBER: _is_number,
    FieldKind.BOOLEAN: lambda v: isinstance(v, bool),
}


def json_type_name(value: Any) -> str:
    """返回值对应的 JSON 类型名，用于错误信息"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _decode_json(field: FieldSpec, field_type: FieldType, raw_value: str) -> Any:
    """
    严格 JSON 解码；嵌套过深导致的 RecursionError 同样视为解码失败

    Raises:
        ExtractionValidationError: "Error, expected '<shape>' got '<raw_value>'"
    """
    try:
        return json.loads(raw_value, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        message = f"Error, expected '{field_type.describe()}' got '{raw_value}'"
        raise ExtractionValidationError(
            message, field, raw_value, code=ErrorCode.EXTRACTION_DECODE_FAILED
        ) from None


def validate_value(field: FieldSpec, raw_value: str) -> Any:
    """
    将切分出的文本转换为字段声明的类型并校验

    参数:
        field: 声明了 type 的输出字段
        raw_value: 已去除首尾空白和结束标记的文本

    返回:
        str / int / float / bool 或它们的同构列表

    Raises:
        ExtractionValidationError: 解码失败、形态不符或元素类型不符
    """
    field_type = field.type
    if field_type is None:
        return raw_value

    value: Any = _decode_json(field, field_type, raw_value) if field_type.needs_json else raw_value
    check = _KIND_CHECKS[field_type.kind]
    kind = field_type.kind.value

    if field_type.is_array:
        if not isinstance(value, list):
            raise ExtractionValidationError(
                f"Expected an array, but got '{json_type_name(value)}'.",
                field,
                raw_value,
                code=ErrorCode.EXTRACTION_SHAPE_MISMATCH,
            )
        for index, item in enumerate(value):
            if not check(item):
                raise ExtractionValidationError(
                    f"Expected all items in array to be of type '{kind}', but found "
                    f"an item of type '{json_type_name(item)}' at index {index}.",
                    field,
                    raw_value,
                    code=ErrorCode.EXTRACTION_TYPE_MISMATCH,
                    context={"index": index},
                )
        return value

    if not check(value):
        raise ExtractionValidationError(
            f"Expected value of type '{kind}', but got '{json_type_name(value)}'.",
            field,
            raw_value,
            code=ErrorCode.EXTRACTION_TYPE_MISMATCH,
        )
    return value
