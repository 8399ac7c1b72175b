# sigil/core/signature/fields.py
"""
字段模型与字段规范化

职责：
- 定义封闭的标量类型集合 FieldKind（string / number / boolean）
- 定义 FieldType（标量 + 是否数组，共六种形态）与不可变的 FieldSpec
- 定义语法解析器 / 调用方提交的原始字段描述 RawField
- normalize_field(): 校验并补全一个原始字段描述，产出 FieldSpec

注意：
- normalize_field 是纯函数，不修改入参，不依赖任何全局状态。
- 未知类型在这里就被拒绝（SchemaError），提取阶段只需处理三种已知标量。
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

from sigil.core.exceptions import ErrorCode, SchemaError
from sigil.core.signature.titles import to_title


class FieldKind(str, Enum):
    """封闭的标量类型集合"""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class FieldType(BaseModel):
    """字段声明类型：标量种类 + 是否为同构数组"""

    model_config = ConfigDict(frozen=True)

    kind: FieldKind
    is_array: bool = False

    def describe(self) -> str:
        """人类可读的形态描述，例如 'number' 或 'array of number'"""
        if self.is_array:
            return f"array of {self.kind.value}"
        return self.kind.value

    @property
    def needs_json(self) -> bool:
        """只有标量 string 直接使用原文，其余形态都需要 JSON 解码"""
        return self.kind is not FieldKind.STRING or self.is_array


class FieldSpec(BaseModel):
    """
    规范化后的字段

    属性:
        name: 字段标识（结果字典的 key）
        title: 展示标题，同时是提取锚点 "Title:"
        description: 字段说明（可选）
        type: 声明类型（可选，缺省表示原文字符串）
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    type: Optional[FieldType] = None

    @property
    def prefix(self) -> str:
        return f"{self.title}:"


class RawFieldType(BaseModel):
    """原始类型描述；kind 也接受 'name'，is_array 也接受 'isArray'"""

    kind: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("kind", "name")
    )
    is_array: bool = Field(
        default=False, validation_alias=AliasChoices("is_array", "isArray")
    )


class RawField(BaseModel):
    """语法解析器或调用方提交的、尚未校验的字段描述"""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[RawFieldType] = None


FieldInput = Union[RawField, FieldSpec, Mapping[str, Any]]


def _coerce_raw(field: FieldInput) -> RawField:
    if isinstance(field, RawField):
        return field
    if isinstance(field, FieldSpec):
        return RawField.model_validate(field.model_dump(mode="json"))
    if isinstance(field, Mapping):
        try:
            return RawField.model_validate(dict(field))
        except ValidationError as e:
            name = field.get("name") or "<unnamed>"
            raise SchemaError(
                f"Invalid field descriptor: {name}",
                code=ErrorCode.FIELD_INVALID,
                context={"errors": e.errors()},
            ) from e
    raise SchemaError(
        f"Invalid field descriptor type: {type(field).__name__}",
        code=ErrorCode.FIELD_INVALID,
    )


def normalize_field(field: FieldInput) -> FieldSpec:
    """
    校验并补全一个字段描述

    规则：
        - name 为空 -> SchemaError("Field name is required")
        - title 为空时由 name 推导；推导结果仍为空白 -> SchemaError
        - 声明了 type 但 kind 为空 -> SchemaError("Field type name is required: <name>")
        - kind 不在 string/number/boolean 之内 -> SchemaError

    Raises:
        SchemaError: 字段描述不合法
    """
    raw = _coerce_raw(field)

    if not raw.name:
        raise SchemaError("Field name is required", code=ErrorCode.FIELD_NAME_REQUIRED)

    title = raw.title if raw.title else to_title(raw.name)
    # "_" 之类的名字推导出的标题为空，无法作为提取锚点
    if not title.strip():
        raise SchemaError(
            f"Field title is required: {raw.name}",
            code=ErrorCode.FIELD_INVALID,
            context={"field": raw.name},
        )

    field_type: Optional[FieldType] = None
    if raw.type is not None:
        if not raw.type.kind:
            raise SchemaError(
                f"Field type name is required: {raw.name}",
                code=ErrorCode.FIELD_TYPE_REQUIRED,
                context={"field": raw.name},
            )
        try:
            kind = FieldKind(raw.type.kind)
        except ValueError:
            raise SchemaError(
                f"Unsupported field type '{raw.type.kind}': {raw.name}",
                code=ErrorCode.FIELD_TYPE_UNSUPPORTED,
                context={"field": raw.name, "kind": raw.type.kind},
            ) from None
        field_type = FieldType(kind=kind, is_array=raw.type.is_array)

    try:
        return FieldSpec(
            name=raw.name,
            title=title,
            description=raw.description,
            type=field_type,
        )
    except ValidationError as e:
        raise SchemaError(
            f"Invalid field descriptor: {raw.name}",
            code=ErrorCode.FIELD_INVALID,
            context={"errors": e.errors()},
        ) from e
