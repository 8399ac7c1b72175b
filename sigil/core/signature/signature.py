# sigil/core/signature/signature.py
"""
Signature：有序、具名的输入/输出字段容器

生命周期：
- 构造时调用一次语法解析器，得到原始字段列表，逐个经 normalize_field 规范化；
- 之后只能通过 add_input_field / add_output_field 追加字段（保持原有顺序）；
- clone() 先用 source_text 重建基线，再替换为当前字段列表的浅拷贝，
  因此构造后追加的字段会被保留，且克隆体与原对象互不影响。

线程安全：
- 读操作（包括提取）可以并发；
- 追加字段不加锁，并发追加需要调用方自行同步。
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sigil.config import get_settings
from sigil.core.exceptions import ErrorCode, SchemaError
from sigil.core.logging import get_logger
from sigil.core.signature.fields import FieldInput, FieldSpec, normalize_field
from sigil.core.signature.parser import SignatureParser, parse_signature

logger = get_logger(__name__)


class Signature:
    """
    提示/响应签名

    示例：
        sig = Signature("question -> answer, score:number", description="QA")
        sig.add_output_field({"name": "sources", "type": {"kind": "string", "is_array": True}})

    参数:
        source_text: 签名源字符串，不能为空
        description: 签名说明（可选）
        parser: 语法解析器，默认为 parse_signature
        strict: 是否拒绝同一列表内重复的 name / title；
                None 表示使用配置项 SIGIL_STRICT_FIELDS

    get_input_fields / get_output_fields 返回调用时刻的元组快照，
    之后追加的字段不会反映到已取得的快照中。
    """

    def __init__(
        self,
        source_text: str,
        description: Optional[str] = None,
        *,
        parser: Optional[SignatureParser] = None,
        strict: Optional[bool] = None,
    ):
        if not source_text:
            raise SchemaError("Signature is required", code=ErrorCode.SIGNATURE_REQUIRED)

        self._parser: SignatureParser = parser or parse_signature
        self._strict = get_settings().strict_fields if strict is None else strict
        self._source_text = source_text
        self._description = description

        parsed = self._parser(source_text)
        self._input_fields = self._field_list(parsed.inputs)
        self._output_fields = self._field_list(parsed.outputs)

        logger.debug(
            "Signature built",
            inputs=len(self._input_fields),
            outputs=len(self._output_fields),
        )

    # ================= 读访问 =================

    @property
    def source_text(self) -> str:
        return self._source_text

    @property
    def strict(self) -> bool:
        return self._strict

    def get_description(self) -> Optional[str]:
        return self._description

    def get_input_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(self._input_fields)

    def get_output_fields(self) -> Tuple[FieldSpec, ...]:
        return tuple(self._output_fields)

    # ================= 修改 =================

    def add_input_field(self, field: FieldInput) -> FieldSpec:
        """规范化后追加到输入字段末尾；失败时列表保持不变"""
        spec = normalize_field(field)
        self._check_unique(self._input_fields, spec)
        self._input_fields.append(spec)
        logger.debug("Input field added", field=spec.name)
        return spec

    def add_output_field(self, field: FieldInput) -> FieldSpec:
        """规范化后追加到输出字段末尾；失败时列表保持不变"""
        spec = normalize_field(field)
        self._check_unique(self._output_fields, spec)
        self._output_fields.append(spec)
        logger.debug("Output field added", field=spec.name)
        return spec

    def clone(self) -> "Signature":
        sig = Signature(
            self._source_text,
            self._description,
            parser=self._parser,
            strict=self._strict,
        )
        # FieldSpec 不可变，浅拷贝列表即可保证互不影响
        sig._input_fields = list(self._input_fields)
        sig._output_fields = list(self._output_fields)
        return sig

    # ================= 内部工具 =================

    def _field_list(self, raw_fields: Iterable[FieldInput]) -> List[FieldSpec]:
        fields: List[FieldSpec] = []
        for raw in raw_fields:
            spec = normalize_field(raw)
            self._check_unique(fields, spec)
            fields.append(spec)
        return fields

    def _check_unique(self, fields: List[FieldSpec], spec: FieldSpec) -> None:
        # title 是提取锚点，重复会导致切分结果不确定
        if not self._strict:
            return
        for existing in fields:
            if existing.name == spec.name or existing.title == spec.title:
                raise SchemaError(
                    f"Duplicate field: '{spec.name}' ({spec.title}) conflicts with "
                    f"'{existing.name}' ({existing.title})",
                    code=ErrorCode.DUPLICATE_FIELD,
                    context={"field": spec.name, "existing": existing.name},
                )

    def __repr__(self) -> str:
        inputs = ", ".join(f.name for f in self._input_fields)
        outputs = ", ".join(f.name for f in self._output_fields)
        return f"Signature({inputs} -> {outputs})"
