# sigil/core/exceptions.py
"""
统一异常与错误码系统

- 提供 SigilError 及各子类异常（SchemaError、ExtractionValidationError 等）
- 复用 sigil.core.error_codes 中定义的 ErrorCode / ErrorCategory 等
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sigil.config import get_settings
from sigil.core.error_codes import (
    ErrorCode,
    ErrorCategory,
    ErrorInfo,
    get_error_info,
    get_message,
)

if TYPE_CHECKING:
    from sigil.core.signature.fields import FieldSpec


class SigilError(Exception):
    """
    sigil 所有自定义异常的基类。

    属性:
        code: ErrorCode（逻辑错误码，默认为 UNKNOWN）
        context: 额外上下文信息（调试/日志）
    """

    def __init__(self, message: str, **kwargs: Any):
        self.code: ErrorCode = kwargs.pop("code", ErrorCode.UNKNOWN)
        self.context: dict[str, Any] = kwargs.pop("context", {}) or {}

        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (code={self.code.value})"


class SchemaError(SigilError):
    """签名/字段定义错误（空签名、缺少字段名、缺少类型名等）"""
    pass


class SignatureSyntaxError(SchemaError):
    """签名源字符串无法被语法解析器识别"""

    def __init__(self, message: str, source_text: str, **kwargs: Any):
        kwargs.setdefault("code", ErrorCode.SIGNATURE_SYNTAX)
        super().__init__(message, **kwargs)
        self.source_text = source_text
        self.context.setdefault("source_text", source_text)


class ExtractionValidationError(SigilError):
    """
    模型输出不符合签名约束

    属性:
        field: 出错的输出字段（FieldSpec）
        raw_value: 该字段被切分出的原始文本
    """

    def __init__(
        self,
        message: str,
        field: "FieldSpec",
        raw_value: str,
        **kwargs: Any,
    ):
        kwargs.setdefault("code", ErrorCode.EXTRACTION_TYPE_MISMATCH)
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value
        self.context.setdefault("field", field.name)

    def get_detailed_error(self) -> str:
        """
        将校验失败格式化为可读字符串，便于日志输出或回传给上层的重试逻辑。
        """
        limit = get_settings().error_preview_length
        lines = [
            f"字段 '{self.field.name}' ({self.field.title}) 校验失败: {self.message}",
            f"错误码: {self.code.value}",
        ]
        if self.raw_value:
            preview = self.raw_value[:limit].replace("\n", "\\n")
            suffix = "..." if len(self.raw_value) > limit else ""
            lines.append(f"原始值预览: {preview}{suffix}")
        return "\n".join(lines)


class MissingFieldError(ExtractionValidationError):
    """模型输出中找不到某个输出字段的前缀（"Title:"）"""

    def __init__(self, field: "FieldSpec", **kwargs: Any):
        kwargs.setdefault("code", ErrorCode.EXTRACTION_FIELD_MISSING)
        msg = f"Field '{field.title}:' not found in completion"
        super().__init__(msg, field, "", **kwargs)


class PromptError(SigilError):
    """Prompt 渲染错误（缺少输入值等）"""
    pass


__all__ = [
    # 异常类
    "SigilError",
    "SchemaError",
    "SignatureSyntaxError",
    "ExtractionValidationError",
    "MissingFieldError",
    "PromptError",
    # 错误码相关（从 error_codes 复用）
    "ErrorCode",
    "ErrorCategory",
    "ErrorInfo",
    "get_error_info",
    "get_message",
]
