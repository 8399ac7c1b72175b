# sigil/core/error_codes.py
"""
统一错误码系统

为签名定义与结构化提取提供结构化的错误分类和标识。
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple


class ErrorCategory(str, Enum):
    """错误类别"""
    GENERAL = "general"
    SCHEMA = "schema"
    EXTRACTION = "extraction"
    PROMPT = "prompt"


class ErrorInfo(NamedTuple):
    """错误信息"""
    category: ErrorCategory
    message: str
    severity: str  # "info", "warning", "error", "critical"


class ErrorCode(str, Enum):
    """错误码枚举"""
    # 通用
    UNKNOWN = "UNKNOWN"
    INVALID_INPUT = "INVALID_INPUT"

    # Schema / 签名
    SIGNATURE_REQUIRED = "SIGNATURE_REQUIRED"
    SIGNATURE_SYNTAX = "SIGNATURE_SYNTAX"
    FIELD_NAME_REQUIRED = "FIELD_NAME_REQUIRED"
    FIELD_TYPE_REQUIRED = "FIELD_TYPE_REQUIRED"
    FIELD_TYPE_UNSUPPORTED = "FIELD_TYPE_UNSUPPORTED"
    FIELD_INVALID = "FIELD_INVALID"
    DUPLICATE_FIELD = "DUPLICATE_FIELD"

    # 提取
    EXTRACTION_FIELD_MISSING = "EXTRACTION_FIELD_MISSING"
    EXTRACTION_DECODE_FAILED = "EXTRACTION_DECODE_FAILED"
    EXTRACTION_SHAPE_MISMATCH = "EXTRACTION_SHAPE_MISMATCH"
    EXTRACTION_TYPE_MISMATCH = "EXTRACTION_TYPE_MISMATCH"


# 错误码元数据
_ERROR_INFO: Dict[ErrorCode, ErrorInfo] = {
    ErrorCode.UNKNOWN: ErrorInfo(
        ErrorCategory.GENERAL, "An unknown error occurred", "error"
    ),
    ErrorCode.INVALID_INPUT: ErrorInfo(
        ErrorCategory.PROMPT, "Invalid input provided", "error"
    ),
    ErrorCode.SIGNATURE_REQUIRED: ErrorInfo(
        ErrorCategory.SCHEMA, "Signature is required", "error"
    ),
    ErrorCode.SIGNATURE_SYNTAX: ErrorInfo(
        ErrorCategory.SCHEMA, "Invalid signature syntax", "error"
    ),
    ErrorCode.FIELD_NAME_REQUIRED: ErrorInfo(
        ErrorCategory.SCHEMA, "Field name is required", "error"
    ),
    ErrorCode.FIELD_TYPE_REQUIRED: ErrorInfo(
        ErrorCategory.SCHEMA, "Field type name is required", "error"
    ),
    ErrorCode.FIELD_TYPE_UNSUPPORTED: ErrorInfo(
        ErrorCategory.SCHEMA, "Unsupported field type", "error"
    ),
    ErrorCode.FIELD_INVALID: ErrorInfo(
        ErrorCategory.SCHEMA, "Invalid field descriptor", "error"
    ),
    ErrorCode.DUPLICATE_FIELD: ErrorInfo(
        ErrorCategory.SCHEMA, "Duplicate field name or title", "error"
    ),
    ErrorCode.EXTRACTION_FIELD_MISSING: ErrorInfo(
        ErrorCategory.EXTRACTION, "Output field not found in completion", "warning"
    ),
    ErrorCode.EXTRACTION_DECODE_FAILED: ErrorInfo(
        ErrorCategory.EXTRACTION, "Field value is not valid JSON", "warning"
    ),
    ErrorCode.EXTRACTION_SHAPE_MISMATCH: ErrorInfo(
        ErrorCategory.EXTRACTION, "Field value has the wrong shape", "warning"
    ),
    ErrorCode.EXTRACTION_TYPE_MISMATCH: ErrorInfo(
        ErrorCategory.EXTRACTION, "Field value has the wrong type", "warning"
    ),
}


def get_error_info(code: ErrorCode) -> ErrorInfo:
    """获取错误信息"""
    return _ERROR_INFO.get(
        code,
        ErrorInfo(ErrorCategory.GENERAL, str(code), "error")
    )


def get_message(code: ErrorCode) -> str:
    """获取错误消息"""
    return get_error_info(code).message


__all__ = [
    "ErrorCode",
    "ErrorCategory",
    "ErrorInfo",
    "get_error_info",
    "get_message",
]
