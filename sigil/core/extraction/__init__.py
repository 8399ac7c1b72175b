# sigil/core/extraction/__init__.py
"""
结构化提取子模块入口

对外主要暴露以下对象：
- extract_values: 按签名从补全文本中提取并校验输出字段
- try_extract_values / ExtractionResult: 不抛异常的结果类型版本
- segment_completion / FieldSpan: 仅切分，返回带位置信息的文本区间
- validate_value: 单字段类型校验
"""

from sigil.core.extraction.result import ExtractionResult
from sigil.core.extraction.validator import validate_value
from sigil.core.extraction.extractor import (
    FieldSpan,
    clean_span,
    extract_values,
    segment_completion,
    try_extract_values,
)

__all__ = [
    "extract_values",
    "try_extract_values",
    "ExtractionResult",
    "segment_completion",
    "FieldSpan",
    "clean_span",
    "validate_value",
]
