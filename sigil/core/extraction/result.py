# sigil/core/extraction/result.py
"""
显式的提取结果类型

用于不希望以异常控制流程的调用方（例如批量评估、流水线组合）：
成功时携带 values，失败时携带第一个校验错误，二者必居其一。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from sigil.core.exceptions import ExtractionValidationError


@dataclass(frozen=True)
class ExtractionResult:
    values: Optional[Dict[str, Any]] = None
    error: Optional[ExtractionValidationError] = None

    def __post_init__(self) -> None:
        if (self.values is None) == (self.error is None):
            raise ValueError("ExtractionResult requires exactly one of values / error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Dict[str, Any]:
        """成功时返回 values，失败时抛出携带的错误"""
        if self.error is not None:
            raise self.error
        return self.values  # type: ignore[return-value]
