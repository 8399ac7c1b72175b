# sigil/core/extraction/extractor.py
"""
基于字段标题的补全文本切分与提取

算法（按输出字段声明顺序，单次前向扫描）：
1. 字段 i 的前缀为 "Title:"
2. 从上一个字段前缀结束处（首个字段从 0）开始查找该前缀
3. 取值区间从前缀之后开始
4. 到下一个字段前缀出现处结束；最后一个字段到文本末尾结束
5. 去除首尾空白，去掉末尾连续 3 个及以上的 '-'（补全结束标记），再去空白
6. 未声明类型：原文即值；声明了类型：交给 validator 解码与校验

约束：
- 假设输出字段在补全中按声明顺序各出现一次；这是多分隔符的顺序敏感切分，
  不是通用解析器。
- 找不到某个字段前缀时抛出 MissingFieldError。
- 任意字段失败即中止，不返回部分结果。
- 只读 Signature，相同输入得到相同输出。
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List

from sigil.core.exceptions import ExtractionValidationError, MissingFieldError
from sigil.core.extraction.result import ExtractionResult
from sigil.core.extraction.validator import validate_value
from sigil.core.logging import get_context_logger
from sigil.core.signature.fields import FieldSpec
from sigil.core.signature.signature import Signature

logger = get_context_logger(__name__)

_END_MARKER_RE = re.compile(r"-{3,}\Z")


@dataclass(frozen=True)
class FieldSpan:
    """一个输出字段在补全文本中的位置与清理后的文本"""
    field: FieldSpec
    start: int
    end: int
    text: str


def clean_span(raw: str) -> str:
    """去空白 -> 去末尾 '---' 标记 -> 再去空白"""
    return _END_MARKER_RE.sub("", raw.strip()).strip()


def segment_completion(signature: Signature, completion: str) -> List[FieldSpan]:
    """
    将补全文本按输出字段切分为有序的文本区间

    Raises:
        MissingFieldError: 某个输出字段的前缀不存在
    """
    fields = signature.get_output_fields()
    spans: List[FieldSpan] = []
    search_from = 0

    for i, field in enumerate(fields):
        pos = completion.find(field.prefix, search_from)
        if pos == -1:
            raise MissingFieldError(field, context={"search_from": search_from})

        start = pos + len(field.prefix)
        end = len(completion)
        if i + 1 < len(fields):
            next_pos = completion.find(fields[i + 1].prefix, start)
            if next_pos != -1:
                end = next_pos

        spans.append(FieldSpan(field, start, end, clean_span(completion[start:end])))
        search_from = start

    return spans


def extract_values(signature: Signature, completion: str) -> Dict[str, Any]:
    """
    从模型补全中提取全部输出字段的值

    返回:
        {字段 name: 值}，值为 str / number / bool 或它们的同构列表

    Raises:
        MissingFieldError: 输出字段前缀缺失
        ExtractionValidationError: JSON 解码失败、形态或类型不符
    """
    values: Dict[str, Any] = {}
    for span in segment_completion(signature, completion):
        values[span.field.name] = validate_value(span.field, span.text)

    logger.debug(
        "Values extracted",
        fields=len(values),
        completion_length=len(completion),
    )
    return values


def try_extract_values(signature: Signature, completion: str) -> ExtractionResult:
    """
    extract_values 的结果类型版本：校验失败时返回携带错误的 ExtractionResult，
    而不是抛出异常。签名本身的错误不在此列。
    """
    try:
        return ExtractionResult(values=extract_values(signature, completion))
    except ExtractionValidationError as e:
        return ExtractionResult(error=e)
