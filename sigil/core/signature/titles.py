# sigil/core/signature/titles.py
"""
字段标题推导

标题既用于 Prompt 展示，也是提取阶段的定位锚点（"Title:"），
因此推导规则必须稳定：同一个 name 永远得到同一个 title。
"""

from __future__ import annotations

import re

_UPPER_RE = re.compile(r"([A-Z])")


def to_title(name: str) -> str:
    """
    将字段名转换为展示标题

    规则（按顺序）：
        1. 下划线替换为空格
        2. 每个大写字母前插入空格（camelCase 拆分）
        3. 去除首尾空白
        4. 首字母大写

    示例：
        >>> to_title("my_field")
        'My field'
        >>> to_title("myFieldName")
        'My Field Name'
    """
    result = name.replace("_", " ")
    # 首字母本身大写时插入的前导空格由 strip 去掉
    result = _UPPER_RE.sub(r" \1", result).strip()
    return result[:1].upper() + result[1:]
