"""通用结构化数据类型别名.

统一 JSON/Mapping 风格的类型,方便在视图、服务等模块中共享定义,避免重复声明.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import TypeAlias

ScalarValue: TypeAlias = str | int | float | bool | None
PayloadValue: TypeAlias = ScalarValue | Sequence[ScalarValue]
PayloadMapping: TypeAlias = Mapping[str, PayloadValue]
# 表单/JSON 请求体统一按 Mapping 读取,werkzeug 的 MultiDict 同样满足
ResourcePayload: TypeAlias = PayloadMapping
TemplateContext: TypeAlias = Mapping[str, object]

ContextValue: TypeAlias = ScalarValue | Sequence["ContextValue"] | Mapping[str, "ContextValue"]
ContextDict: TypeAlias = dict[str, ContextValue]
JsonValue: TypeAlias = ScalarValue | Sequence["JsonValue"] | Mapping[str, "JsonValue"]
JsonDict: TypeAlias = dict[str, JsonValue]
StructlogEventDict: TypeAlias = MutableMapping[str, JsonValue]
LoggerExtra: TypeAlias = Mapping[str, JsonValue]


__all__ = [
    "ContextDict",
    "ContextValue",
    "JsonDict",
    "JsonValue",
    "LoggerExtra",
    "PayloadMapping",
    "PayloadValue",
    "ResourcePayload",
    "ScalarValue",
    "StructlogEventDict",
    "TemplateContext",
]
