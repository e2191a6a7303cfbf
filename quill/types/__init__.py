"""Quill 共享类型导出."""

from quill.types.structures import (
    ContextDict,
    ContextValue,
    JsonDict,
    JsonValue,
    LoggerExtra,
    PayloadMapping,
    PayloadValue,
    ResourcePayload,
    ScalarValue,
    StructlogEventDict,
    TemplateContext,
)

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
