"""常量模块。

集中管理系统常量，包括错误消息、HTTP 相关常量、表单文案等。

主要常量：
- ErrorMessages: 错误消息常量
- HttpStatus: HTTP 状态码常量
- FlashCategory: Flash 消息类别
- PostFormAction / PostFormMessages: 文章编辑表单常量
"""

# 导入HTTP状态码常量（使用Python标准库）
from http import HTTPStatus as HttpStatus

# 导入系统常量
from .system_constants import (
    ErrorCategory,
    ErrorMessages,
    ErrorSeverity,
    SuccessMessages,
)

# 导入Flash类别常量
from .flash_categories import FlashCategory

# 导入HTTP头常量
from .http_headers import HttpHeaders

# 导入HTTP方法常量
from .http_methods import HttpMethod

# 导入文章表单常量
from .post_form import PostFormAction, PostFormMessages

# 导出所有常量
__all__ = [
    "ErrorCategory",
    "ErrorMessages",
    "ErrorSeverity",
    "FlashCategory",
    "HttpHeaders",
    "HttpMethod",
    "HttpStatus",
    "PostFormAction",
    "PostFormMessages",
    "SuccessMessages",
]
