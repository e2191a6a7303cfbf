"""Quill - 常量定义模块

统一管理错误分类、严重度与通用提示文案.
"""

from enum import Enum


class ErrorCategory(Enum):
    """错误分类枚举."""

    VALIDATION = "validation"
    BUSINESS = "business"
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    SYSTEM = "system"


class ErrorSeverity(Enum):
    """错误严重程度枚举."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


# 错误消息常量
class ErrorMessages:
    """错误消息常量."""

    # 通用错误
    INTERNAL_ERROR = "服务器内部错误"
    VALIDATION_ERROR = "数据验证失败"
    RESOURCE_NOT_FOUND = "资源不存在"
    INVALID_REQUEST = "无效的请求"
    AUTHENTICATION_REQUIRED = "请先登录"
    PRECONDITION_FAILED = "请求前置条件不满足"

    # 认证错误
    INVALID_CREDENTIALS = "用户名或密码错误"
    ACCOUNT_DISABLED = "账户已被禁用"

    # 数据库错误
    DATABASE_QUERY_ERROR = "数据库查询错误"
    CONSTRAINT_VIOLATION = "数据约束错误"


# 成功消息常量
class SuccessMessages:
    """成功消息常量."""

    OPERATION_SUCCESS = "操作成功"
    LOGIN_SUCCESS = "登录成功"
    LOGOUT_SUCCESS = "登出成功"
    POST_UPDATED = "文章更新成功"
    POST_DELETED = "文章删除成功"
