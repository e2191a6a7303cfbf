"""统一时间处理工具模块.

数据库统一存储 UTC 时间,页面展示时再格式化.
"""

from datetime import UTC, datetime


class TimeFormats:
    """时间格式常量."""

    DATETIME_FORMAT = "%Y-%m-%d %H:%M"


class TimeUtils:
    """统一时间处理工具类."""

    @staticmethod
    def now() -> datetime:
        """获取当前 UTC 时间.

        Returns:
            带 UTC 时区信息的当前时间.

        """
        return datetime.now(UTC)

    @staticmethod
    def format_datetime(dt: datetime | None, format_str: str = TimeFormats.DATETIME_FORMAT) -> str:
        """格式化时间,缺失时返回占位符.

        SQLite 读回的时间不带时区,按 UTC 解释.
        """
        if dt is None:
            return "-"
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return dt.strftime(format_str)

    @staticmethod
    def to_json_serializable(dt: datetime | None) -> str | None:
        """转换为 ISO 字符串,供 JSON 响应使用."""
        return dt.isoformat() if dt else None


time_utils = TimeUtils()
