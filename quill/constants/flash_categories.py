"""Flask Flash消息类别常量.

定义Flash消息的标准类别,避免魔法字符串.
"""

from __future__ import annotations

from typing import ClassVar


class FlashCategory:
    """Flask Flash消息类别常量.

    这些类别同时作为前端 alert 的样式后缀.
    """

    SUCCESS = "success"     # 成功消息(绿色)
    ERROR = "error"         # 错误消息(红色)
    WARNING = "warning"     # 警告消息(黄色)
    INFO = "info"           # 信息消息(蓝色)

    CSS_CLASSES: ClassVar[dict[str, str]] = {
        SUCCESS: "alert-success",
        ERROR: "alert-error",
        WARNING: "alert-warning",
        INFO: "alert-info",
    }

    @classmethod
    def get_css_class(cls, category: str) -> str:
        """获取消息类别对应的 CSS 类名.

        Args:
            category: 消息类别字符串

        Returns:
            str: CSS 类名,未知类别回退为 info 样式

        """
        return cls.CSS_CLASSES.get(category, "alert-info")
