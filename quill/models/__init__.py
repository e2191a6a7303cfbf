"""数据模型模块.

- Post: 文章模型
- User: 后台用户模型
"""

__all__ = ["Post", "User"]


def __getattr__(name: str):
    """延迟加载模型, 避免初始化周期引发的循环导入."""
    if name not in __all__:
        msg = f"module 'quill.models' has no attribute {name}"
        raise AttributeError(msg)

    from importlib import import_module

    module_map = {
        "Post": "quill.models.post",
        "User": "quill.models.user",
    }

    module = import_module(module_map[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
