"""基础的资源表单定义模型.

这些定义会被后端视图、模板以及前端脚本共享,确保字段与按钮描述只有唯一来源.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FieldComponent(str, Enum):
    """表单控件类型."""

    TEXT = "text"
    TEXTAREA = "textarea"


class SubmitTracking(str, Enum):
    """提交中状态的跟踪方式,对应前端脚本的 `data-submit-tracking`.

    - FORM: 整个表单共享一个提交状态,按钮是否切换文案由各自的 busy_label 决定
    - BUTTON: 逐个按钮跟踪,只有被点击的按钮显示进行中文案
    """

    FORM = "form"
    BUTTON = "button"


@dataclass(slots=True)
class ResourceFormField:
    """单个字段的元数据."""

    name: str
    label: str
    component: FieldComponent = FieldComponent.TEXT
    props: dict[str, str | int] = field(default_factory=dict)


@dataclass(slots=True)
class FormButton:
    """提交按钮.

    Attributes:
        label: 空闲时的文案.
        busy_label: 提交中的文案,为空时保持原文案.
        name: 提交时携带的字段名,为空表示不携带.
        value: 提交时携带的字段值.
        variant: 样式变体(primary、danger).
        aria_label: 无障碍标签.
        disable_on_submit: 提交中是否禁用.
        opens_dialog: 点击后先打开的确认对话框 ID.

    """

    label: str
    busy_label: str | None = None
    name: str | None = None
    value: str | None = None
    variant: str = "primary"
    aria_label: str | None = None
    disable_on_submit: bool = True
    opens_dialog: str | None = None


@dataclass(slots=True)
class ConfirmDialog:
    """删除等危险操作前的确认对话框."""

    dialog_id: str
    title: str
    body: str
    confirm: FormButton
    cancel_label: str


@dataclass(slots=True)
class ResourceFormDefinition:
    """描述某个资源表单的基础配置.

    Attributes:
        name: 资源英文名(如 post)
        template: 渲染所用的模板路径
        fields: 字段定义列表
        buttons: 提交按钮列表,按页面顺序排列
        tracking: 提交中状态的跟踪方式
        confirm_dialog: 确认对话框(可选)
        redirect_endpoint: 保存成功后跳转的端点

    """

    name: str
    template: str
    fields: list[ResourceFormField] = field(default_factory=list)
    buttons: list[FormButton] = field(default_factory=list)
    tracking: SubmitTracking = SubmitTracking.FORM
    confirm_dialog: ConfirmDialog | None = None
    redirect_endpoint: str | None = None
