"""通用资源表单视图.

集成 GET/POST 的公共部分,依赖 ResourceFormDefinition 描述字段与按钮.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, ClassVar, cast

from flask import Request, flash, redirect, render_template, request, url_for
from flask.views import MethodView

from quill.constants import FlashCategory

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from quill.forms.definitions import ResourceFormDefinition
    from quill.types import ResourcePayload, TemplateContext


class ResourceFormView(MethodView):
    """资源表单视图基类,子类设置 form_definition 并实现 get/post.

    Attributes:
        form_definition: 资源表单定义配置.

    """

    form_definition: ClassVar[ResourceFormDefinition]

    def __init__(self) -> None:
        """初始化视图.

        Raises:
            RuntimeError: 当子类未配置 form_definition 时抛出.

        """
        if not getattr(self, "form_definition", None):
            msg = f"{self.__class__.__name__} 未配置 form_definition"
            raise RuntimeError(msg)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    @staticmethod
    def _extract_payload(req: Request) -> ResourcePayload:
        """提取请求负载数据,JSON 与表单统一为映射;非对象的 JSON 视为空负载."""
        if req.is_json:
            data = req.get_json(silent=True)
            return cast("ResourcePayload", data if isinstance(data, Mapping) else {})
        return cast("ResourcePayload", req.form)

    def _field_values(self, resource: object, form_data: ResourcePayload | None) -> dict[str, object]:
        """计算各字段的回显值: 有提交数据时回显提交值,否则取资源属性."""
        values: dict[str, object] = {}
        for form_field in self.form_definition.fields:
            if form_data is not None:
                values[form_field.name] = form_data.get(form_field.name) or ""
            else:
                values[form_field.name] = getattr(resource, form_field.name, "") or ""
        return values

    def _build_context(
        self,
        resource: object,
        form_data: ResourcePayload | None,
        **extra: object,
    ) -> TemplateContext:
        """构建模板上下文."""
        context: dict[str, object] = {
            "resource": resource,
            "form_definition": self.form_definition,
            "form_fields": self.form_definition.fields,
            "field_values": self._field_values(resource, form_data),
            "form_errors": None,
            "confirm_dialog_open": False,
        }
        context.update(extra)
        return cast("TemplateContext", context)

    def _render(self, context: TemplateContext, status: int = 200) -> ResponseReturnValue:
        return render_template(self.form_definition.template, **context), status

    def _redirect_success(self, message: str) -> ResponseReturnValue:
        """提示成功并跳转到定义中的端点."""
        flash(message, FlashCategory.SUCCESS)
        endpoint = self.form_definition.redirect_endpoint
        target = url_for(endpoint) if endpoint else (request.referrer or url_for("main.index"))
        return redirect(target)
