"""文章编辑页视图.

`PostEditView` 为开放版本;`SecuredPostEditView` 要求登录,并在删除前增加确认步骤.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import flash, jsonify, request

from quill.constants import FlashCategory, HttpStatus, PostFormAction
from quill.constants.system_constants import SuccessMessages
from quill.errors import ConflictError
from quill.forms.definitions import POST_FORM_DEFINITION, SECURED_POST_FORM_DEFINITION
from quill.forms.handlers.post_form_handler import PostFormHandler
from quill.utils.decorators import login_required
from quill.utils.response_utils import prefers_json_response
from quill.utils.route_safety import safe_route_call
from quill.views.mixins.resource_forms import ResourceFormView

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from quill.forms.handlers.post_form_handler import PostFormOutcome
    from quill.models.post import Post
    from quill.types import ResourcePayload


class PostEditView(ResourceFormView):
    """文章编辑页: GET 加载文章,POST 删除或更新."""

    form_definition = POST_FORM_DEFINITION
    handler_class: type[PostFormHandler] = PostFormHandler

    def __init__(self) -> None:
        super().__init__()
        self.handler = self.handler_class()

    def get(self, slug: str | None = None) -> ResponseReturnValue:
        post = self._load_post(slug)
        if prefers_json_response():
            return jsonify({"post": post.to_dict()})
        return self._render(self._build_context(post, form_data=None))

    def post(self, slug: str | None = None) -> ResponseReturnValue:
        payload = self._extract_payload(request)
        return self._submit(slug, payload)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _load_post(self, slug: str | None) -> Post:
        return safe_route_call(
            self.handler.load,
            slug,
            module="posts",
            action="post_edit_load",
            public_error="加载文章失败",
            context={"slug": slug, "form_name": self.form_definition.name},
        )

    def _submit(self, slug: str | None, payload: ResourcePayload) -> ResponseReturnValue:
        submission = self.handler.parse(payload)
        try:
            outcome: PostFormOutcome = safe_route_call(
                self.handler.submit,
                submission,
                module="posts",
                action="post_edit_submit",
                public_error="保存文章失败",
                context={
                    "slug": slug,
                    "form_name": self.form_definition.name,
                    "submission": type(submission).__name__,
                },
            )
        except ConflictError as exc:
            if prefers_json_response():
                raise
            flash(exc.message, FlashCategory.ERROR)
            post = self._load_post(slug)
            return self._render(self._build_context(post, form_data=payload))

        if outcome.status == "invalid" and outcome.errors is not None:
            if prefers_json_response():
                return jsonify(outcome.errors.to_dict()), HttpStatus.BAD_REQUEST
            post = self._load_post(slug)
            return self._render(self._build_context(post, form_data=payload, form_errors=outcome.errors))

        message = SuccessMessages.POST_DELETED if outcome.status == "deleted" else SuccessMessages.POST_UPDATED
        return self._redirect_success(message)


class SecuredPostEditView(PostEditView):
    """需要登录的文章编辑页.

    删除按钮先提交 `_action=confirm-delete`,只重新渲染并打开确认对话框;
    对话框中的确认按钮再提交 `_action=delete` 完成删除.
    """

    form_definition = SECURED_POST_FORM_DEFINITION
    decorators = [login_required]

    def post(self, slug: str | None = None) -> ResponseReturnValue:
        payload = self._extract_payload(request)
        if payload.get(PostFormAction.FIELD) == PostFormAction.CONFIRM_DELETE:
            post = self._load_post(slug)
            return self._render(self._build_context(post, form_data=payload, confirm_dialog_open=True))
        return self._submit(slug, payload)
