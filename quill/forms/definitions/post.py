"""文章编辑表单定义.

开放版本与登录版本共用字段,差异在于按钮跟踪方式与删除确认对话框.
"""

from quill.constants import PostFormAction, PostFormMessages
from quill.forms.definitions.base import (
    ConfirmDialog,
    FieldComponent,
    FormButton,
    ResourceFormDefinition,
    ResourceFormField,
    SubmitTracking,
)

CONFIRM_DELETE_DIALOG_ID = "confirm-delete-dialog"

POST_FORM_FIELDS = [
    ResourceFormField(name="title", label="Post Title:"),
    ResourceFormField(name="slug", label="Post Slug:"),
    ResourceFormField(
        name="markdown",
        label="Markdown:",
        component=FieldComponent.TEXTAREA,
        props={"rows": 20},
    ),
]

POST_FORM_DEFINITION = ResourceFormDefinition(
    name="post",
    template="posts/admin/edit.html",
    fields=POST_FORM_FIELDS,
    buttons=[
        FormButton(
            label=PostFormMessages.UPDATE_LABEL,
            busy_label=PostFormMessages.UPDATE_BUSY_LABEL,
        ),
        # 删除按钮在提交中保持原文案且不禁用
        FormButton(
            label=PostFormMessages.DELETE_LABEL,
            name=PostFormAction.FIELD,
            value=PostFormAction.DELETE,
            variant="danger",
            aria_label="delete",
            disable_on_submit=False,
        ),
    ],
    tracking=SubmitTracking.FORM,
    redirect_endpoint="posts.admin_index",
)

SECURED_POST_FORM_DEFINITION = ResourceFormDefinition(
    name="post_secured",
    template="posts/admin/edit.html",
    fields=POST_FORM_FIELDS,
    buttons=[
        FormButton(
            label=PostFormMessages.UPDATE_LABEL,
            busy_label=PostFormMessages.UPDATE_BUSY_LABEL,
        ),
        FormButton(
            label=PostFormMessages.DELETE_LABEL,
            busy_label=PostFormMessages.DELETE_BUSY_LABEL,
            name=PostFormAction.FIELD,
            value=PostFormAction.CONFIRM_DELETE,
            variant="danger",
            aria_label="delete",
            opens_dialog=CONFIRM_DELETE_DIALOG_ID,
        ),
    ],
    tracking=SubmitTracking.BUTTON,
    confirm_dialog=ConfirmDialog(
        dialog_id=CONFIRM_DELETE_DIALOG_ID,
        title=PostFormMessages.CONFIRM_DELETE_TITLE,
        body=PostFormMessages.CONFIRM_DELETE_BODY,
        confirm=FormButton(
            label=PostFormMessages.CONFIRM_DELETE_ACCEPT,
            busy_label=PostFormMessages.DELETE_BUSY_LABEL,
            name=PostFormAction.FIELD,
            value=PostFormAction.DELETE,
            variant="danger",
        ),
        cancel_label=PostFormMessages.CONFIRM_DELETE_CANCEL,
    ),
    redirect_endpoint="posts.admin_index",
)
