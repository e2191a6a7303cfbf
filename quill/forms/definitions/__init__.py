"""资源表单定义集合."""

from .base import (
    ConfirmDialog,
    FieldComponent,
    FormButton,
    ResourceFormDefinition,
    ResourceFormField,
    SubmitTracking,
)
from .post import POST_FORM_DEFINITION, SECURED_POST_FORM_DEFINITION

__all__ = [
    "POST_FORM_DEFINITION",
    "SECURED_POST_FORM_DEFINITION",
    "ConfirmDialog",
    "FieldComponent",
    "FormButton",
    "ResourceFormDefinition",
    "ResourceFormField",
    "SubmitTracking",
]
