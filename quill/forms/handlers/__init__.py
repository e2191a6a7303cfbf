"""表单处理器(View layer)."""
