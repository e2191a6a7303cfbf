"""Quill 工具模块."""
