"""
展示层：文本页面渲染与 CLI
"""

from .screens import render_outcome, render_screen

__all__ = ["render_screen", "render_outcome"]
