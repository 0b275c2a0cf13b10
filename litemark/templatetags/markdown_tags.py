# litemark/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from litemark.documents import HIDDEN_STYLE_ID, hidden_style_rule, render_markdown_tags
from litemark.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_tags")
def markdown_tags_filter(value):
    """Render <markdown>/<md>/<text type="markdown"> elements inside an HTML string"""
    return mark_safe(render_markdown_tags(value or ""))


@register.simple_tag
def markdown_hidden_style():
    """
    <style> element hiding markdown source elements until they are rendered.
    Usage: {% load markdown_tags %}{% markdown_hidden_style %} inside <head>
    """
    return mark_safe(f'<style id="{HIDDEN_STYLE_ID}">{hidden_style_rule()}</style>')
