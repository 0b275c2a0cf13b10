from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_MARKDOWN_SELECTORS = [
    "markdown",
    "md",
    'text[type="markdown"]',
    'text[type="text/markdown"]',
    'text[type="md"]',
    'text[type="text/md"]',
]

# Lines starting with one of these tags are left out of paragraph wrapping.
DEFAULT_BLOCK_TAGS = frozenset(
    {
        "address", "article", "aside", "blockquote", "br", "details", "dd",
        "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer",
        "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li",
        "main", "nav", "ol", "p", "pre", "section", "summary", "table",
        "tbody", "td", "tfoot", "th", "thead", "tr", "ul",
    }
)


def get_litemark_config(overrides=None):
    """
    Configuration for the LiteMark conversion pipeline.

    Defaults can be overridden project-wide with a ``LITEMARK`` dict in Django
    settings, and per call through ``overrides``. Settings are only consulted
    when Django is configured so the pipeline also runs without a project.
    """
    config = {
        "DEFAULT_CODE_LANGUAGE": "plaintext",
        "MAX_QUOTE_DEPTH": 32,
        "BLOCK_TAGS": DEFAULT_BLOCK_TAGS,
        "MARKDOWN_SELECTORS": list(DEFAULT_MARKDOWN_SELECTORS),
        "CONTAINER_TAG": "div",
    }

    if settings.configured:
        config.update(getattr(settings, "LITEMARK", {}))
    if overrides:
        config.update(overrides)

    max_depth = config["MAX_QUOTE_DEPTH"]
    if not isinstance(max_depth, int) or max_depth < 1:
        raise ImproperlyConfigured(
            f"LITEMARK['MAX_QUOTE_DEPTH'] must be a positive integer, got {max_depth!r}"
        )
    config["BLOCK_TAGS"] = frozenset(tag.lower() for tag in config["BLOCK_TAGS"])

    return config
