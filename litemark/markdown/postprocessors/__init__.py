# litemark/markdown/postprocessors/__init__.py

from .placeholder_restorer import placeholder_restorer_default

POSTPROCESSORS = [
    placeholder_restorer_default,  # Code blocks, then inline code, then escapes
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
