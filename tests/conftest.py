import django
import pytest
from django.conf import settings

from litemark.markdown.placeholders import PlaceholderStore


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=["litemark"],
            TEMPLATES=[
                {
                    "BACKEND": "django.template.backends.django.DjangoTemplates",
                    "APP_DIRS": True,
                }
            ],
        )
        django.setup()


@pytest.fixture
def context():
    """Conversion context as render_markdown builds it, for testing single passes."""
    from litemark.markdown.config import get_litemark_config

    return {
        "config": get_litemark_config(),
        "placeholders": PlaceholderStore(),
    }
