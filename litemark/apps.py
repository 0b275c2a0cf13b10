from django.apps import AppConfig


class LitemarkConfig(AppConfig):
    name = 'litemark'
    verbose_name = 'LiteMark'

    def ready(self):
        """Validate LITEMARK settings at startup instead of on first render."""
        from litemark.markdown.config import get_litemark_config

        get_litemark_config()
