"""
Management command to render markdown files to HTML.

Plain markdown files are converted to an HTML fragment. With --document the
input is treated as an HTML page whose <markdown>, <md> and
<text type="markdown"> elements get rendered in place.
"""

import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from litemark.documents import render_markdown_tags
from litemark.markdown.renderer import render_markdown


class Command(BaseCommand):
    help = 'Render markdown files (or stdin) to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'paths',
            nargs='+',
            help='Markdown files to render, "-" reads standard input',
        )
        parser.add_argument(
            '--output',
            '-o',
            type=str,
            help='Write the result to this file instead of stdout',
        )
        parser.add_argument(
            '--document',
            action='store_true',
            help='Treat input as an HTML document and render embedded markdown elements',
        )
        parser.add_argument(
            '--hide-unrendered',
            action='store_true',
            help='With --document, add the <style> rule hiding markdown source elements',
        )

    def _read(self, path):
        if path == '-':
            return sys.stdin.read()
        source = Path(path)
        if not source.is_file():
            raise CommandError(f'No such file: {path}')
        return source.read_text(encoding='utf-8')

    def handle(self, *args, **options):
        paths = options['paths']
        output = options.get('output')
        document = options.get('document')
        hide_unrendered = options.get('hide_unrendered')

        if hide_unrendered and not document:
            raise CommandError('--hide-unrendered only applies with --document')

        rendered = []
        for path in paths:
            text = self._read(path)
            if document:
                rendered.append(render_markdown_tags(text, hide_unrendered=hide_unrendered))
            else:
                rendered.append(render_markdown(text))

        result = '\n'.join(rendered)

        if output:
            Path(output).write_text(result + '\n', encoding='utf-8')
            self.stdout.write(
                self.style.SUCCESS(f'Rendered {len(paths)} file(s) to {output}')
            )
        else:
            self.stdout.write(result)
