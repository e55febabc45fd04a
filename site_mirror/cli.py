#!/usr/bin/env python3
# === FILE: site_mirror/cli.py ===
"""
Точка входа для запуска SiteMirror через командную строку.

Команды:
  crawl     Обойти сайт от стартового URL и сохранить страницы на диск
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  URL                 Стартовый URL (перекрывает base_url из конфига)
  --depth INT         Максимальная глубина ссылок
  --concurrency INT   Максимум одновременных загрузок
  --output-dir DIR    Корневая папка для страниц
  --timeout SEC       Таймаут одного запроса
  --user-agent UA     Заголовок User-Agent
  --permit-scope      fetch | task: сколько держать разрешение на загрузку
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2

Дополнительно:
  --version, -v       Показать версию SiteMirror

Пример:
  site_mirror crawl https://www.example.com --depth 2 --concurrency 10 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_mirror import __version__
from site_mirror.config import load_config
from site_mirror.engine import start_crawl
from site_mirror.errors import SeedParseError
from site_mirror.logger import configure
from site_mirror.report.html_report import render_html
from site_mirror.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteMirror, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteMirror CLI."""
    configure(level=log_level, log_file=log_file, log_format=log_format)
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


def _load(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Некорректная конфигурация:\n{e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--depth', '-d', 'max_depth', type=click.IntRange(min=0), default=None,
              help='Максимальная глубина ссылок')
@click.option('--concurrency', '-n', 'max_concurrency', type=click.IntRange(min=1), default=None,
              help='Максимум одновременных загрузок')
@click.option('--output-dir', '-o', 'output_dir', default=None,
              type=click.Path(file_okay=False, path_type=Path),
              help='Корневая папка для сохранённых страниц')
@click.option('--timeout', 'timeout', type=float, default=None,
              help='Таймаут одного запроса (секунд)')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option('--permit-scope', 'permit_scope', type=click.Choice(['fetch', 'task']), default=None,
              help='Держать разрешение только на загрузку или на всю задачу')
@click.option('--json', '-j', 'json_output', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Сохранить JSON-отчёт в файл')
@click.option('--html', 'html_output', default=None,
              type=click.Path(writable=True, dir_okay=False, path_type=Path),
              help='Сохранить HTML-отчёт в файл')
@click.option('--template', '-t', 'template_dir', default=None,
              type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Папка с Jinja2-шаблоном report.html.j2')
@click.pass_context
def crawl(ctx, url, max_depth, max_concurrency, output_dir, timeout, user_agent, permit_scope,
          json_output, html_output, template_dir):
    """Обойти сайт и сохранить страницы."""
    cfg = _load(
        ctx,
        base_url=url,
        max_depth=max_depth,
        max_concurrency=max_concurrency,
        output_dir=output_dir,
        timeout=timeout,
        user_agent=user_agent,
        permit_scope=permit_scope,
    )
    try:
        report = asyncio.run(start_crawl(cfg))
    except SeedParseError as e:
        print_error(f'Некорректный стартовый URL: {e}')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    click.echo(f'Crawl completed in {report.duration:.2f}s '
               f'({len(report.pages)} pages, {len(report.errors)} errors)')
    click.echo(f"Pages saved in '{report.output_dir}'")

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.pass_context
def show_config(ctx, url):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _load(ctx, base_url=url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
