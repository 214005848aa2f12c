# === FILE: page_finder/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска PageFinder через командную строку.

Команды:
  crawl     Обойти сайт и разделить страницы на найденные / не найденные
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/page_finder.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  URL                 Стартовый URL (https:// добавляется, если схема не указана)
  --class NAME        Искать страницы с элементом этого CSS-класса
  --text TERM         Искать страницы, текст которых содержит TERM
  --concurrency N     Число одновременных загрузок
  --timeout SEC       Таймаут на один запрос
  --scope MODE        strict (хост + граница пути) или prefix (строковый префикс)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --crawl-timeout SEC Таймаут всего обхода (секунд)

Пример:
  page-finder crawl https://example.com --class highlight --json report.json
"""
import asyncio
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from page_finder import __version__
from page_finder.config import load_config
from page_finder.crawler.models import CrawlResult, PageOutcome
from page_finder.logger import DEFAULT_FORMAT, init_logging, logger
from page_finder.report import build_payload
from page_finder.report.html_report import render_html
from page_finder.report.json_report import render_json
from page_finder.scanner import start_scan

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def report_progress(outcome: PageOutcome, snapshot: CrawlResult) -> None:
    """Пишет в лог строку на каждую обработанную страницу."""
    logger.info(
        "[%d] %-9s %s (matched %d, failed %d)",
        snapshot.total_visited,
        outcome.status.value,
        outcome.url,
        len(snapshot.matched),
        snapshot.failed,
    )


def _build_config(ctx, **overrides):
    try:
        return load_config(ctx.obj['config_path'], **overrides)
    except ValidationError as e:
        print_error(f'Ошибка в конфигурации:\n{e}')
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='PageFinder, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд PageFinder CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.option('--class', '-C', 'search_class', default=None, help='CSS-класс, наличие которого ищем')
@click.option('--text', '-s', 'search_text', default=None, help='Подстрока, которую ищем в тексте страницы')
@click.option('--concurrency', '-n', type=click.IntRange(min=1), default=None, help='Одновременных загрузок')
@click.option('--timeout', type=float, default=None, help='Таймаут на один запрос (секунд)')
@click.option('--user-agent', 'user_agent', default=None, help='Заголовок User-Agent')
@click.option(
    '--scope', 'scope_mode',
    type=click.Choice(['strict', 'prefix']),
    default=None,
    help='strict: тот же хост и граница пути; prefix: простой строковый префикс'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с шаблоном report.html.j2 (по умолчанию встроенный)'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, url, search_class, search_text, concurrency, timeout, user_agent, scope_mode,
          json_output, html_output, template_dir, pretty, crawl_timeout):
    """Обойти сайт и найти страницы, удовлетворяющие критерию."""
    if search_class is not None and search_text is not None:
        print_error('Укажите только один критерий: --class или --text')

    cfg = _build_config(
        ctx,
        base_url=url,
        search_class=search_class,
        search_text=search_text,
        concurrency=concurrency,
        timeout=timeout,
        user_agent=user_agent,
        strict_scope=None if scope_mode is None else scope_mode == 'strict',
    )
    logger.info('Starting crawl: %s', cfg.base_url)

    try:
        if crawl_timeout:
            result = asyncio.run(
                asyncio.wait_for(start_scan(cfg, on_progress=report_progress), timeout=crawl_timeout)
            )
        else:
            result = asyncio.run(start_scan(cfg, on_progress=report_progress))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    payload = build_payload(result, cfg)

    # Если не сохраняем в файл — печатаем в stdout
    if not json_output and not html_output:
        click.echo(json.dumps(payload, ensure_ascii=False, indent=2 if pretty else None))
        return

    if json_output:
        try:
            saved_json = render_json(payload, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(payload, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(
        f'Visited {result.total_visited}: matched {len(result.matched)}, '
        f'unmatched {len(result.unmatched)}, failed {result.failed}'
    )


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.argument('url', required=False)
@click.pass_context
def show_config(ctx, url):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _build_config(ctx, base_url=url)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
