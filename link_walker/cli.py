#!/usr/bin/env python3
"""
Точка входа для запуска обхода LinkWalker через командную строку.

Команды:
  crawl     Обойти сайт от стартового URL и вывести/сохранить список страниц
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (по умолчанию значения по умолчанию)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  link-walker crawl https://example.com --limit 100 --forbid "Fatal error" --pretty
"""
import asyncio
import json
import re
import sys
from pathlib import Path
from typing import Callable, Sequence

import click
from pydantic import ValidationError

from link_walker import __version__
from link_walker.config import CrawlConfig, load_config
from link_walker.crawler.models import CrawlParameters
from link_walker.engine import start_crawl
from link_walker.errors import ContentCheckError, CrawlError
from link_walker.logger import configure
from link_walker.report import build_report, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def forbid_patterns(patterns: Sequence[str]) -> Callable[[str], None]:
    """Build a content check that fails on the first page matching any pattern."""
    compiled = [re.compile(p) for p in patterns]

    def check(body: str) -> None:
        for rx in compiled:
            match = rx.search(body)
            if match:
                raise ContentCheckError(f"forbidden content {match.group(0)!r} (pattern {rx.pattern!r})")

    return check


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LinkWalker, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
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
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(name)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LinkWalker CLI."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format,
        stream='stderr',
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('seed_url', required=False)
@click.option('--timeout', type=float, default=None, help='Таймаут на один запрос (секунд)')
@click.option('--status-min', 'status_code_min', type=int, default=None, help='Минимальный допустимый HTTP-статус')
@click.option('--status-max', 'status_code_max', type=int, default=None, help='Максимальный допустимый HTTP-статус')
@click.option(
    '--same-host/--any-host', 'only_same_host',
    default=None,
    help='Ходить только по ссылкам того же основного домена'
)
@click.option('--limit', '-l', 'links_limit', type=int, default=None, help='Лимит посещённых ссылок (0 = без лимита)')
@click.option(
    '--forbid', 'forbid', multiple=True,
    help='Регулярное выражение; страница с совпадением прерывает обход (можно повторять)'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--crawl-timeout', 'crawl_timeout', type=float, default=None, help='Таймаут всего обхода (секунд)')
@click.pass_context
def crawl(ctx, seed_url, timeout, status_code_min, status_code_max, only_same_host,
          links_limit, forbid, json_output, pretty, crawl_timeout):
    """Обойти сайт и сгенерировать отчёт."""
    try:
        cfg: CrawlConfig = ctx.obj['config'].with_overrides(
            seed_url=seed_url,
            timeout=timeout,
            status_code_min=status_code_min,
            status_code_max=status_code_max,
            only_same_host=only_same_host,
            links_limit=links_limit,
        )
    except ValidationError as e:
        print_error(f'Неверные параметры: {e}')
    if cfg.seed_url is None:
        print_error('Не задан стартовый URL (аргумент SEED_URL или seed_url в конфиге)')

    try:
        check = forbid_patterns(forbid)
    except re.error as e:
        print_error(f'Неверное регулярное выражение: {e}')

    seed = str(cfg.seed_url)
    params = CrawlParameters.from_config(cfg, check)
    try:
        coro = start_crawl(seed, params, user_agent=cfg.user_agent)
        if crawl_timeout:
            registry = asyncio.run(asyncio.wait_for(coro, timeout=crawl_timeout))
        else:
            registry = asyncio.run(coro)
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except CrawlError as e:
        print_error(f'Ошибка при обходе: {e}')

    report = build_report(seed, registry.snapshot())
    indent = 2 if pretty else None

    if json_output:
        try:
            saved = render_json(report, json_output, indent=indent)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        click.echo(f'JSON report: {saved}')
        return

    click.echo(json.dumps(report, ensure_ascii=False, indent=indent))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
