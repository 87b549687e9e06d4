# link_walker/report.py

"""
Генерация JSON-отчёта об обходе LinkWalker.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

__all__ = ["build_report", "render_json"]


def build_report(seed_url: str, visited: Iterable[str]) -> Dict[str, Any]:
    """Собирает сериализуемый отчёт: стартовый URL и посещённые страницы по порядку."""
    pages = list(visited)
    return {"seed_url": seed_url, "visited": len(pages), "pages": pages}


def render_json(report: Dict[str, Any], output_path: Path | str, indent: Optional[int] = 2) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: словарь из build_report
    :param output_path: путь к JSON-файлу
    :param indent: отступ JSON, None для компактной записи
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open("w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=indent)

    return output
