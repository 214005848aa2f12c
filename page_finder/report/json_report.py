# page_finder/report/json_report.py

"""
Генерация JSON-отчёта для проекта PageFinder.

Сериализация итогов обхода в файл.
"""
import json
from pathlib import Path
from typing import Any, Dict


def render_json(payload: Dict[str, Any], output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт в формате JSON по указанному пути.

    :param payload: словарь из page_finder.report.build_payload
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо однострочного вывода
    :return: Path сохранённого файла

    Пример:
    ```python
    from page_finder.report import build_payload
    from page_finder.report.json_report import render_json
    report_path = render_json(build_payload(result, config), 'reports/report.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(payload, f, ensure_ascii=False, indent=2 if pretty else None)

    return output
