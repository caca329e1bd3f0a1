from typing import Any, Dict, List, Sequence

import pandas as pd

from marketplace.utils.console import Console


def render_table(rows: List[Dict[str, Any]], columns: Sequence[str]) -> str:
    """Форматирует строки результата запроса в текстовую таблицу"""
    df = pd.DataFrame(rows, columns=list(columns))
    return df.to_string(index=False)


def print_rows(
    console: Console,
    rows: List[Dict[str, Any]],
    columns: Sequence[str],
    empty_text: str,
) -> None:
    if not rows:
        console.write(empty_text)
        return
    console.write(render_table(rows, columns))
