# puzzle_source.py
# 从 JSON 文件加载候选引文，文件缺失或无效时使用内置的西班牙语引文

import json
import os

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
SPANISH_QUOTES_FILE_PATH = os.path.join(BASE_DIR, "spanish_quotes.json")

DEFAULT_LANGUAGE = "Spanish"
DEFAULT_PUZZLES = [ # 内置引文 (备用)
    {"quote": "SIEMPRE ES MÁS FACIL DESTRUIR QUE CONSTRUIR.", "language": "Spanish", "source": "Proverbio"},
    {"quote": "AÑOS DE LUCHA POR UN MAÑANA MEJOR.", "language": "Spanish", "source": "Lema"},
    {"quote": "EL VIAJE DE MIL MILLAS COMIENZA CON UN SOLO PASO.", "language": "Spanish", "source": "Lao Tzu"},
]


def normalize_puzzle_entry(entry):
    """把字符串或 {quote, language, source} 字典统一为字典；无引文时返回 None。"""
    if isinstance(entry, str):
        entry = {"quote": entry}
    if not isinstance(entry, dict): return None
    quote = entry.get("quote")
    if not isinstance(quote, str) or not quote.strip(): return None
    return {"quote": quote.strip(),
            "language": entry.get("language") or DEFAULT_LANGUAGE,
            "source": entry.get("source") or ""}


def load_puzzles(filepath=SPANISH_QUOTES_FILE_PATH):
    """加载引文列表。文件缺失、为空或格式错误时打印警告并返回内置引文。"""
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            raw_entries = json.load(f)
    except FileNotFoundError:
        print(f"引文加载警告：文件 '{filepath}' 未找到，使用内置引文。")
        return [dict(p) for p in DEFAULT_PUZZLES]
    except ValueError as e:  # JSONDecodeError 与 UnicodeDecodeError
        print(f"引文加载警告：文件 '{filepath}' 不是有效的 UTF-8 JSON ({e})，使用内置引文。")
        return [dict(p) for p in DEFAULT_PUZZLES]
    if not isinstance(raw_entries, list):
        print(f"引文加载警告：文件 '{filepath}' 顶层应为列表，使用内置引文。")
        return [dict(p) for p in DEFAULT_PUZZLES]
    puzzles = [p for p in (normalize_puzzle_entry(e) for e in raw_entries) if p is not None]
    if not puzzles:
        print(f"引文加载警告：文件 '{filepath}' 中没有可用的引文，使用内置引文。")
        return [dict(p) for p in DEFAULT_PUZZLES]
    print(f"引文加载：成功从 '{os.path.basename(filepath)}' 加载 {len(puzzles)} 条引文。")
    return puzzles
