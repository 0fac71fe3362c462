# normalizer.py
# 明文规范化：统一大写，并按配置处理西班牙语重音字母

import string
import unicodedata

ALPHABET = string.ascii_uppercase  # 参与代换的26个大写英文字母
RESERVED_LETTERS = "Ñ"  # 西班牙语保留字母，不参与代换，也不去除其波浪符

ACCENT_MODE_PRESERVE = "preserve"  # 重音字母原样保留，作为不代换字符
ACCENT_MODE_STRIP = "strip"        # 重音元音还原为基本字母后再代换
ACCENT_MODE = ACCENT_MODE_PRESERVE


def is_substitutable(char):
    """判断字符是否属于代换字母表。"""
    return len(char) == 1 and char in ALPHABET


def _strip_accent(char):
    if char in RESERVED_LETTERS:
        return char
    decomposed = unicodedata.normalize("NFD", char)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    # 只把能还原为 A-Z 的字符替换掉，其余符号保持不变
    return base if len(base) == 1 and base in ALPHABET else char


def normalize_text(text, strip_accents=False):
    """将原始引文转换为规范明文。

    所有字母先转换为大写。strip_accents 为 False 时，Á、É、Ñ 等字母作为
    不代换字符原样保留；为 True 时，重音元音（包括 Ü）还原为基本字母，
    Ñ 在两种模式下都保留。加密与判定是否解出必须使用同一模式。
    """
    upper_text = unicodedata.normalize("NFC", text).upper()
    if not strip_accents:
        return upper_text
    return "".join(_strip_accent(char) for char in upper_text)


def mode_strips_accents(mode):
    """把模式名称转换为 strip_accents 参数。"""
    if mode not in (ACCENT_MODE_PRESERVE, ACCENT_MODE_STRIP):
        raise ValueError(f"未知的重音处理模式: {mode!r}")
    return mode == ACCENT_MODE_STRIP
