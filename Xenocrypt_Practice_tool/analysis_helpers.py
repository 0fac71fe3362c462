# analysis_helpers.py
# 手动破译模式下的辅助函数：字母频率统计、部分解密与频率建议

import collections
from decimal import Decimal, ROUND_HALF_UP
from normalizer import ALPHABET
from spanish_stats import SORTED_SPANISH_FREQUENCIES

PLACEHOLDER = "_"  # 未映射位置的占位符，不属于字母表

LetterFrequency = collections.namedtuple("LetterFrequency", ["letter", "count", "percentage"])
_CASED_LETTERS = frozenset(ALPHABET + ALPHABET.lower())


def get_letter_counts(text):
    """统计文本中每个代换字母的出现次数，未出现的字母计为0。"""
    counts = collections.Counter(char.upper() for char in text if char in _CASED_LETTERS)
    return {char: counts.get(char, 0) for char in ALPHABET}


def _percentage(count, total):
    """百分比保留一位小数，五入向上（6.25 -> 6.3）。"""
    return float((Decimal(count * 100) / Decimal(total)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def get_letter_frequencies(text, include_zero=False):
    """计算字母出现次数与百分比（保留一位小数）。

    按出现次数降序排列，次数相同时按字母顺序，保证结果可复现。
    """
    counts = get_letter_counts(text)
    total = sum(counts.values())
    rows = []
    for char in ALPHABET:
        count = counts[char]
        if count == 0 and not include_zero: continue
        percentage = _percentage(count, total) if total else 0.0
        rows.append(LetterFrequency(char, count, percentage))
    return sorted(rows, key=lambda row: (-row.count, ALPHABET.index(row.letter)))


def apply_partial_key(ciphertext, partial_key_map, placeholder=PLACEHOLDER):
    """应用部分密钥进行解密，未知字母用占位符表示。"""
    decrypted_text = ""
    for char in ciphertext:
        if char in ALPHABET:
            decrypted_text += partial_key_map.get(char, placeholder)
        else: decrypted_text += char
    return decrypted_text


def generate_frequency_suggestions_data(cipher_frequencies):
    """根据频率生成初步的替换建议：第i常见的密文字母对应第i常见的西班牙语字母。"""
    suggestions_data = []
    for i, row in enumerate(cipher_frequencies):
        if row.count == 0 or i >= len(SORTED_SPANISH_FREQUENCIES): break
        plain_char, plain_freq = SORTED_SPANISH_FREQUENCIES[i]
        suggestions_data.append({'cipher': row.letter, 'plain': plain_char,
                                 'cipher_freq': row.percentage, 'plain_freq': plain_freq})
    return suggestions_data
