# solution_checker.py
# 判定当前猜测映射是否已经完整还原出原文

from normalizer import ALPHABET
from analysis_helpers import apply_partial_key


def _letters_only(text):
    return "".join(char for char in text if char in ALPHABET)


def is_solved(ciphertext, guess_mapping, true_plaintext):
    """根据猜测映射重建明文并与原文比较。

    只比较字母表内的字符；任何代换位置尚未映射时一定返回 False。
    不含任何代换字母的谜题不视为已解出。
    """
    if any(char in ALPHABET and char not in guess_mapping for char in ciphertext):
        return False
    target = _letters_only(true_plaintext)
    return bool(target) and _letters_only(apply_partial_key(ciphertext, guess_mapping)) == target
