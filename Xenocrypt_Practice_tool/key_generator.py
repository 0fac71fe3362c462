# key_generator.py
# 生成无不动点的随机代换密钥（错排）

import random
from normalizer import ALPHABET


def has_fixed_points(key):
    """检查密钥中是否存在映射到自身的字母。"""
    return any(plain_char == cipher_char for plain_char, cipher_char in zip(ALPHABET, key.upper()))


def _repair_fixed_points(key_list):
    """把每个不动点与其后一位交换，直到不存在不动点为止。"""
    n = len(key_list)
    while True:
        fixed_idx = next((i for i in range(n) if key_list[i] == ALPHABET[i]), None)
        if fixed_idx is None:
            return key_list
        swap_idx = (fixed_idx + 1) % n
        key_list[fixed_idx], key_list[swap_idx] = key_list[swap_idx], key_list[fixed_idx]


def generate_derangement_key(rng=None):
    """生成一个随机的、无不动点的26字母密钥字符串 (密文序列对应A-Z)。

    先做一次均匀随机洗牌，再逐个修复不动点；修复一定会结束，
    结果总是一个真正的错排，不依赖重试次数上限。
    """
    rng = rng or random
    alphabet_list = list(ALPHABET)
    rng.shuffle(alphabet_list)
    return "".join(_repair_fixed_points(alphabet_list))
