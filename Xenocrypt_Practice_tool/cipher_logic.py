# cipher_logic.py
# 单表代换密码的加密与解密核心逻辑（仅代换 A-Z，其余字符原样保留）

from normalizer import ALPHABET
from key_generator import has_fixed_points


def validate_key(key, require_derangement=False):
    """验证密钥是否为包含26个不同英文字母的有效字符串，可选要求无不动点。"""
    if not isinstance(key, str) or len(key) != 26 or \
       not all(char in ALPHABET for char in key.upper()) or \
       len(set(key.upper())) != 26:
        return False
    if require_derangement and has_fixed_points(key):
        return False
    return True


def _checked_key(key):
    if not validate_key(key):
        raise ValueError("无效密钥。密钥必须是26个不同英文字母的排列。")
    return key.upper()


def invert_key(key):
    """由加密密钥得到解密映射 {密文字母: 明文字母}。"""
    key = _checked_key(key)
    return {cipher_char: plain_char for plain_char, cipher_char in zip(ALPHABET, key)}


def encrypt(plaintext, key):
    """使用单表代换加密明文，字母表以外的字符（空格、标点、Ñ、重音字母）保持原位。"""
    key_map = dict(zip(ALPHABET, _checked_key(key)))
    return "".join(key_map.get(char, char) for char in plaintext)


def decrypt_with_mapping(ciphertext, cipher_to_plain):
    """使用 {密文: 明文} 映射解密，未出现在映射中的字符原样保留。"""
    return "".join(cipher_to_plain.get(char, char) for char in ciphertext)


def decrypt(ciphertext, key):
    """使用单表代换解密密文。"""
    return decrypt_with_mapping(ciphertext, invert_key(key))
