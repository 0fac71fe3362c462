# guess_store.py
# 保存解题者的部分映射 {密文字母: 明文字母}，保证任意时刻映射为单射

from normalizer import ALPHABET


def _as_letter(char):
    """把输入转换为大写字母；不属于字母表时返回 None。"""
    if not isinstance(char, str): return None
    char = char.strip().upper()
    return char if len(char) == 1 and char in ALPHABET else None


class GuessStore:
    """解题者的猜测映射与当前选中的密文字母。

    交互协议为“选中密文字母 -> 指定明文字母 -> 自动取消选中”。
    一个明文字母同一时刻只能被一个密文字母使用：新的指定会先撤销旧的映射。
    """
    def __init__(self):
        self._mapping = {}
        self.selected = None

    @property
    def mapping(self):
        return dict(self._mapping)

    def plain_for(self, cipher_char):
        return self._mapping.get(_as_letter(cipher_char))

    def cipher_for(self, plain_char):
        """返回当前使用该明文字母的密文字母（没有则返回 None）。"""
        plain_char = _as_letter(plain_char)
        return next((c for c, p in self._mapping.items() if p == plain_char), None)

    def select_cipher_letter(self, cipher_char):
        """选中密文字母；再次选中同一字母则取消选中。不改变映射。"""
        cipher_char = _as_letter(cipher_char)
        if cipher_char is None: return self.selected
        self.selected = None if self.selected == cipher_char else cipher_char
        return self.selected

    def assign(self, plain_char):
        """把明文字母指定给当前选中的密文字母。

        未选中任何字母或明文字母无效时不做任何事。若该明文字母已被其他
        密文字母使用，先撤销那条映射。返回被撤销映射的密文字母（没有则为 None）。
        """
        plain_char = _as_letter(plain_char)
        if self.selected is None or plain_char is None: return None
        conflicting_cipher = self.cipher_for(plain_char)
        if conflicting_cipher == self.selected: conflicting_cipher = None
        if conflicting_cipher is not None:
            del self._mapping[conflicting_cipher]
        self._mapping[self.selected] = plain_char
        self.selected = None
        return conflicting_cipher

    def set_guess(self, cipher_char, plain_char):
        """一步完成“选中并指定”，供直接输入映射的界面使用。任一字母无效时不改变任何状态。"""
        if _as_letter(cipher_char) is None or _as_letter(plain_char) is None: return None
        self.selected = _as_letter(cipher_char)
        return self.assign(plain_char)

    def clear(self, cipher_char):
        """取消指定密文字母的映射（幂等），并取消当前选中，与“指定”后的协议一致。"""
        self._mapping.pop(_as_letter(cipher_char), None)
        self.selected = None

    def clear_all(self):
        self._mapping.clear()
        self.selected = None

    def reveal(self, solution_key):
        """用完整的解密映射 {密文: 明文} 替换当前全部猜测（放弃时使用）。"""
        self._mapping = {c.upper(): p.upper() for c, p in solution_key.items()}
        self.selected = None

    def unmapped_cipher_letters(self):
        return [char for char in ALPHABET if char not in self._mapping]

    def unused_plain_letters(self):
        used = set(self._mapping.values())
        return [char for char in ALPHABET if char not in used]
