# puzzle_session.py
# 一局异文密码练习的状态：谜题、猜测映射与是否解出，不涉及任何界面

import collections
import random
from normalizer import ACCENT_MODE, is_substitutable, mode_strips_accents, normalize_text
from key_generator import generate_derangement_key
from cipher_logic import encrypt, invert_key
from analysis_helpers import apply_partial_key, generate_frequency_suggestions_data, get_letter_frequencies
from guess_store import GuessStore
from solution_checker import is_solved
from puzzle_source import normalize_puzzle_entry

Puzzle = collections.namedtuple(
    "Puzzle", ["ciphertext", "true_plaintext", "solution_key", "key", "quote", "language", "source"])


class EmptyPuzzleSource(Exception):
    """候选引文列表为空，无法生成谜题。"""


def create_puzzle(entry, strip_accents=False, rng=None, key=None):
    """由一条引文生成谜题：规范化、生成错排密钥、加密。"""
    puzzle_entry = normalize_puzzle_entry(entry)
    if puzzle_entry is None:
        raise ValueError(f"无效的引文条目: {entry!r}")
    key = (key or generate_derangement_key(rng)).upper()
    true_plaintext = normalize_text(puzzle_entry["quote"], strip_accents=strip_accents)
    return Puzzle(ciphertext=encrypt(true_plaintext, key),
                  true_plaintext=true_plaintext,
                  solution_key=invert_key(key),
                  key=key,
                  quote=puzzle_entry["quote"],
                  language=puzzle_entry["language"],
                  source=puzzle_entry["source"])


class XenocryptSession:
    """一个解题者独占的练习会话。

    界面层只调用这里的动作方法，然后用 snapshot() 的结果重新绘制。
    “新谜题”会整体替换谜题与猜测映射。
    """
    def __init__(self, puzzles, accent_mode=ACCENT_MODE, rng=None):
        self.puzzles = list(puzzles)
        self.strip_accents = mode_strips_accents(accent_mode)
        self.rng = rng or random.Random()
        self.puzzle = None
        self.guesses = GuessStore()
        self.frequencies = []
        self.revealed = False
        self.show_hints = False

    def new_puzzle(self):
        """随机选择一条引文生成新谜题；没有可用引文时抛出 EmptyPuzzleSource 且不改动现有状态。"""
        candidates = [p for p in (normalize_puzzle_entry(e) for e in self.puzzles) if p is not None]
        if not candidates:
            raise EmptyPuzzleSource("候选引文列表中没有可用的引文，无法生成谜题。")
        entry = candidates[self.rng.randrange(len(candidates))]
        puzzle = create_puzzle(entry, strip_accents=self.strip_accents, rng=self.rng)
        self.puzzle = puzzle
        self.guesses = GuessStore()
        self.frequencies = get_letter_frequencies(puzzle.ciphertext)
        self.revealed = False
        self.show_hints = False
        return puzzle

    # --- 动作 ---
    def select_cipher_letter(self, cipher_char):
        if self.puzzle is None: return None
        return self.guesses.select_cipher_letter(cipher_char)

    def assign(self, plain_char):
        if self.puzzle is None: return None
        return self.guesses.assign(plain_char)

    def set_guess(self, cipher_char, plain_char):
        if self.puzzle is None: return None
        return self.guesses.set_guess(cipher_char, plain_char)

    def clear(self, cipher_char):
        if self.puzzle is None: return
        self.guesses.clear(cipher_char)

    def clear_all(self):
        if self.puzzle is None: return
        self.guesses.clear_all()

    def reveal_solution(self):
        if self.puzzle is None: return
        self.guesses.reveal(self.puzzle.solution_key)
        self.revealed = True

    def toggle_hints(self):
        self.show_hints = not self.show_hints
        return self.show_hints

    # --- 观察 ---
    @property
    def plaintext_so_far(self):
        if self.puzzle is None: return ""
        return apply_partial_key(self.puzzle.ciphertext, self.guesses.mapping)

    @property
    def solved(self):
        if self.puzzle is None: return False
        return is_solved(self.puzzle.ciphertext, self.guesses.mapping, self.puzzle.true_plaintext)

    def snapshot(self):
        """界面渲染所需的全部只读数据。"""
        if self.puzzle is None:
            return {"cells": [], "plaintext_so_far": "", "frequencies": [], "suggestions": [],
                    "mapping": {}, "selected": None, "solved": False, "revealed": False,
                    "language": "", "source": "", "hint_plaintext": None}
        solved = self.solved
        show_plaintext = self.show_hints or solved or self.revealed
        return {
            "cells": [(char, is_substitutable(char)) for char in self.puzzle.ciphertext],
            "plaintext_so_far": self.plaintext_so_far,
            "frequencies": list(self.frequencies),
            "suggestions": generate_frequency_suggestions_data(self.frequencies),
            "mapping": self.guesses.mapping,
            "selected": self.guesses.selected,
            "solved": solved,
            "revealed": self.revealed,
            "language": self.puzzle.language,
            "source": self.puzzle.source,
            "hint_plaintext": self.puzzle.true_plaintext if show_plaintext else None,
        }
