# main_gui.py
# 异文密码（西班牙语）练习工具的主程序，包含图形用户界面
# 界面只负责显示 XenocryptSession.snapshot() 并把用户操作转交给会话

import tkinter as tk
from tkinter import ttk, scrolledtext, messagebox

from normalizer import ALPHABET, is_substitutable
from puzzle_source import load_puzzles, SPANISH_QUOTES_FILE_PATH
from puzzle_session import XenocryptSession, EmptyPuzzleSource

LINE_WIDTH = 30  # 谜题区每行最多显示的字符数


def wrap_cells(cells, max_width=LINE_WIDTH):
    """按单词把谜题字符折成多行，返回每行的字符位置列表；换行处的空格省略，超长单词强制拆开。"""
    words, word = [], []
    for position, (char, _) in enumerate(cells):
        if char == " ":
            if word: words.append(word); word = []
        else: word.append(position)
    if word: words.append(word)
    lines, current_line = [], []
    for word in words:
        while len(word) > max_width:
            if current_line: lines.append(current_line); current_line = []
            lines.append(word[:max_width]); word = word[max_width:]
        if current_line and len(current_line) + 1 + len(word) > max_width:
            lines.append(current_line); current_line = []
        if current_line: current_line.append(word[0] - 1)  # 单词前的空格
        current_line.extend(word)
    if current_line: lines.append(current_line)
    return lines


def format_frequency_report(snapshot):
    """生成频率统计与建议的显示文本。"""
    if not snapshot["frequencies"]: return "暂无谜题。"
    report = "--- 密文字母频率 ---\n"
    for row in snapshot["frequencies"]:
        report += f"{row.letter}: {row.count:>3}  ({row.percentage:.1f}%)\n"
    report += "\n--- 基于西班牙语频率的初步建议 (密文->明文) ---\n"
    for i, sug in enumerate(snapshot["suggestions"]):
        report += f"  密'{sug['cipher']}' ({sug['cipher_freq']:.1f}%) -> 明'{sug['plain']}' (西 {sug['plain_freq']:.1f}%)\n"
        if i >= 9: break
    return report


class XenocryptApp:
    """主应用程序类。"""
    def __init__(self, root_tk, session):
        self.root = root_tk
        self.root.title("异文密码练习 (西班牙语)")
        self.root.geometry("950x800")
        self.session = session

        top_frame = ttk.Frame(self.root, padding=10); top_frame.pack(fill="x")
        ttk.Button(top_frame, text="新谜题", command=self.generate_new_puzzle).pack(side="left", padx=5)
        ttk.Button(top_frame, text="清除全部映射", command=self.clear_mappings).pack(side="left", padx=5)
        ttk.Button(top_frame, text="放弃 (显示答案)", command=self.give_up).pack(side="left", padx=5)
        self.hints_button = ttk.Button(top_frame, text="显示提示", command=self.toggle_hints); self.hints_button.pack(side="left", padx=5)
        self.language_label = ttk.Label(top_frame, text=""); self.language_label.pack(side="right", padx=5)

        self.message_var = tk.StringVar(value="")
        self.message_label = ttk.Label(self.root, textvariable=self.message_var, padding=(10, 0)); self.message_label.pack(fill="x")

        self.puzzle_frame = ttk.LabelFrame(self.root, text="密文 (点击密文字母后选择明文字母)", padding=10)
        self.puzzle_frame.pack(padx=10, pady=10, fill="x")

        palette_frame = ttk.LabelFrame(self.root, text="明文字母", padding=10); palette_frame.pack(padx=10, pady=5, fill="x")
        for i, char in enumerate(ALPHABET):
            ttk.Button(palette_frame, text=char, width=3, command=lambda c=char: self.assign_plain_letter(c)).grid(row=i // 13, column=i % 13, padx=1, pady=1)
        ttk.Button(palette_frame, text="取消映射", command=self.clear_selected).grid(row=0, column=13, rowspan=2, padx=(10, 0), sticky="ns")

        self.mapping_frame = ttk.LabelFrame(self.root, text="密钥表 (右键单击密文字母取消映射)", padding=10)
        self.mapping_frame.pack(padx=10, pady=5, fill="x")

        bottom_panel = ttk.PanedWindow(self.root, orient=tk.HORIZONTAL); bottom_panel.pack(padx=10, pady=10, fill="both", expand=True)
        freq_frame = ttk.LabelFrame(bottom_panel, text="统计与建议", padding=10); bottom_panel.add(freq_frame, weight=1)
        self.freq_display = scrolledtext.ScrolledText(freq_frame, height=10, width=45, relief=tk.SOLID, borderwidth=1, state="disabled"); self.freq_display.pack(fill="both", expand=True)
        hint_frame = ttk.LabelFrame(bottom_panel, text="原文 (提示或解出后显示)", padding=10); bottom_panel.add(hint_frame, weight=1)
        self.hint_display = scrolledtext.ScrolledText(hint_frame, height=10, width=45, wrap=tk.WORD, relief=tk.SOLID, borderwidth=1, state="disabled"); self.hint_display.pack(fill="both", expand=True)

        self.root.bind("<Key>", self.on_key_press)

    # --- 用户操作 ---
    def generate_new_puzzle(self):
        try:
            self.session.new_puzzle()
        except EmptyPuzzleSource as e:
            messagebox.showerror("谜题错误", str(e)); return
        self.show_message("新谜题已生成！点击密文字母，再选择对应的明文字母。", "green")
        self.render()

    def select_cipher_letter(self, cipher_char):
        self.session.select_cipher_letter(cipher_char); self.render()

    def assign_plain_letter(self, plain_char):
        if self.session.guesses.selected is None:
            self.show_message("请先点击一个密文字母。", "#007bff"); return
        released = self.session.assign(plain_char)
        if released: self.show_message(f"冲突已处理：{released} 不再映射到 {plain_char}。", "orange")
        else: self.show_message("", "black")
        self.render()

    def clear_selected(self):
        selected = self.session.guesses.selected
        if selected is None: return
        self.session.clear(selected); self.render()

    def clear_letter(self, cipher_char):
        self.session.clear(cipher_char); self.render()

    def clear_mappings(self):
        self.session.clear_all()
        self.show_message("所有映射已清除，重新开始吧！", "#007bff"); self.render()

    def give_up(self):
        if self.session.puzzle is None: return
        self.session.reveal_solution()
        self.show_message("答案已显示！点击“新谜题”再试一次。", "#dc3545"); self.render()

    def toggle_hints(self):
        self.session.toggle_hints()
        self.render()

    def on_key_press(self, event):
        """键盘输入：选中密文字母后直接键入明文字母，退格或删除键取消映射。"""
        if event.keysym in ("BackSpace", "Delete"): self.clear_selected(); return
        if event.keysym == "Escape" and self.session.guesses.selected:
            self.select_cipher_letter(self.session.guesses.selected); return
        if event.char and is_substitutable(event.char.upper()) and self.session.guesses.selected:
            self.assign_plain_letter(event.char.upper())

    def show_message(self, text, color):
        self.message_var.set(text); self.message_label.configure(foreground=color)

    # --- 渲染 ---
    def render(self):
        snapshot = self.session.snapshot()
        self.render_puzzle_grid(snapshot)
        self.render_mapping_table(snapshot)
        self._set_text(self.freq_display, format_frequency_report(snapshot))
        self._set_text(self.hint_display, snapshot["hint_plaintext"] or "")
        lang_text = f"语言提示: {snapshot['language']} (非英文字母不加密)" if snapshot["language"] else ""
        if snapshot["source"] and snapshot["hint_plaintext"]: lang_text += f"  出处: {snapshot['source']}"
        self.language_label.configure(text=lang_text)
        self.hints_button.configure(text="隐藏提示" if self.session.show_hints else "显示提示")
        if snapshot["solved"] and not snapshot["revealed"]:
            self.show_message("恭喜！谜题已解出！", "green")

    def render_puzzle_grid(self, snapshot):
        for widget in self.puzzle_frame.winfo_children(): widget.destroy()
        cells, plain_so_far = snapshot["cells"], snapshot["plaintext_so_far"]
        for row_idx, line in enumerate(wrap_cells(cells)):
            line_frame = ttk.Frame(self.puzzle_frame); line_frame.grid(row=row_idx, column=0, sticky="w", pady=2)
            for col_idx, position in enumerate(line):
                char, substitutable = cells[position]
                guess = plain_so_far[position]
                if substitutable:
                    relief = tk.SUNKEN if snapshot["selected"] == char else tk.RAISED
                    tk.Button(line_frame, text=char, width=2, relief=relief, font=('Consolas', 11, 'bold'),
                              command=lambda c=char: self.select_cipher_letter(c)).grid(row=0, column=col_idx)
                    tk.Label(line_frame, text=guess, width=2, font=('Consolas', 11)).grid(row=1, column=col_idx)
                else:
                    tk.Label(line_frame, text=char, width=2, font=('Consolas', 11)).grid(row=0, column=col_idx, rowspan=2)

    def render_mapping_table(self, snapshot):
        for widget in self.mapping_frame.winfo_children(): widget.destroy()
        counts = {row.letter: row.count for row in snapshot["frequencies"]}
        for row_idx, label in enumerate(("次数:", "密文:", "明文:")):
            ttk.Label(self.mapping_frame, text=label).grid(row=row_idx, column=0, sticky="e", padx=(0, 5))
        for col_idx, cipher_char in enumerate(ALPHABET, start=1):
            ttk.Label(self.mapping_frame, text=str(counts.get(cipher_char, 0)), width=3, anchor="center").grid(row=0, column=col_idx)
            cipher_label = ttk.Label(self.mapping_frame, text=cipher_char, width=3, anchor="center", font=('Consolas', 10, 'bold'))
            cipher_label.grid(row=1, column=col_idx)
            cipher_label.bind("<Button-1>", lambda e, c=cipher_char: self.select_cipher_letter(c))
            cipher_label.bind("<Button-3>", lambda e, c=cipher_char: self.clear_letter(c))
            ttk.Label(self.mapping_frame, text=snapshot["mapping"].get(cipher_char, "_"), width=3, anchor="center").grid(row=2, column=col_idx)

    def _set_text(self, widget, text):
        widget.configure(state="normal"); widget.delete("1.0", tk.END); widget.insert("1.0", text); widget.configure(state="disabled")


def main():
    app_root = tk.Tk()
    style = ttk.Style(app_root); available_themes = style.theme_names()
    if 'vista' in available_themes: style.theme_use('vista')
    elif 'clam' in available_themes: style.theme_use('clam')
    elif 'aqua' in available_themes: style.theme_use('aqua')
    elif 'default' in available_themes: style.theme_use('default')
    session = XenocryptSession(load_puzzles(SPANISH_QUOTES_FILE_PATH))
    app = XenocryptApp(app_root, session)
    app.generate_new_puzzle()
    app_root.mainloop()


if __name__ == '__main__':
    main()
