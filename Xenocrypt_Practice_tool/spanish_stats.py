# spanish_stats.py
# 存储西班牙语的统计特性数据

from normalizer import ALPHABET

LETTER_FREQUENCIES = { # 标准西班牙语字母频率 (%)，重音字母计入其基本字母
    'E': 13.68, 'A': 12.53, 'O': 8.68, 'S': 7.98, 'R': 6.87, 'N': 6.71,
    'I': 6.25, 'D': 5.86, 'L': 4.97, 'C': 4.68, 'T': 4.63, 'U': 3.93,
    'M': 3.15, 'P': 2.51, 'B': 1.42, 'G': 1.01, 'V': 0.90, 'Y': 0.90,
    'Q': 0.88, 'H': 0.70, 'F': 0.69, 'Z': 0.52, 'J': 0.44, 'Ñ': 0.31,
    'X': 0.22, 'K': 0.02, 'W': 0.01
}
# 只保留参与代换的字母，Ñ 不进入建议列表
SORTED_SPANISH_FREQUENCIES = sorted(
    ((char, freq) for char, freq in LETTER_FREQUENCIES.items() if char in ALPHABET),
    key=lambda item: item[1], reverse=True)
