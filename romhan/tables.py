"""Romanization tables for the three jamo slots of a Hangul syllable."""

from types import MappingProxyType

# Index 11 (ㅇ) is used when a syllable starts with a vowel.
SILENT_CHOSEONG = 11

MAX_TOKEN_LENGTH = 3
MAX_FINAL_LENGTH = 2

CHOSEONG = MappingProxyType({
    'g': 0,                 # ㄱ
    'gg': 1, 'kk': 1,       # ㄲ
    'n': 2,                 # ㄴ
    'd': 3,                 # ㄷ
    'dd': 4, 'tt': 4,       # ㄸ
    'r': 5, 'l': 5,         # ㄹ
    'm': 6,                 # ㅁ
    'b': 7,                 # ㅂ
    'bb': 8, 'pp': 8,       # ㅃ
    's': 9,                 # ㅅ
    'ss': 10,               # ㅆ
    'j': 12,                # ㅈ
    'jj': 13,               # ㅉ
    'ch': 14,               # ㅊ
    'k': 15,                # ㅋ
    't': 16,                # ㅌ
    'p': 17,                # ㅍ
    'h': 18,                # ㅎ
})

JUNGSEONG = MappingProxyType({
    'a': 0,     # ㅏ
    'ae': 1,    # ㅐ
    'ya': 2,    # ㅑ
    'yae': 3,   # ㅒ
    'eo': 4,    # ㅓ
    'e': 5,     # ㅔ
    'yeo': 6,   # ㅕ
    'ye': 7,    # ㅖ
    'o': 8,     # ㅗ
    'wa': 9,    # ㅘ
    'wae': 10,  # ㅙ
    'oe': 11,   # ㅚ
    'yo': 12,   # ㅛ
    'u': 13,    # ㅜ
    'wo': 14,   # ㅝ
    'we': 15,   # ㅞ
    'wi': 16,   # ㅟ
    'yu': 17,   # ㅠ
    'eu': 18,   # ㅡ
    'ui': 19,   # ㅢ
    'i': 20,    # ㅣ
})

# 0 is "no final" and has no spelling.
JONGSEONG = MappingProxyType({
    'g': 1,     # ㄱ
    'gg': 2,    # ㄲ
    'gs': 3,    # ㄳ
    'n': 4,     # ㄴ
    'nj': 5,    # ㄵ
    'nh': 6,    # ㄶ
    'd': 7,     # ㄷ
    'l': 8,     # ㄹ
    'lg': 9,    # ㄺ
    'lm': 10,   # ㄻ
    'lb': 11,   # ㄼ
    'ls': 12,   # ㄽ
    'lt': 13,   # ㄾ
    'lp': 14,   # ㄿ
    'lh': 15,   # ㅀ
    'm': 16,    # ㅁ
    'b': 17,    # ㅂ
    'bs': 18,   # ㅄ
    's': 19,    # ㅅ
    'ss': 20,   # ㅆ
    'ng': 21,   # ㅇ
    'j': 22,    # ㅈ
    'ch': 23,   # ㅊ
    'k': 24,    # ㅋ
    't': 25,    # ㅌ
    'p': 26,    # ㅍ
    'h': 27,    # ㅎ
})

# Latin letters that appear in at least one table.
LETTERS = frozenset(
    c for table in (CHOSEONG, JUNGSEONG, JONGSEONG) for token in table for c in token
)
