from romhan.tables import (
    CHOSEONG, JUNGSEONG, JONGSEONG, SILENT_CHOSEONG,
    MAX_TOKEN_LENGTH, MAX_FINAL_LENGTH, LETTERS,
)

SYLLABLE_BASE = 0xAC00
SYLLABLE_LAST = 0xD7A3
JUNG_COUNT = 21
JONG_COUNT = 28

# What follows a final-consonant candidate.
LOOKAHEAD_END, \
LOOKAHEAD_SYLLABLE, \
LOOKAHEAD_CONSONANT, \
LOOKAHEAD_VOWEL, \
LOOKAHEAD_OTHER = range(5)

# Whether the candidate is kept as the final for each lookahead class.
# A following vowel would be left without an initial, so the candidate is
# dropped and a shorter one is tried.
FINAL_DECISIONS = {
    LOOKAHEAD_END: True,
    LOOKAHEAD_SYLLABLE: True,
    LOOKAHEAD_CONSONANT: True,
    LOOKAHEAD_VOWEL: False,
    LOOKAHEAD_OTHER: True,
}


def compose_syllable(cho, jung, jong=0):
    return chr(SYLLABLE_BASE + (cho * JUNG_COUNT + jung) * JONG_COUNT + jong)


def decompose_syllable(ch):
    code = ord(ch) - SYLLABLE_BASE
    if code < 0 or code > SYLLABLE_LAST - SYLLABLE_BASE:
        return None
    cho, rest = divmod(code, JUNG_COUNT * JONG_COUNT)
    jung, jong = divmod(rest, JONG_COUNT)
    return cho, jung, jong


class HangulConverter:
    """Converts romanized Korean into Hangul syllables.

    A single space separates syllable groups without producing output;
    every second space in a run produces one literal space.
    """

    letters = LETTERS

    def __init__(self):
        self.choseong = CHOSEONG
        self.jungseong = JUNGSEONG
        self.jongseong = JONGSEONG

    def convert(self, text):
        result = []
        segment = []
        chars = text.lower()
        pos = 0

        while pos < len(chars):
            if chars[pos] != ' ':
                segment.append(chars[pos])
                pos += 1
                continue

            spaces = 0
            while pos < len(chars) and chars[pos] == ' ':
                spaces += 1
                pos += 1

            if segment:
                result.append(self.convert_segment(segment))
                segment = []
            result.append(' ' * (spaces // 2))

        if segment:
            result.append(self.convert_segment(segment))

        return "".join(result)

    def convert_segment(self, chars):
        result = []
        pos = 0

        while pos < len(chars):
            cho = self.find_choseong(chars, pos)
            if cho:
                cho_idx, cho_len = cho
                jung = self.find_jungseong(chars, pos + cho_len)
                if not jung:
                    # Consonants without a vowel cannot start a syllable.
                    result.extend(chars[pos:pos + cho_len])
                    pos += cho_len
                    continue
                pos += cho_len
            else:
                jung = self.find_jungseong(chars, pos)
                if not jung:
                    result.append(chars[pos])
                    pos += 1
                    continue
                cho_idx = SILENT_CHOSEONG

            jung_idx, jung_len = jung
            pos += jung_len

            jong_idx, pos = self.find_jongseong(chars, pos)
            result.append(compose_syllable(cho_idx, jung_idx, jong_idx))

        return "".join(result)

    def find_choseong(self, chars, pos):
        return self.find_longest_match(chars, pos, self.choseong, MAX_TOKEN_LENGTH)

    def find_jungseong(self, chars, pos):
        return self.find_longest_match(chars, pos, self.jungseong, MAX_TOKEN_LENGTH)

    def find_jongseong(self, chars, pos):
        """Pick the final consonant at ``pos``; return ``(index, new_pos)``.

        Candidates are tried longest first and each is checked against what
        comes after it (see ``FINAL_DECISIONS``). Index 0 means no final.
        """
        for length in range(MAX_FINAL_LENGTH, 0, -1):
            end = pos + length
            if end > len(chars):
                continue
            jong_idx = self.jongseong.get("".join(chars[pos:end]))
            if jong_idx is None:
                continue
            if FINAL_DECISIONS[self.classify_lookahead(chars, end)]:
                return jong_idx, end
        return 0, pos

    def classify_lookahead(self, chars, pos):
        if pos >= len(chars):
            return LOOKAHEAD_END

        cho = self.find_choseong(chars, pos)
        if cho:
            if self.find_jungseong(chars, pos + cho[1]):
                return LOOKAHEAD_SYLLABLE
            return LOOKAHEAD_CONSONANT

        if self.find_jungseong(chars, pos):
            return LOOKAHEAD_VOWEL
        return LOOKAHEAD_OTHER

    def find_longest_match(self, chars, pos, table, max_length):
        for length in range(max_length, 0, -1):
            if pos + length > len(chars):
                continue
            idx = table.get("".join(chars[pos:pos + length]))
            if idx is not None:
                return idx, length
        return None
