"""Tests for the romanization to Hangul converter (hangul.py)."""

import pytest

from romhan.hangul import (
    HangulConverter,
    compose_syllable,
    decompose_syllable,
    LOOKAHEAD_END,
    LOOKAHEAD_SYLLABLE,
    LOOKAHEAD_CONSONANT,
    LOOKAHEAD_VOWEL,
    LOOKAHEAD_OTHER,
)
from romhan.tables import CHOSEONG, JUNGSEONG, JONGSEONG, SILENT_CHOSEONG


@pytest.fixture(scope="module")
def conv():
    return HangulConverter()


# ── Scenarios ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("ga", "가"),
    ("gags", "갃"),
    ("han gug eo", "한국어"),
    ("a   beu", "아 브"),
    ("test ga na da", "텟t가나다"),
])
def test_scenarios(conv, text, expected):
    assert conv.convert(text) == expected


# ── Initial consonants ────────────────────────────────────────────────────────

@pytest.mark.parametrize("token, index", sorted(CHOSEONG.items()))
def test_every_choseong_spelling(conv, token, index):
    assert conv.convert(token + "a") == compose_syllable(index, 0)


def test_choseong_aliases(conv):
    assert conv.convert("gga") == conv.convert("kka") == "까"
    assert conv.convert("dda") == conv.convert("tta") == "따"
    assert conv.convert("bba") == conv.convert("ppa") == "빠"
    assert conv.convert("ra") == conv.convert("la") == "라"


def test_choseong_examples(conv):
    assert conv.convert("na") == "나"
    assert conv.convert("cha") == "차"
    assert conv.convert("ssa") == "싸"
    assert conv.convert("jja") == "짜"
    assert conv.convert("ha") == "하"


# ── Vowels ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("token, index", sorted(JUNGSEONG.items()))
def test_vowel_alone_gets_silent_initial(conv, token, index):
    assert conv.convert(token) == compose_syllable(SILENT_CHOSEONG, index)


def test_vowel_examples(conv):
    assert conv.convert("a") == "아"
    assert conv.convert("yae") == "얘"
    assert conv.convert("wae") == "왜"
    assert conv.convert("oe") == "외"
    assert conv.convert("ui") == "의"
    assert conv.convert("eu") == "으"


# ── Final consonants ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("token, index", sorted(JONGSEONG.items()))
def test_every_jongseong_at_end_of_segment(conv, token, index):
    assert conv.convert("ga" + token) == compose_syllable(0, 0, index)


def test_double_finals(conv):
    assert conv.convert("ganj") == "갅"
    assert conv.convert("galg") == "갉"
    assert conv.convert("gabs") == "값"
    assert conv.convert("gass") == "갔"
    assert conv.convert("gang") == "강"


# ── Final consonant lookahead ─────────────────────────────────────────────────

def test_classify_lookahead_branches(conv):
    assert conv.classify_lookahead(list("ga"), 2) == LOOKAHEAD_END
    assert conv.classify_lookahead(list("gabi"), 2) == LOOKAHEAD_SYLLABLE
    assert conv.classify_lookahead(list("gab"), 2) == LOOKAHEAD_CONSONANT
    assert conv.classify_lookahead(list("gai"), 2) == LOOKAHEAD_VOWEL
    assert conv.classify_lookahead(list("ga1"), 2) == LOOKAHEAD_OTHER


def test_final_accepted_at_end_of_segment(conv):
    assert conv.convert("gal") == "갈"


def test_final_accepted_before_next_syllable(conv):
    """'n' closes 한 and 'g' opens the next syllable."""
    assert conv.convert("hangug") == "한국"


def test_longer_final_rejected_before_vowel(conv):
    """'lg' would strand the 'i'; the shorter 'l' is used instead."""
    assert conv.convert("galgi") == "갈기"
    assert conv.convert("galbi") == "갈비"


def test_final_rejected_before_vowel(conv):
    """With no shorter candidate left, the consonant opens the next syllable."""
    assert conv.convert("gana") == "가나"
    assert conv.convert("gaga") == "가가"
    assert conv.convert("gugeo") == "구거"


def test_final_accepted_before_lone_consonant(conv):
    assert conv.convert("gamt") == "감t"


def test_final_accepted_before_unmatched_character(conv):
    assert conv.convert("gag1") == "각1"
    assert conv.convert("gal!") == "갈!"


def test_find_jongseong_reports_new_position(conv):
    assert conv.find_jongseong(list("galgi"), 2) == (JONGSEONG["l"], 3)
    assert conv.find_jongseong(list("gai"), 2) == (0, 2)


# ── Spaces ────────────────────────────────────────────────────────────────────

def test_single_space_separates_syllables(conv):
    assert conv.convert("na neun") == "나는"
    assert conv.convert("gug eo") == "국어"
    assert conv.convert("dog ib") == "독입"


def test_double_space_is_literal_space(conv):
    assert conv.convert("an nyeong  ha se yo") == "안녕 하세요"
    assert conv.convert("na neun  hag saeng  ib ni da") == "나는 학생 입니다"


def test_space_runs(conv):
    assert conv.convert("a    beu") == "아  브"


@pytest.mark.parametrize("n", range(9))
def test_space_run_halving(conv, n):
    assert conv.convert("a" + " " * n + "i") == "아" + " " * (n // 2) + "이"


def test_leading_and_trailing_spaces(conv):
    assert conv.convert(" ga") == "가"
    assert conv.convert("ga ") == "가"
    assert conv.convert("  ga") == " 가"
    assert conv.convert("ga   ") == "가 "
    assert conv.convert("    ") == "  "


def test_other_whitespace_passes_through(conv):
    assert conv.convert("ga\tna") == "가\t나"


# ── Pass-through and edge cases ───────────────────────────────────────────────

def test_empty(conv):
    assert conv.convert("") == ""


def test_unmatched_characters(conv):
    assert conv.convert("123") == "123"
    assert conv.convert("!@#") == "!@#"
    assert conv.convert("f") == "f"
    assert conv.convert("x") == "x"
    assert conv.convert("z") == "z"


@pytest.mark.parametrize("text", ["g", "ng", "gg", "kk", "jj", "bb", "pp", "dd", "tt", "ss"])
def test_consonants_without_vowel_pass_through(conv, text):
    assert conv.convert(text) == text


def test_mixed_input(conv):
    assert conv.convert("han gug 123") == "한국123"
    assert conv.convert("1a2b3") == "1아2b3"
    assert conv.convert("안녕 ga") == "안녕가"
    assert conv.convert("♥ga") == "♥가"


def test_case_insensitive(conv):
    assert conv.convert("GA") == "가"
    assert conv.convert("HAN GUG") == "한국"
    assert conv.convert("HaN GuG") == "한국"
    assert conv.convert("ANNYEONG") == "안녕"


def test_repeated_vowels(conv):
    assert conv.convert("aaa") == "아아아"


def test_deterministic(conv):
    text = "an nyeong  ha se yo 123 test"
    assert conv.convert(text) == conv.convert(text)
    assert HangulConverter().convert(text) == conv.convert(text)


def test_long_input(conv):
    output = conv.convert("ga na da la ma ba sa a ja cha ka ta pa ha")
    assert len(output) == 14


# ── Words and phrases ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("text, expected", [
    ("an nyeong", "안녕"),
    ("gam sa hab ni da", "감사합니다"),
    ("sa rang", "사랑"),
    ("chin gu", "친구"),
    ("hag gyo", "학교"),
    ("seon saeng nim", "선생님"),
    ("a bba", "아빠"),
    ("eom ma", "엄마"),
    ("bbang", "빵"),
    ("il i sam sa o", "일이삼사오"),
    ("yug chil pal gu sib", "육칠팔구십"),
    ("wol hwa su mog geum to il", "월화수목금토일"),
    ("an nyeong hi gye se yo", "안녕히계세요"),
])
def test_common_words(conv, text, expected):
    assert conv.convert(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("dalg", "닭"),
    ("heulg", "흙"),
    ("salm", "삶"),
    ("jeolm da", "젊다"),
    ("ilg da", "읽다"),
    ("balb da", "밟다"),
    ("eobs da", "없다"),
    ("sags", "삯"),
    ("neolb da", "넓다"),
])
def test_words_with_double_finals(conv, text, expected):
    assert conv.convert(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("ssya", "쌰"),
    ("bbyeo", "뼈"),
    ("chwa", "촤"),
    ("kwe", "퀘"),
    ("walg", "왉"),
    ("oelm", "욂"),
    ("eo ddeoh ge", "어떻게"),
    ("gwaen chanh a yo", "괜찮아요"),
    ("hyang gi", "향기"),
    ("pyeon ji", "편지"),
    ("goe mul", "괴물"),
    ("chwi eob", "취업"),
    ("gyeol hon", "결혼"),
])
def test_compound_vowels_and_clusters(conv, text, expected):
    assert conv.convert(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("dae han min gug", "대한민국"),
    ("gyeong bog gung", "경복궁"),
    ("in cheon gug je gong hang", "인천국제공항"),
    ("chung cheong nam do", "충청남도"),
    ("bu san gwang yeog si", "부산광역시"),
    ("keom pyu teo", "컴퓨터"),
    ("tel le bi jeon", "텔레비전"),
    ("in teo nes", "인터넷"),
    ("seu ma teu pon", "스마트폰"),
])
def test_long_words(conv, text, expected):
    assert conv.convert(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("meog eoss da", "먹었다"),
    ("mo reu gess eo yo", "모르겠어요"),
    ("al gess seub ni da", "알겠습니다"),
    ("meog eul geos i da", "먹을것이다"),
    ("deu syeoss seub ni da", "드셨습니다"),
    ("hag gyo e seo", "학교에서"),
    ("jib eu ro", "집으로"),
    ("sa ram eun", "사람은"),
])
def test_conjugations_and_particles(conv, text, expected):
    assert conv.convert(text) == expected


def test_sentences(conv):
    assert conv.convert("jeo neun  il bon  sa ram  ib ni da") == "저는 일본 사람 입니다"
    assert conv.convert("o neul  nal ssi ga  joh seub ni da") == "오늘 날씨가 좋습니다"
    assert conv.convert(
        "han gug eo reul  gong bu  ha go  iss seub ni da"
    ) == "한국어를 공부 하고 있습니다"


# ── compose_syllable / decompose_syllable ─────────────────────────────────────

def test_compose_syllable():
    assert compose_syllable(0, 0) == "가"
    assert compose_syllable(18, 0, 4) == "한"
    assert compose_syllable(18, 20, 27) == "힣"


def test_decompose_syllable():
    assert decompose_syllable("한") == (18, 0, 4)
    assert decompose_syllable("힣") == (18, 20, 27)
    assert decompose_syllable("a") is None
    assert decompose_syllable("ㄱ") is None


def test_initial_and_vowel_survive_composition():
    for cho in range(19):
        for jung in range(21):
            assert decompose_syllable(compose_syllable(cho, jung)) == (cho, jung, 0)
