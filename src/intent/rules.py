"""Ordered multilingual rewrite rules (English, Japanese, Korean -> canonical English).

The table is applied top to bottom by `src.intent.normalize.normalize_text`; every rule sees the
output of all earlier rules. Order is part of the contract:
    - numeric shorthand before anything that could read `+1`/`-1` as a set target,
    - multi-word idioms before the single keywords they contain,
    - compound, question and politeness forms before the bare verb stems,
    - `$`-anchored suffix stripping after every keyword rule,
    - noun/particle rewriting, then English synonym folding last.

Within a language a compound is always registered before any rule matching one of its
substrings (e.g. `0にリセット` before `リセット`, `リセット` before `セット`).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# English rules use ASCII word semantics: Hangul/Kana are word characters for `re` and would
# otherwise hide the boundary in inputs like "upして" or "increment해줘".
_EN = re.IGNORECASE | re.ASCII

INCREMENT = "increment"
DECREMENT = "decrement"
RESET = "reset"


@dataclass(frozen=True)
class RewriteRule:
    """A single `(pattern, replacement)` pair tagged with the concern it belongs to."""

    group: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _group(group: str, pairs: list[tuple[str, str]], *, flags: int = 0) -> tuple[RewriteRule, ...]:
    return tuple(
        RewriteRule(group=group, pattern=re.compile(pattern, flags), replacement=replacement)
        for pattern, replacement in pairs
    )


def _same(replacement: str, *patterns: str) -> list[tuple[str, str]]:
    return [(pattern, replacement) for pattern in patterns]


NUMERIC_SHORTHAND = _group(
    "numeric_shorthand",
    [
        (r"\+1(?!\d)", INCREMENT),
        (r"-1(?!\d)", DECREMENT),
        (r"\bup by one\b", INCREMENT),
        (r"\bdown by one\b", DECREMENT),
        (r"\bplus 1\b", INCREMENT),
        (r"\bminus 1\b", DECREMENT),
    ],
    flags=_EN,
)

ENGLISH_SET_PHRASES = _group(
    "en_set_phrase",
    [
        (r"\bmake it (\d+)\b", r"set to \1"),
        (r"\bmake the counter (\d+)\b", r"set counter to \1"),
    ],
    flags=_EN,
)

ENGLISH_IDIOMS = _group(
    "en_idiom",
    [
        *_same(INCREMENT, r"\badd one more\b", r"\bcount one more\b"),
        (r"\bcount one less\b", DECREMENT),
        (r"\bone more\b", INCREMENT),
        (r"\bone less\b", DECREMENT),
        *_same(
            INCREMENT,
            r"\bgo up\b",
            r"\bgo higher\b",
            r"\bcount up\b",
            r"\btick up\b",
            r"\bbump it up\b",
            r"\bbump up\b",
            r"\braise it\b",
            r"\braise the counter\b",
            r"\bmake it higher\b",
            r"\badd to counter\b",
            r"\bcounter up\b",
        ),
        *_same(
            DECREMENT,
            r"\bgo down\b",
            r"\bgo lower\b",
            r"\bcount down\b",
            r"\btick down\b",
            r"\blower it\b",
            r"\blower the counter\b",
            r"\breduce it\b",
            r"\bmake it lower\b",
            r"\bsubtract from counter\b",
            r"\bcounter down\b",
            r"\btake one away\b",
        ),
        *_same(
            RESET,
            r"\bback to zero\b",
            r"\bgo to zero\b",
            r"\bstart over\b",
            r"\bset to zero\b",
            r"\bmake it zero\b",
            r"\bzero out\b",
        ),
    ],
    flags=_EN,
)

KOREAN_IDIOMS = _group(
    "ko_idiom",
    [
        ("하나 더", "add one"),
        ("하나 빼", "subtract one"),
    ],
)

JAPANESE_COMPOUNDS = _group(
    "ja_compound",
    [
        ("(?:一つ|ひとつ|1つ|一個|1個|1)増や(?:したい|して|す|し|せ)?", INCREMENT),
        ("(?:一つ|ひとつ|1つ|一個|1個|1)減ら(?:したい|して|す|し|せ)?", DECREMENT),
        ("(?:一つ|ひとつ|1つ)足(?:して|す|し|せ)?", INCREMENT),
        ("(?:一つ|ひとつ|1つ)引(?:いて|く|い|け|き)?", DECREMENT),
        ("(?:一個|1個|1つ)追加", INCREMENT),
        ("(?:もう|あと)(?:一つ|ひとつ|1つ)", INCREMENT),
        # Katakana loanwords.
        ("カウントアップ", INCREMENT),
        ("カウントダウン", DECREMENT),
        ("インクリーズ", INCREMENT),
        ("アド(?:ワン)?", INCREMENT),
        ("プラス(?:1|一)", INCREMENT),
        ("ディクリーズ", DECREMENT),
        ("サブトラクト", DECREMENT),
        ("マイナス(?:1|一)", DECREMENT),
        ("値引き", DECREMENT),
    ],
)

JAPANESE_REQUESTS = _group(
    "ja_request",
    [
        (r"(?:増やして(?:くれる|もらえる)|増やせる|足して(?:くれる|もらえる))\?", INCREMENT),
        (r"(?:減らして(?:くれる|もらえる)|減らせる|引いてくれる|下げてくれる)\?", DECREMENT),
        ("増やしたい(?:んだけど|な)?", INCREMENT),
        ("足したい", INCREMENT),
        ("上げたい(?:んだけど|な)?", INCREMENT),
        ("減らしたい(?:んだけど)?", DECREMENT),
        ("引きたい", DECREMENT),
        ("下げたい(?:んだけど|な)?", DECREMENT),
        # Imperative short forms.
        *_same(INCREMENT, "増やせ", "足せ"),
        *_same(DECREMENT, "減らせ", "引け", "引き"),
    ],
)

JAPANESE_RESET_IDIOMS = _group(
    "ja_reset_idiom",
    [
        # A zero glued to a larger number ("10にリセット") is a set target, not a reset.
        (r"(?<!\d)0にリセット", "reset to 0"),
        (r"(\d+)にリセット", r"set to \1"),
        ("リセット", RESET),
        (r"(?:ゼロ|(?<!\d)0|元|初期値)に戻(?:して|す|し)?", RESET),
        (r"(\d+)に戻(?:して|す|し)?", r"set to \1"),
        ("初期値に", RESET),
        ("ゼロに(?:する|して)", RESET),
    ],
)

JAPANESE_INCREMENT = _group(
    "ja_increment",
    _same(
        INCREMENT,
        "増加",
        "増や(?:して|す|し)?",
        "プラス",
        "足(?:して|す|し)",
        "上げ(?:て|る)?",
        "アップ",
        "インクリメント",
        "加算",
        "加え(?:て|る)?",
        "追加",
    ),
)

JAPANESE_DECREMENT = _group(
    "ja_decrement",
    _same(
        DECREMENT,
        "減少",
        "減ら(?:して|す|し)?",
        "マイナス",
        "引(?:いて|く|い)",
        "下げ(?:て|る)?",
        "ダウン",
        "デクリメント",
        "減算",
    ),
)

# Number-binding forms come first: `5に設定` must not lose its `設定` to the bare keyword rule.
JAPANESE_SET = _group(
    "ja_set",
    [
        (r"(\d+)に設定", r"set to \1"),
        (r"(\d+)にセット", r"set to \1"),
        (r"(\d+)に変更", r"change to \1"),
        (r"(\d+)に変え(?:て|たい)?", r"change to \1"),
        (r"(\d+)にし(?:て)?", r"set to \1"),
        ("設定", "set"),
        ("セット", "set"),
        ("変更", "change"),
        ("変え(?:て)?", "change"),
    ],
)

JAPANESE_RESET = _group(
    "ja_reset",
    [
        *_same(
            RESET,
            "初期化",
            "クリア",
            "初期値",
            "(?:初め|最初)から",
            "最初に戻",
            "やり直",
            "取り消",
            "なかったことに",
            "白紙に戻",
            "全部消",
            "消(?:して|し)",
        ),
        ("ゼロ", "zero"),
        # "カウンターを50に" with nothing after the particle.
        (r"を(\d+)に$", r" set to \1"),
    ],
)

KOREAN_INCREMENT = _group(
    "ko_increment",
    _same(INCREMENT, "증가", "올려", "더해", "플러스", "추가", "높여", "키워", "늘려", "인크리먼트", "업"),
)

KOREAN_DECREMENT = _group(
    "ko_decrement",
    _same(DECREMENT, "감소", "내려", "빼", "마이너스", "줄여", "낮춰", "작게", "디크리먼트", "다운"),
)

KOREAN_SET = _group(
    "ko_set",
    [
        ("설정", "set"),
        ("세팅", "set"),
        ("변경", "change"),
        ("바꿔", "change"),
        (r"(\d+)으로", r"to \1"),
        (r"(\d+)로", r"to \1"),
    ],
)

KOREAN_RESET = _group(
    "ko_reset",
    [
        *_same(RESET, "초기화", "리셋", "처음으로", "원래대로", "기본값"),
        ("클리어", "clear"),
        ("제로", "zero"),
    ],
)

# Longest endings first; each rule only strips at end of string.
JAPANESE_SUFFIXES = _group(
    "ja_suffix",
    _same(
        "",
        "をお願いします$",
        "ようお願いします$",
        "お願いします$",
        "してください$",
        r"してくれる\?$",
        r"してくれない\?$",
        r"してもらえる\?$",
        r"くれない\?$",
        r"できる\?$",
        "してもらいたい$",
        "てもらいたい$",
        "してくれ$",
        "してほしいな$",
        "してほしい$",
        "てほしいな$",
        "てほしい$",
        "したいんだけど$",
        "したいな$",
        "したい$",
        "たい$",
        "しといて$",
        "といて$",
        "しなさい$",
        "なさい$",
        "するんだ$",
        "んだ$",
        r"せる\?$",
        "して$",
        "ください$",
        "くれ$",
        "しろ$",
        "せよ$",
        "よ$",
        "な$",
        "ろ$",
        "する$",
        "て$",
    ),
)

KOREAN_SUFFIXES = _group(
    "ko_suffix",
    _same("", "해줘$", "시켜줘$", "시켜$", "해$", "줘$"),
)

# Trailing space keeps the noun separated from a keyword glued after it.
CONTEXT_NOUNS = _group(
    "context_noun",
    [
        ("カウンター?を?", "counter "),
        ("数字を?", "number "),
        ("数を?", "value "),
        ("値を?", "value "),
        ("카운터를?", "counter "),
        ("숫자를?", "number "),
        ("값을?", "value "),
        ("하나", "one"),
    ],
)

ENGLISH_SYNONYMS = _group(
    "en_synonym",
    [
        *_same(INCREMENT, r"\bincrease\b", r"\badd\b", r"\bplus\b", r"\braise\b"),
        *_same(DECREMENT, r"\bdecrease\b", r"\bsubtract\b", r"\bminus\b", r"\breduce\b"),
        *_same(RESET, r"\bclear\b", r"\bdefault\b"),
        (r"\bdown\b", DECREMENT),
        (r"\bup\b", INCREMENT),
    ],
    flags=_EN,
)

RULE_GROUPS: tuple[tuple[RewriteRule, ...], ...] = (
    NUMERIC_SHORTHAND,
    ENGLISH_SET_PHRASES,
    ENGLISH_IDIOMS,
    KOREAN_IDIOMS,
    JAPANESE_COMPOUNDS,
    JAPANESE_REQUESTS,
    JAPANESE_RESET_IDIOMS,
    JAPANESE_INCREMENT,
    JAPANESE_DECREMENT,
    JAPANESE_SET,
    JAPANESE_RESET,
    KOREAN_INCREMENT,
    KOREAN_DECREMENT,
    KOREAN_SET,
    KOREAN_RESET,
    JAPANESE_SUFFIXES,
    KOREAN_SUFFIXES,
    CONTEXT_NOUNS,
    ENGLISH_SYNONYMS,
)

REWRITE_RULES: tuple[RewriteRule, ...] = tuple(rule for group in RULE_GROUPS for rule in group)
