"""Unicode to ASCII transliteration table.

The table is built once at import and never mutated. Characters that
have no entry are dropped by the normalizer.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

# Letters and symbols that have no ASCII canonical decomposition.
_SPECIAL_FOLDS = {
    "\u00a0": " ",
    "¡": "!",
    "«": "<<",
    "\u00ad": "",
    "°": "o",
    "´": "'",
    "·": ".",
    "»": ">>",
    "¿": "?",
    "Æ": "AE",
    "Ð": "D",
    "×": "x",
    "Ø": "O",
    "Þ": "TH",
    "ß": "ss",
    "æ": "ae",
    "ð": "d",
    "÷": "/",
    "ø": "o",
    "þ": "th",
    "Đ": "D",
    "đ": "d",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
    "ĸ": "k",
    "Ŀ": "L",
    "ŀ": "l",
    "Ł": "L",
    "ł": "l",
    "ŉ": "'n",
    "Ŋ": "N",
    "ŋ": "n",
    "Œ": "OE",
    "œ": "oe",
    "Ŧ": "T",
    "ŧ": "t",
    "ſ": "s",
    "ƀ": "b",
    "Ɓ": "B",
    "Ƈ": "C",
    "ƈ": "c",
    "Ɖ": "D",
    "Ɗ": "D",
    "Ƒ": "F",
    "ƒ": "f",
    "Ɠ": "G",
    "Ɨ": "I",
    "Ƙ": "K",
    "ƙ": "k",
    "ƚ": "l",
    "Ɲ": "N",
    "ƞ": "n",
    "Ƥ": "P",
    "ƥ": "p",
    "ƫ": "t",
    "Ƭ": "T",
    "ƭ": "t",
    "Ʈ": "T",
    "Ƴ": "Y",
    "ƴ": "y",
    "Ƶ": "Z",
    "ƶ": "z",
    "Ș": "S",
    "ș": "s",
    "Ț": "T",
    "ț": "t",
    "ȷ": "j",
    "ɑ": "a",
    "ɡ": "g",
    "ʻ": "'",
    "ʼ": "'",
    "ˆ": "^",
    "˜": "~",
    "‐": "-",
    "‑": "-",
    "‒": "-",
    "–": "-",
    "—": "-",
    "―": "-",
    "‘": "'",
    "’": "'",
    "‚": "'",
    "‛": "'",
    "“": '"',
    "”": '"',
    "„": '"',
    "‟": '"',
    "•": "*",
    "…": "...",
    "′": "'",
    "″": '"',
    "‹": "<",
    "›": ">",
    "€": "EUR",
    "№": "No",
}

_CYRILLIC = {
    "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D",
    "Е": "E", "Ё": "Yo", "Ж": "Zh", "З": "Z", "И": "I",
    "Й": "Y", "К": "K", "Л": "L", "М": "M", "Н": "N",
    "О": "O", "П": "P", "Р": "R", "С": "S", "Т": "T",
    "У": "U", "Ф": "F", "Х": "Kh", "Ц": "Ts", "Ч": "Ch",
    "Ш": "Sh", "Щ": "Shch", "Ъ": "", "Ы": "Y", "Ь": "",
    "Э": "E", "Ю": "Yu", "Я": "Ya",
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d",
    "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i",
    "й": "y", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "kh", "ц": "ts", "ч": "ch",
    "ш": "sh", "щ": "shch", "ъ": "", "ы": "y", "ь": "",
    "э": "e", "ю": "yu", "я": "ya",
    # Ukrainian and Belarusian
    "Є": "Ye", "І": "I", "Ї": "Yi", "Ґ": "G", "Ў": "U",
    "є": "ye", "і": "i", "ї": "yi", "ґ": "g", "ў": "u",
    # Serbian and Macedonian
    "Ђ": "Dj", "Ѓ": "Gj", "Ѕ": "Dz", "Ј": "J", "Љ": "Lj",
    "Њ": "Nj", "Ћ": "C", "Ќ": "Kj", "Џ": "Dzh",
    "ђ": "dj", "ѓ": "gj", "ѕ": "dz", "ј": "j", "љ": "lj",
    "њ": "nj", "ћ": "c", "ќ": "kj", "џ": "dzh",
}

_GREEK = {
    "Α": "A", "Β": "V", "Γ": "G", "Δ": "D", "Ε": "E",
    "Ζ": "Z", "Η": "I", "Θ": "Th", "Ι": "I", "Κ": "K",
    "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X", "Ο": "O",
    "Π": "P", "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y",
    "Φ": "F", "Χ": "Ch", "Ψ": "Ps", "Ω": "O",
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e",
    "ζ": "z", "η": "i", "θ": "th", "ι": "i", "κ": "k",
    "λ": "l", "μ": "m", "ν": "n", "ξ": "x", "ο": "o",
    "π": "p", "ρ": "r", "ς": "s", "σ": "s", "τ": "t",
    "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps", "ω": "o",
}

# Blocks whose letters fold through canonical decomposition:
# Latin-1 Supplement, Latin Extended-A/B, Latin Extended Additional,
# Greek with tonos, and accented Cyrillic.
_DECOMPOSABLE_RANGES = (
    (0x00C0, 0x024F),
    (0x1E00, 0x1EFF),
    (0x0386, 0x03CE),
    (0x0400, 0x04FF),
)


def _build_table() -> Mapping[str, str]:
    table: dict[str, str] = {chr(code): chr(code) for code in range(0x20, 0x7F)}
    table.update(_CYRILLIC)
    table.update(_GREEK)
    for start, end in _DECOMPOSABLE_RANGES:
        for code in range(start, end + 1):
            char = chr(code)
            if char in table:
                continue
            folded = _fold_decomposition(char, table)
            if folded:
                table[char] = folded
    table.update(_SPECIAL_FOLDS)
    return MappingProxyType(table)


def _fold_decomposition(char: str, table: Mapping[str, str]) -> str:
    """Fold a character through its NFKD base characters."""
    decomposed = unicodedata.normalize("NFKD", char)
    if decomposed == char:
        return ""
    return "".join(table.get(part, "") for part in decomposed)


TRANSLITERATIONS: Mapping[str, str] = _build_table()


def asciify(text: str) -> str:
    """Replace each character by its table entry, dropping unmapped ones."""
    return "".join(TRANSLITERATIONS.get(char, "") for char in text)
