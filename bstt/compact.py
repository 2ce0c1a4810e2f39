"""
Text compaction for the status-bar line.

Titles and locations from the timetable are long ("Introductory Mathematics
for Physics Lecture") and the status bar is narrow. Compaction is a fixed,
ordered series of literal rewrites driven entirely by CompactionRules:

Title pipeline:
    1. compound phrases   ("Practical Physics-Computing Lecture" -> "Labs-Comp Lec")
    2. atomic words       ("Mathematics" -> "M")
    3. connective symbols (" and " -> " + ", " for " -> " ")
    4. one trailing roman numeral (" III", ...), longest first
    5. drop group tokens  ("Grp3")

Location pipeline:
    a single table of replacements ("Fry Building" -> "Fry", " Room" -> "")

Replacements are case-sensitive substring substitutions, applied in table
order. Order matters: compound phrases must be listed before the generic
words they contain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

Rule = tuple[str, str]


@dataclass(frozen=True)
class CompactionRules:
    compound: tuple[Rule, ...]
    atomic: tuple[Rule, ...]
    symbols: tuple[Rule, ...]
    numerals: tuple[str, ...]
    location: tuple[Rule, ...]
    group_prefix: str = "grp"


DEFAULT_RULES = CompactionRules(
    compound=(
        ("Software Engineering", "SE"),
        ("Data Structures", "DS"),
        ("Intro to AI", "AI"),
        ("Practical Physics-Computing Lecture", "Labs-Comp Lec"),
        ("Practical Physics-Computing Drop-in", "Labs-Comp DI"),
        ("Probability & Statistics for Physicists", "Prob+Stats P"),
        ("Introductory Mathematics for Physics", "Intro M for P"),
        ("Intro to Coding and Data Analysis", "Coding+D.A."),
        ("Core Physics I Problem Class", "Core P PrbCls"),
        ("Intro Mathematics Examples Class", "Intro M ExCls"),
        ("Practical Physics", "Labs"),
        ("Problem Class", "PrbCls"),
    ),
    atomic=(
        ("Introductory", "Intro"),
        ("Introduction", "Intro"),
        ("Mathematics", "M"),
        ("Physics", "P"),
        ("Probability", "Prob"),
        ("Statistics", "Stats"),
        ("Computing", "Comp"),
        ("Lecture", "Lec"),
        ("Tutorial", "Tut"),
        ("Workshop", "W"),
        ("Project", "Proj"),
        ("Assembly", "Asmbly"),
    ),
    symbols=(
        (" and ", " + "),
        (" & ", " + "),
        (" for ", " "),
        (" of ", " "),
        (" to ", " "),
    ),
    # " IV" before " I" so "IV" is never half-stripped
    numerals=(" V", " IV", " III", " II", " I"),
    location=(
        ("Physics Building", "Phys"),
        ("Priory Road Complex", "PrioryRd"),
        ("Biomedical Sciences Building", "BioSci"),
        ("31-37 St. Michael's Hill", "StMichHill"),
        ("Queen's Building", "Queens"),
        ("Chemistry Building", "Chem"),
        ("Fry Building", "Fry"),
        ("Lecture Theatre", "LT"),
        ("Building", "Bldg"),
        ("Complex", "Cmplx"),
        (" Room", ""),
        ("Rear:", ""),
        (": ", ":"),
    ),
)


def apply_rules(text: str, rules: Sequence[Rule]) -> str:
    """
    Apply each (find, replace) pair once, in order.
    """
    for find, replace in rules:
        text = text.replace(find, replace)
    return text


def strip_numeral(text: str, numerals: Sequence[str]) -> str:
    """
    Remove at most one trailing roman numeral (first match in `numerals` wins).
    """
    for num in numerals:
        if text.endswith(num):
            return text[: -len(num)]
    return text


def drop_group_tokens(text: str, prefix: str) -> str:
    prefix = prefix.lower()
    return " ".join(word for word in text.split() if not word.lower().startswith(prefix))


def compact_title(title: str, rules: CompactionRules = DEFAULT_RULES) -> str:
    text = apply_rules(title, rules.compound)
    text = apply_rules(text, rules.atomic)
    text = apply_rules(text, rules.symbols)
    text = strip_numeral(text, rules.numerals)
    return drop_group_tokens(text, rules.group_prefix)


def compact_location(location: str, rules: CompactionRules = DEFAULT_RULES) -> str:
    return apply_rules(location, rules.location)
