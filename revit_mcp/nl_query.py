# -*- coding: utf-8 -*-
"""Very small natural-language to predicate parser.

Handles phrases such as "beams with length greater than 20". It finds the
first known parameter mention, the earliest comparison phrase after it and
the first number after that phrase. At most one predicate is produced.
"""
import re
from collections import namedtuple

from .predicates import FilterPredicate
from ._constants import CATEGORY_ALIASES

# canonical name -> keywords, in match order
PARAMETER_PATTERNS = (
    ('length',                        ('length', 'long', 'l')),
    ('height',                        ('height', 'high', 'h', 'depth', 'd')),
    ('width',                         ('width', 'wide', 'w')),
    ('flange thickness',              ('flange thickness', 'flange', 'tf')),
    ('web thickness',                 ('web thickness', 'web', 'tw')),
    ('moment of inertia strong axis', ('moment of inertia strong', 'ix', 'strong axis')),
    ('moment of inertia weak axis',   ('moment of inertia weak', 'iy', 'weak axis')),
    ('section area',                  ('section area', 'area')),
    ('nominal weight',                ('weight', 'nominal weight')),
    ('structural usage',              ('structural usage', 'usage')),
)

# phrase -> operator; when two phrases start at the same place the longer wins
OPERATOR_PHRASES = (
    ('greater than', '>'),
    ('more than',    '>'),
    ('larger than',  '>'),
    ('bigger than',  '>'),
    ('longer than',  '>'),
    ('wider than',   '>'),
    ('taller than',  '>'),
    ('higher than',  '>'),
    ('thicker than', '>'),
    ('heavier than', '>'),
    ('at least',     '>='),
    ('>=',           '>='),
    ('>',            '>'),
    ('less than',    '<'),
    ('smaller than', '<'),
    ('shorter than', '<'),
    ('narrower than', '<'),
    ('lower than',   '<'),
    ('thinner than', '<'),
    ('lighter than', '<'),
    ('at most',      '<='),
    ('<=',           '<='),
    ('<',            '<'),
    ('not equal',    '!='),
    ('!=',           '!='),
    ('equal to',     '='),
    ('equals',       '='),
    ('=',            '='),
    ('contains',     'contains'),
)

_NUMBER = re.compile(r'(\d+\.?\d*)')
_CLAUSE_SPLIT = re.compile(r'\b(?:and|or|but)\b|,|;')

NLParse = namedtuple('NLParse', 'predicate category warnings')


def _keyword_regex(keyword):
    # short keywords ("l", "tf") must stand alone; longer ones may take a
    # comparative or plural ending ("wider", "longest", "walls")
    if len(keyword) > 2:
        return re.compile(r'(?<![a-z0-9]){}(?:er|est|r|st|es|s)?(?![a-z0-9])'.format(re.escape(keyword)))
    return re.compile(r'(?<![a-z0-9]){}(?![a-z0-9])'.format(re.escape(keyword)))


_PARAMETER_REGEXES = tuple(
    (name, tuple(_keyword_regex(k) for k in keywords)) for name, keywords in PARAMETER_PATTERNS)
_CATEGORY_REGEXES = tuple(
    (_keyword_regex(word), ost) for word, ost in
    sorted(CATEGORY_ALIASES.items(), key=lambda item: -len(item[0])))


def find_category(text):
    """OST_* name for the first category word in ``text``, or None."""
    lower = (text or '').lower()
    best = None
    for regex, ost in _CATEGORY_REGEXES:
        match = regex.search(lower)
        if match and (best is None or match.start() < best[0]):
            best = (match.start(), ost)
    return best[1] if best else None


def _find_operator(text, start):
    best = None
    for phrase, op in OPERATOR_PHRASES:
        index = text.find(phrase, start)
        if index < 0:
            continue
        if best is None or index < best[0] or (index == best[0] and len(phrase) > len(best[1])):
            best = (index, phrase, op)
    return best


def _condition_count(text):
    return sum(1 for clause in _CLAUSE_SPLIT.split(text)
               if _find_operator(clause, 0) and _NUMBER.search(clause))


def parse_query(text):
    """Parse ``text``. Returns NLParse(predicate or None, category or None, warnings)."""
    warnings = []
    lower = (text or '').lower().strip()
    if not lower:
        return NLParse(None, None, warnings)
    category = find_category(lower)

    for name, regexes in _PARAMETER_REGEXES:
        for regex in regexes:
            mention = regex.search(lower)
            if not mention:
                continue
            found = _find_operator(lower, mention.start())
            if found is None:
                continue
            index, phrase, op = found
            number = _NUMBER.search(lower, index + len(phrase))
            if not number:
                continue
            predicate = FilterPredicate(name, op, float(number.group(1)))
            if _condition_count(lower) > 1:
                warnings.append("Only the first condition was used ({}); the rest of "
                                "'{}' was ignored".format(predicate.describe(), text.strip()))
            return NLParse(predicate, category, warnings)

    warnings.append("No parameter condition recognised in '{}'".format(text.strip()))
    return NLParse(None, category, warnings)
