# -*- coding: utf-8 -*-
"""Turn loose user terms into parameter names the registry knows.

Order per term: one-to-many expansion, category alias, shared alias, exact
name, then fuzzy match against the category's common parameter names.
Categories without a mapping fall back to the shared table.
"""
import re

from .mappings import normalize_key
from ._constants import FUZZY_MIN_CONFIDENCE, FUZZY_MAX_MATCHES

_WORD_SPLIT = re.compile(r'[\s_\-]+')


class NameResolution(object):
    __slots__ = ('user_term', 'resolved_name', 'confidence', 'method', 'suggestions', 'error')

    def __init__(self, user_term, resolved_name, confidence, method, suggestions=None, error=None):
        self.user_term = user_term
        self.resolved_name = resolved_name
        self.confidence = confidence
        self.method = method
        self.suggestions = list(suggestions or [])
        self.error = error

    @property
    def available(self):
        return self.resolved_name is not None

    def to_dict(self):
        return {
            'user_term': self.user_term,
            'resolved_name': self.resolved_name,
            'confidence': round(self.confidence, 3),
            'available': self.available,
            'method': self.method,
            'suggestions': self.suggestions,
            'error': self.error,
        }

    def __repr__(self):
        return 'NameResolution({!r} -> {!r}, {}, {:.2f})'.format(
            self.user_term, self.resolved_name, self.method, self.confidence)


def fuzzy_matches(term, candidates):
    """Score ``candidates`` against ``term``; best first, above the threshold."""
    lower = term.lower()
    user_words = [w for w in _WORD_SPLIT.split(lower) if w]
    best = {}

    def keep(name, score):
        if score > best.get(name, 0.0):
            best[name] = score

    for name in candidates:
        param = name.lower()
        if lower in param:
            keep(name, min(len(lower) / float(len(param)) * 0.8, 0.85))
        if param in lower and len(param) > 2:
            keep(name, min(len(param) / float(len(lower)) * 0.7, 0.75))
        param_words = [w for w in _WORD_SPLIT.split(param) if w]
        if user_words and param_words:
            matching = sum(1 for uw in user_words
                           if any(pw in uw or uw in pw for pw in param_words))
            if matching:
                keep(name, min(matching / float(max(len(user_words), len(param_words))) * 0.6, 0.7))

    ranked = sorted(((s, n) for n, s in best.items() if s > FUZZY_MIN_CONFIDENCE),
                    key=lambda pair: -pair[0])
    return [(n, s) for s, n in ranked[:FUZZY_MAX_MATCHES]]


def resolve_term(registry, category, term):
    """Resolve one term that is not a one-to-many expansion."""
    clean = normalize_key(term)
    if not clean:
        return NameResolution(term, None, 0.0, 'error', error='Empty parameter name')

    mapping = registry.get_mapping(category)
    shared = registry.shared

    if mapping is not None and mapping.resolve_alias(clean):
        return NameResolution(term, mapping.resolve_alias(clean), 0.95, 'category_alias')
    if shared.resolve_alias(clean):
        return NameResolution(term, shared.resolve_alias(clean), 0.9, 'shared_alias')

    exists = mapping.has_field(clean) if mapping is not None else False
    if exists or shared.is_shared_parameter(clean):
        return NameResolution(term, clean, 1.0, 'exact')

    candidates = mapping.common_parameter_names() if mapping is not None \
        else shared.common_parameter_names()
    matches = fuzzy_matches(clean, candidates)
    if matches:
        name, score = matches[0]
        return NameResolution(term, name, score, 'fuzzy', [n for n, _ in matches[1:4]])
    return NameResolution(term, None, 0.0, 'none')


def resolve_parameter_names(registry, category, terms):
    """Resolve a list of user terms. Duplicate resolved names are dropped.

    Failed resolutions are kept so the caller can see what did not match.
    """
    results = []
    seen = set()
    for term in terms or []:
        expanded = registry.expansion(category, term)
        if expanded:
            for name in expanded:
                if name not in seen:
                    seen.add(name)
                    results.append(NameResolution(term, name, 0.9, 'special_case'))
            continue
        resolution = resolve_term(registry, category, term)
        if resolution.resolved_name is None:
            results.append(resolution)
        elif resolution.resolved_name not in seen:
            seen.add(resolution.resolved_name)
            results.append(resolution)
    return results
