"""Particle label normalization and electric-charge inference.

Labels arrive LaTeX-like (``\\bar{u}``, ``\\nu_e``, ``e^-``) or plain
(``mu+``); the normalizer rewrites them into display strings built from Unicode
letters, combining marks and super/subscripts.
"""

from __future__ import annotations

import re

from feynsight.engine.constants import CHARGE_TABLE

COMBINING_OVERLINE = "\u0305"

_BAR_GROUP_RE = re.compile(r"\\bar\{([^}]+)\}")
_BAR_PREFIX_RE = re.compile(r"\\bar\s+")
_STRIP_RE = re.compile(r"[{}$^]")

_SYMBOLS = {
    "\\nu": "ν", "nu": "ν", "neutrino": "ν",
    "\\mu": "μ", "mu": "μ",
    "\\tau": "τ", "tau": "τ",
    "\\gamma": "γ", "gamma": "γ", "photon": "γ",
    "\\pi": "π", "pi": "π",
    "e": "e", "g": "g", "W": "W", "Z": "Z", "H": "H",
}
# Longest tokens first so "\gamma" wins over "gamma" and "neutrino" over "nu".
_SYMBOL_RE = re.compile(
    "|".join(re.escape(t) for t in sorted(_SYMBOLS, key=len, reverse=True))
)

_CHARGE_SIGN_RE = re.compile(r"[-+](?=$|_)")
_SUPERSCRIPT_SIGNS = {"-": "⁻", "+": "⁺"}

_SUBSCRIPT_RE = re.compile(r"_([a-zA-Z0-9\u0370-\u03FF]+)")
_SUBSCRIPTS = {
    **dict(zip("0123456789", "₀₁₂₃₄₅₆₇₈₉")),
    "a": "ₐ", "e": "ₑ", "h": "ₕ", "i": "ᵢ", "j": "ⱼ", "k": "ₖ", "l": "ₗ",
    "m": "ₘ", "n": "ₙ", "o": "ₒ", "p": "ₚ", "r": "ᵣ", "s": "ₛ", "t": "ₜ",
    "u": "ᵤ", "v": "ᵥ", "x": "ₓ", "d": "ᵈ",
    "β": "ᵦ", "γ": "ᵧ", "ρ": "ᵨ", "φ": "ᵩ", "χ": "ᵪ",
    "μ": "ᵤ", "τ": "ₜ",
}

_POSITIVE_GLYPHS = ("⁺", "+")
_NEGATIVE_GLYPHS = ("⁻", "−", "-")


def normalize_label(raw: str) -> str:
    """Convert a raw particle label into its display form. Stage order matters."""
    if not raw:
        return ""

    text = _BAR_GROUP_RE.sub(lambda m: m.group(1) + COMBINING_OVERLINE, raw)
    text = _BAR_PREFIX_RE.sub("", text)
    text = _STRIP_RE.sub("", text)
    text = _SYMBOL_RE.sub(lambda m: _SYMBOLS[m.group(0)], text)
    text = _CHARGE_SIGN_RE.sub(lambda m: _SUPERSCRIPT_SIGNS[m.group(0)], text)
    return _SUBSCRIPT_RE.sub(_subscript, text)


def _subscript(match: re.Match[str]) -> str:
    token = match.group(1)
    token = _SYMBOLS.get(f"\\{token}", _SYMBOLS.get(token, token))
    if all(ch in _SUBSCRIPTS for ch in token):
        return "".join(_SUBSCRIPTS[ch] for ch in token)
    return f"_{token}"


def infer_charge(label: str, name: str) -> int:
    """Electric charge sign from an explicit glyph, then the name table, else 0."""
    if any(g in label for g in _POSITIVE_GLYPHS):
        return 1
    if any(g in label for g in _NEGATIVE_GLYPHS):
        return -1
    return CHARGE_TABLE.get(name.lower(), 0)
