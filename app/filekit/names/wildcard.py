"""Wildcard matching of file names.

``?`` matches exactly one character and ``*`` matches zero or more. There
is no escaping and no character classes; the matcher backtracks over
``*`` so patterns like ``*log?abc?d`` resolve against repeated text.
"""

from filekit.core.iocase import IOCase


def split_on_tokens(text: str) -> list[str]:
    """Split a pattern into literal runs and single wildcard tokens.

    Consecutive ``*`` collapse into one: ``a**b?`` -> ``["a", "*", "b", "?"]``.
    """
    if "?" not in text and "*" not in text:
        return [text]
    tokens: list[str] = []
    buffer: list[str] = []
    prev = ""
    for ch in text:
        if ch in ("?", "*"):
            if buffer:
                tokens.append("".join(buffer))
                buffer.clear()
            if ch == "?":
                tokens.append("?")
            elif prev != "*":
                tokens.append("*")
        else:
            buffer.append(ch)
        prev = ch
    if buffer:
        tokens.append("".join(buffer))
    return tokens


def wildcard_match(
    name: str | None, pattern: str | None, case: IOCase | None = IOCase.SENSITIVE
) -> bool:
    """Check a file name against a wildcard pattern.

    Args:
        name: File name to test.
        pattern: Pattern with ``?`` and ``*`` wildcards.
        case: Case policy; None means sensitive.

    Returns:
        True on a full match. Two Nones match; a single None never does.
    """
    if name is None and pattern is None:
        return True
    if name is None or pattern is None:
        return False
    case = IOCase.value_of(case, IOCase.SENSITIVE)
    tokens = split_on_tokens(pattern)
    any_chars = False
    text_idx = 0
    token_idx = 0
    backtrack: list[tuple[int, int]] = []

    while True:
        if backtrack:
            token_idx, text_idx = backtrack.pop()
            any_chars = True

        while token_idx < len(tokens):
            token = tokens[token_idx]
            if token == "?":
                text_idx += 1
                if text_idx > len(name):
                    break
                any_chars = False
            elif token == "*":
                any_chars = True
                if token_idx == len(tokens) - 1:
                    text_idx = len(name)
            else:
                if any_chars:
                    text_idx = case.check_index_of(name, text_idx, token)
                    if text_idx == -1:
                        break
                    repeat = case.check_index_of(name, text_idx + 1, token)
                    if repeat >= 0:
                        backtrack.append((token_idx, repeat))
                elif not case.check_region_matches(name, text_idx, token):
                    break
                text_idx += len(token)
                any_chars = False
            token_idx += 1

        if token_idx == len(tokens) and text_idx == len(name):
            return True
        if not backtrack:
            return False


def wildcard_match_on_system(name: str | None, pattern: str | None) -> bool:
    """wildcard_match() using the host's case policy."""
    return wildcard_match(name, pattern, IOCase.SYSTEM)
