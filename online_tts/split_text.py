from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)

NON_BREAKING_SPACE = "\u00a0"
# Tried in order; the cut goes right after the first character of the match.
SPLIT_BOUNDARIES = (". ", " ", "\n", NON_BREAKING_SPACE)


def get_split_index(text: str, max_length: int) -> int:
    """
    Return how many leading characters of ``text`` fit into one request.

    The result lies in ``[1, min(max_length, len(text))]`` for non-empty text.
    Sentence ends are preferred over spaces, then newlines, then non-breaking
    spaces. Text without any of them (e.g. a long URL or a CJK run) is cut at
    exactly ``max_length`` characters.
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    if len(text) <= max_length:
        return len(text)

    for boundary in SPLIT_BOUNDARIES:
        # The boundary has to start inside the budget; only its first
        # character ends up in the current chunk.
        position = text.rfind(boundary, 0, max_length - 1 + len(boundary))
        if position != -1:
            return position + 1

    logger.debug("No split boundary within %d characters, using a hard cut.", max_length)
    return max_length


def split_by_index(text: str, max_length: int) -> List[str]:
    """
    Split ``text`` into consecutive pieces of at most ``max_length`` characters.

    Joining the pieces gives back ``text`` unchanged, whitespace included.
    """
    chunks: List[str] = []
    remaining = text or ""
    while remaining:
        index = get_split_index(remaining, max_length)
        chunks.append(remaining[:index])
        remaining = remaining[index:]
    return chunks
