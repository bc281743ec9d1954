"""Turn winning chains back into readable strings."""

from ..models import Chain

PARSE_DELIMITER = ","


def render_chain(token: str, chain: Chain) -> str:
    """Render a chain as space-separated words.

    Stretches of the token not covered by a span are kept verbatim as their
    own pieces, so removing the spaces gives back the token.

    Args:
        token: Token the chain was built from
        chain: Spans ordered by start

    Returns:
        Rendered parse, e.g. "cats apple" or "ab cde fghi"
    """
    pieces = []
    cursor = 0

    for span in chain:
        if cursor != span.start:
            pieces.append(token[cursor:span.start] + " ")
        pieces.append(span.word + " ")
        cursor = span.end

    pieces.append(token[cursor:])
    return "".join(pieces).strip()


def join_parses(parses: list[str], delimiter: str = PARSE_DELIMITER) -> str:
    """Join parse options, keeping order and duplicates."""
    return delimiter.join(parses)
