"""Group candidate spans into non-overlapping chains."""

from ..models import Chain, Span


def partition_chains(spans: list[Span]) -> list[Chain]:
    """Assign each span to the first chain it fits after (first-fit).

    Spans must already be ordered by `sort_spans`. A span fits a chain when
    the chain's last span ends at or before the span's start; otherwise a new
    chain is opened. First-fit does not always give the minimum number of
    chains, and which chains exist decides which parses are reported, so the
    rule must stay first-fit.

    Args:
        spans: Sorted candidate spans

    Returns:
        Chains in creation order; every span appears in exactly one chain
    """
    groups: list[list[Span]] = []

    for span in spans:
        for group in groups:
            if group[-1].end <= span.start:
                group.append(span)
                break
        else:
            groups.append([span])

    chains = [Chain(tuple(group)) for group in groups]

    for chain in chains:
        for left, right in zip(chain.spans, chain.spans[1:]):
            assert left.end <= right.start, \
                f"Overlapping spans in chain: {left} and {right}"

    return chains
