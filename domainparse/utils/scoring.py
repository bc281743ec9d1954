"""Score chains by covered characters."""

from ..models import Chain


def chain_coverage(chain: Chain) -> int:
    """Total length of the dictionary words in a chain."""
    return chain.coverage


def select_best_chains(chains: list[Chain]) -> list[Chain]:
    """Keep every chain tied for the highest coverage.

    Args:
        chains: Chains in partition order

    Returns:
        Winning chains in their original order (empty for no chains)
    """
    best: list[Chain] = []
    best_coverage = 0

    for chain in chains:
        coverage = chain_coverage(chain)
        if coverage > best_coverage:
            best = [chain]
            best_coverage = coverage
        elif coverage == best_coverage:
            best.append(chain)

    return best
