"""
Ranking of algorithms and variants by contributor count
"""

from typing import List

from .models import AlgorithmGroup, RankedAlgorithm, RankedVariant


class VariantRanker:
    """Order an algorithm group by how many people use each algorithm"""

    @staticmethod
    def rank(group: AlgorithmGroup) -> List[RankedAlgorithm]:
        """Rank algorithms, then the variants within each algorithm

        An algorithm's user count is the number of distinct contributors
        across all of its variants. Algorithms are ordered by that count,
        highest first, then by algorithm text. Variants are ordered by their
        own contributor count, keeping input order on ties.
        """
        ranked = []
        for alg, variants in group.items():
            contributors = set()
            for usage in variants.values():
                contributors.update(usage.users)

            variant_list = [
                RankedVariant(
                    variant=variant,
                    users={user: list(sources) for user, sources in usage.users.items()},
                    notes=usage.notes,
                )
                for variant, usage in variants.items()
            ]
            # sort() is stable
            variant_list.sort(key=lambda v: -v.user_count)

            ranked.append(RankedAlgorithm(alg=alg, user_count=len(contributors), variants=variant_list))

        ranked.sort(key=lambda a: (-a.user_count, a.alg))
        return ranked
