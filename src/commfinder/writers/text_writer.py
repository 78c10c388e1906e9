"""
Plain-text writer for lookup results

Formats a LookupResult as text for the command line. The lookup engine
itself never formats output.
"""

from typing import List, Optional

from ..core.models import LookupResult, RankedAlgorithm, RankedVariant


def plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


class TextWriter:
    """Write lookup results as indented text"""

    def __init__(
        self,
        limit: Optional[int] = None,
        show_sources: bool = True,
        show_stickers: bool = True,
    ):
        self.limit = limit
        self.show_sources = show_sources
        self.show_stickers = show_stickers

    def write(self, result: LookupResult) -> str:
        """Generate text for both sides of a lookup"""
        if result.not_found:
            return "not found"

        lines = [result.piece_type.display_name]
        if result.found:
            lines.append("")
            lines.extend(self._format_side(result, result.query_text, result.algorithms, inverse=False))
        if result.inverse_found:
            lines.append("")
            lines.extend(
                self._format_side(result, result.inverse_text, result.inverse_algorithms, inverse=True)
            )
        return "\n".join(lines)

    def _format_side(
        self, result: LookupResult, title: str, algorithms: List[RankedAlgorithm], inverse: bool
    ) -> List[str]:
        heading = f"{title} (inverse)" if inverse else title
        if self.show_stickers:
            pattern = result.inverse_queried if inverse else result.queried
            heading += f"  [{result.piece_type.describe(pattern)}]"
        lines = [heading, "=" * len(heading)]

        shown = algorithms if self.limit is None else algorithms[: self.limit]
        for algorithm in shown:
            lines.append(f"{algorithm.alg}  ({plural(algorithm.user_count, 'user')})")
            for variant in algorithm.variants:
                lines.extend(self._format_variant(variant))

        hidden = len(algorithms) - len(shown)
        if hidden > 0:
            lines.append(f"... {plural(hidden, 'more algorithm')}")
        return lines

    def _format_variant(self, variant: RankedVariant) -> List[str]:
        lines = [f"    {variant.variant}  [{variant.user_count}]"]
        if variant.notes:
            lines.append(f"        note: {variant.notes}")
        if self.show_sources:
            for user, sources in variant.users.items():
                labels = ", ".join(source.label for source in sources)
                lines.append(f"        {user} [{labels}]" if labels else f"        {user}")
        return lines
