"""
Accessors: how candidate strings are pulled out of items.

An accessor is either a plain callable `item -> str | list[str] | None`
or an AccessorOptions record that pairs the callable with its own
ranking bounds and threshold. Both forms are resolved once into a
ResolvedAccessor before any item is touched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Union

from .domain import InvalidArgumentError, Ranking, parse_ranking
from .logging import get_logger

logger = get_logger(__name__)


AccessorFn = Callable[[Any], Union[str, Sequence[str], None]]


@dataclass(frozen=True)
class AccessorOptions:
    """
    An accessor with per-accessor ranking policy.

    min_ranking lifts any real match (MATCHES or better) up to at least
    this tier. max_ranking caps every match at this tier. threshold, when
    set, replaces the call-level threshold for this accessor's values.
    """
    accessor: AccessorFn
    threshold: Optional[Ranking] = None
    min_ranking: Optional[Ranking] = None
    max_ranking: Optional[Ranking] = None


AccessorSpec = Union[AccessorFn, AccessorOptions]


@dataclass(frozen=True)
class ResolvedAccessor:
    """
    Normalized accessor. Unset bounds stay None and mean "no bound";
    an unset threshold means "use the call-level threshold".
    """
    extract: AccessorFn
    min_ranking: Optional[Ranking] = None
    max_ranking: Optional[Ranking] = None
    threshold: Optional[Ranking] = None

    def clamp(self, rank: Ranking) -> Ranking:
        """
        Apply the accessor's bounds to a raw ranking.

        NO_MATCH is never lifted. When the bounds cross, max wins.
        """
        if (
            self.min_ranking is not None
            and rank < self.min_ranking
            and rank >= Ranking.MATCHES
        ):
            rank = self.min_ranking
        if self.max_ranking is not None and rank > self.max_ranking:
            rank = self.max_ranking
        return Ranking(rank)


@dataclass(frozen=True)
class CandidateValue:
    """One string to rank, with the accessor that produced it."""
    value: str
    accessor: ResolvedAccessor
    accessor_index: int


def _optional_ranking(value: Optional[Ranking]) -> Optional[Ranking]:
    return None if value is None else parse_ranking(value)


def resolve_accessor(spec: AccessorSpec) -> ResolvedAccessor:
    """
    Turn either accessor form into a ResolvedAccessor.

    Raises:
        InvalidArgumentError: If spec is neither callable nor AccessorOptions,
            or names a ranking outside the scale
    """
    if isinstance(spec, AccessorOptions):
        if not callable(spec.accessor):
            raise InvalidArgumentError(
                f"AccessorOptions.accessor must be callable, got {type(spec.accessor).__name__}"
            )
        return ResolvedAccessor(
            extract=spec.accessor,
            min_ranking=_optional_ranking(spec.min_ranking),
            max_ranking=_optional_ranking(spec.max_ranking),
            threshold=_optional_ranking(spec.threshold),
        )
    if callable(spec):
        return ResolvedAccessor(extract=spec)
    raise InvalidArgumentError(
        f"Accessor must be callable or AccessorOptions, got {type(spec).__name__}"
    )


def resolve_accessors(specs: Sequence[AccessorSpec]) -> list[ResolvedAccessor]:
    resolved = [resolve_accessor(spec) for spec in specs]
    logger.debug("accessors_resolved", count=len(resolved))
    return resolved


def get_item_values(item: Any, accessor: ResolvedAccessor) -> list[str]:
    """
    Call the accessor on the item.

    None gives no values, a list or tuple is used as-is, and any other
    value is converted with str().
    """
    value = accessor.extract(item)

    if value is None:
        return []

    if isinstance(value, (list, tuple)):
        return list(value)

    return [str(value)]


def extract_values(
    item: Any,
    accessors: Sequence[Union[AccessorSpec, ResolvedAccessor]],
) -> list[CandidateValue]:
    """
    Collect every candidate string of an item.

    Order is accessor order, then value order within an accessor. The
    best-match selection relies on it: earlier candidates win ties.
    """
    candidates: list[CandidateValue] = []

    for index, spec in enumerate(accessors):
        accessor = spec if isinstance(spec, ResolvedAccessor) else resolve_accessor(spec)
        for value in get_item_values(item, accessor):
            candidates.append(CandidateValue(value, accessor, index))

    return candidates
