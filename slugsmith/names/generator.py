"""Name assembly from adverb, adjective and name word lists.

A name with k words is built by drawing one word from the name list, then
prepending one adjective (k >= 2) and k - 2 adverbs (k > 2). The final order
is therefore [adverb_1, ..., adjective, name]. Every draw is uniform and with
replacement, so names repeat and adverbs can repeat within a name.

Randomness is injected through ``rng`` (a ``random.Random``); the global
``random`` module state is never used.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, replace

from ..errors import EmptyWordListError, InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRequest:
    """What to generate.

    Values are checked by ``generate_names`` rather than on construction, so an
    out-of-range request surfaces as ``InvalidArgumentError`` at call time.
    """

    words_per_name: int = 3
    separator: str = "-"
    number_of_names: int = 1
    pascal_case: bool = False


def pascal_case_word(word: str) -> str:
    """Uppercase the first character of ``word``, leaving the rest unchanged."""
    return word[:1].upper() + word[1:]


def _draw_plan(words_per_name: int) -> tuple[int, int, int]:
    """Return (names, adjectives, adverbs) draw counts for one name."""
    return 1, min(1, words_per_name - 1), max(0, words_per_name - 2)


def validate_request(request: NameRequest) -> None:
    """Raise InvalidArgumentError unless word and name counts are positive."""
    if request.words_per_name <= 0:
        raise InvalidArgumentError(
            f"words_per_name must be greater than 0, got {request.words_per_name}"
        )
    if request.number_of_names <= 0:
        raise InvalidArgumentError(
            f"number_of_names must be greater than 0, got {request.number_of_names}"
        )


def _validate(
    names: Sequence[str],
    adjectives: Sequence[str],
    adverbs: Sequence[str],
    request: NameRequest,
) -> None:
    validate_request(request)

    _, n_adjectives, n_adverbs = _draw_plan(request.words_per_name)
    if not names:
        raise EmptyWordListError("names", request.words_per_name)
    if n_adjectives and not adjectives:
        raise EmptyWordListError("adjectives", request.words_per_name)
    if n_adverbs and not adverbs:
        raise EmptyWordListError("adverbs", request.words_per_name)

    needed = [("names", names)]
    if n_adjectives:
        needed.append(("adjectives", adjectives))
    if n_adverbs:
        needed.append(("adverbs", adverbs))
    for category, words in needed:
        if any(not w for w in words):
            raise InvalidArgumentError(f"The {category} list contains an empty word")


def _assemble(
    names: Sequence[str],
    adjectives: Sequence[str],
    adverbs: Sequence[str],
    request: NameRequest,
    rng: random.Random,
) -> list[str]:
    """Draw the words for a single name, in output order."""
    words = [rng.choice(names)]
    if request.words_per_name >= 2:
        words.insert(0, rng.choice(adjectives))
    for _ in range(request.words_per_name - 2):
        words.insert(0, rng.choice(adverbs))

    if request.pascal_case:
        words = [pascal_case_word(w) for w in words]
    return words


def generate_names(
    names: Sequence[str],
    adjectives: Sequence[str],
    adverbs: Sequence[str],
    request: NameRequest | None = None,
    *,
    rng: random.Random | None = None,
) -> list[str]:
    """Generate ``request.number_of_names`` independent random names.

    Args:
        names: Candidate base words (always required)
        adjectives: Candidate adjectives (required when words_per_name >= 2)
        adverbs: Candidate adverbs (required when words_per_name >= 3)
        request: Word count, separator, count and casing. Defaults to NameRequest()
        rng: Random source. A fresh OS-seeded Random is used when omitted

    Returns:
        List of exactly ``number_of_names`` strings

    Raises:
        InvalidArgumentError: words_per_name or number_of_names is not positive,
            or a list needed for the word count contains an empty string
        EmptyWordListError: a list needed for the requested word count is empty
    """
    request = request or NameRequest()
    _validate(names, adjectives, adverbs, request)

    if rng is None:
        rng = random.Random()

    n_names, n_adjectives, n_adverbs = _draw_plan(request.words_per_name)
    logger.debug(
        "Generating %d name(s): %d name, %d adjective, %d adverb word(s) each",
        request.number_of_names,
        n_names,
        n_adjectives,
        n_adverbs,
    )

    results: list[str] = []
    collision_warned = False
    for _ in range(request.number_of_names):
        words = _assemble(names, adjectives, adverbs, request, rng)
        if (
            request.separator
            and not collision_warned
            and any(request.separator in w for w in words)
        ):
            collision_warned = True
            logger.warning(
                "Separator %r occurs inside a drawn word; some names will not "
                "split into %d segments",
                request.separator,
                request.words_per_name,
            )
        results.append(request.separator.join(words))

    return results


def generate_name(
    names: Sequence[str],
    adjectives: Sequence[str],
    adverbs: Sequence[str],
    request: NameRequest | None = None,
    *,
    rng: random.Random | None = None,
) -> str:
    """Generate a single name. ``request.number_of_names`` is ignored."""
    single = replace(request or NameRequest(), number_of_names=1)
    return generate_names(names, adjectives, adverbs, single, rng=rng)[0]


@dataclass(frozen=True)
class WordLists:
    """The three word lists a name is assembled from."""

    names: tuple[str, ...]
    adjectives: tuple[str, ...]
    adverbs: tuple[str, ...]

    @classmethod
    def from_sequences(
        cls,
        names: Sequence[str],
        adjectives: Sequence[str],
        adverbs: Sequence[str],
    ) -> "WordLists":
        return cls(tuple(names), tuple(adjectives), tuple(adverbs))

    def generate(
        self,
        request: NameRequest | None = None,
        rng: random.Random | None = None,
    ) -> list[str]:
        return generate_names(
            self.names, self.adjectives, self.adverbs, request, rng=rng
        )

    def counts(self) -> dict[str, int]:
        return {
            "names": len(self.names),
            "adjectives": len(self.adjectives),
            "adverbs": len(self.adverbs),
        }
