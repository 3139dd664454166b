"""Stats command implementations."""

import re
from collections import Counter
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional

from folderstats.domain.exceptions import UnsupportedCommandError
from folderstats.domain.models import StatsCommandType
from folderstats.shared.logging import get_logger

logger = get_logger(__name__)

COMMON_WORDS: FrozenSet[str] = frozenset({
    "the", "is", "in", "it", "and", "or", "to", "a", "of", "on", "at", "as", "for", "with", "by",
    "an", "be", "this", "that", "but", "not", "are", "from", "was", "were", "you", "he", "she", "we",
    "they", "has", "have", "had", "will", "can", "do", "if", "when", "which", "who", "their", "its",
})

_DELIMITERS = re.compile(r"[ .,;:?!\r\n]+")


def tokenize(text: str) -> List[str]:
    """Split text on whitespace and punctuation, dropping empty tokens."""
    return [token for token in _DELIMITERS.split(text) if token]


class StatsCommandHandler:
    """
    Executes stats commands against a text payload.
    Implements ICommandExecutor protocol.
    """

    def __init__(self, top_n: int = 5, common_words: Optional[Iterable[str]] = None):
        """
        Initialize handler.

        Args:
            top_n: Number of words reported by the popular-word scan
            common_words: Words ignored by the popular-word scan
        """
        self.top_n = top_n
        self.common_words = frozenset(common_words) if common_words is not None else COMMON_WORDS
        self._commands: Dict[StatsCommandType, Callable[[str], List[str]]] = {
            StatsCommandType.SCAN_MOST_POPULAR_WORD: self.scan_most_popular_word,
            StatsCommandType.WORD_COUNT: self.word_count,
            StatsCommandType.AVERAGE_WORD_LENGTH: self.average_word_length,
        }

    async def execute(self, command_type: StatsCommandType, text: str) -> List[str]:
        """
        Run a command against text.

        Raises:
            UnsupportedCommandError: If the command has no implementation
        """
        command = self._commands.get(command_type)
        if command is None:
            raise UnsupportedCommandError(f"No implementation for stats command: {command_type!r}")

        results = command(text)
        logger.debug(f"{command_type.value}: {len(results)} result line(s)")
        return results

    def scan_most_popular_word(self, text: str) -> List[str]:
        """Most frequent non-common words, formatted as "word: count"."""
        words = (token.lower() for token in tokenize(text))
        counts = Counter(word for word in words if word not in self.common_words)
        # most_common keeps first-seen order for equal counts
        return [f"{word}: {count}" for word, count in counts.most_common(self.top_n)]

    def word_count(self, text: str) -> List[str]:
        tokens = tokenize(text)
        unique = {token.lower() for token in tokens}
        return [f"total_words: {len(tokens)}", f"unique_words: {len(unique)}"]

    def average_word_length(self, text: str) -> List[str]:
        tokens = tokenize(text)
        average = sum(len(token) for token in tokens) / len(tokens) if tokens else 0.0
        return [f"average_word_length: {average:.2f}"]
