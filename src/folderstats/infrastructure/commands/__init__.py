"""Stats command execution."""

from folderstats.infrastructure.commands.handler import StatsCommandHandler, COMMON_WORDS, tokenize

__all__ = ['StatsCommandHandler', 'COMMON_WORDS', 'tokenize']
