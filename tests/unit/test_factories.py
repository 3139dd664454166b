"""
Unit tests for DispatcherFactory.
"""

import asyncio

import pytest
from unittest.mock import patch

from folderstats.application.dispatcher import BatchDispatcher
from folderstats.application.factories import DispatcherFactory
from folderstats.application.processor import StatsCommandProcessorService
from folderstats.domain.exceptions import ConfigurationError
from folderstats.infrastructure.config import StatsConfig
from folderstats.infrastructure.sources import PlaceholderTextSource, FileSystemTextSource
from folderstats.infrastructure.storage import (
    InMemoryStatsRepository, JsonlStatsRepository, B2StatsRepository
)


class TestTextSources:

    def test_placeholder(self):
        factory = DispatcherFactory(StatsConfig())

        assert isinstance(factory.create_text_source(), PlaceholderTextSource)

    def test_filesystem(self, tmp_path):
        factory = DispatcherFactory(StatsConfig(text_source="filesystem", root_dir=tmp_path, file_pattern="*.log"))

        source = factory.create_text_source()

        assert isinstance(source, FileSystemTextSource)
        assert source.root_dir == tmp_path
        assert source.pattern == "*.log"

    def test_unknown_source_after_mutation(self):
        config = StatsConfig()
        config.text_source = "database"

        with pytest.raises(ConfigurationError):
            DispatcherFactory(config).create_text_source()


class TestRepositories:

    def test_memory(self):
        assert isinstance(DispatcherFactory(StatsConfig(sink="memory")).create_repository(), InMemoryStatsRepository)

    def test_jsonl(self, tmp_path):
        path = tmp_path / "r.jsonl"
        repository = DispatcherFactory(StatsConfig(results_path=path)).create_repository()

        assert isinstance(repository, JsonlStatsRepository)
        assert repository.path == path

    def test_repository_is_shared(self):
        factory = DispatcherFactory(StatsConfig(sink="memory"))

        assert factory.create_repository() is factory.create_repository()

    @patch('folderstats.infrastructure.storage.b2_repository.boto3')
    def test_b2(self, mock_boto3):
        config = StatsConfig(sink="b2", b2_bucket="bucket", b2_key="key", b2_secret="secret", b2_prefix="monthly")

        repository = DispatcherFactory(config).create_repository()

        assert isinstance(repository, B2StatsRepository)
        assert repository.prefix == "monthly"
        mock_boto3.client.assert_called_once_with(
            's3',
            endpoint_url="https://s3.us-west-004.backblazeb2.com",
            aws_access_key_id="key",
            aws_secret_access_key="secret"
        )


class TestDispatcher:

    def test_end_to_end_with_memory_sink(self):
        config = StatsConfig(folders=["A", "B"], commands=["word_count", "average_word_length"], sink="memory")
        factory = DispatcherFactory(config)

        dispatcher = factory.create_dispatcher()
        assert isinstance(dispatcher, BatchDispatcher)

        asyncio.run(dispatcher.process_all_folders(config.folders, config.commands))

        records = factory.create_repository().all()
        assert [(r.folder_name, r.command) for r in records] == [
            ("A", "word_count"), ("A", "average_word_length"),
            ("B", "word_count"), ("B", "average_word_length"),
        ]
        assert records[0].results == ["total_words: 4", "unique_words: 4"]

    def test_processor_uses_repository(self):
        factory = DispatcherFactory(StatsConfig(sink="memory"))

        processor = factory.create_processor()

        assert isinstance(processor, StatsCommandProcessorService)
        assert processor.history("A") == []
