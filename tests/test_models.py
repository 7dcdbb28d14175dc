"""
Tests for PostConfig - the immutable run configuration.
"""

import re
from pathlib import Path

import pytest
from pydantic import ValidationError

from solr_post.config import Settings
from solr_post.core.exceptions import PostConfigError
from solr_post.models import (
    PostConfig,
    build_post_config,
    compile_content_pattern,
    normalize_extension,
)


class TestUrlResolution:
    def test_url_from_host_port_collection(self):
        config = build_post_config(host="solr.local", port=8984, collection="portal")
        assert config.resolved_update_url == "http://solr.local:8984/solr/portal/update"

    def test_explicit_url_overrides_host_port_collection(self):
        config = build_post_config(
            host="ignored",
            port=1,
            collection="ignored",
            update_url="https://search.example.com/solr/docs/update",
        )
        assert config.resolved_update_url == "https://search.example.com/solr/docs/update"

    def test_commit_url_strips_extract_handler(self):
        config = build_post_config(update_url="http://localhost:8983/solr/docs/update/extract")
        assert config.commit_url == "http://localhost:8983/solr/docs/update"

    def test_commit_url_defaults_to_update_url(self):
        config = build_post_config(collection="docs")
        assert config.commit_url == config.resolved_update_url

    def test_unparseable_url_is_rejected(self):
        with pytest.raises(PostConfigError, match="update_url"):
            build_post_config(update_url="localhost:8983/solr")


class TestExtensions:
    def test_normalize_extension(self):
        assert normalize_extension(".HTML") == "html"
        assert normalize_extension(" txt ") == "txt"

    def test_comma_separated_string_is_split(self):
        config = build_post_config(file_extensions="html, .TXT,json")
        assert config.file_extensions == frozenset({"html", "txt", "json"})

    def test_default_extension_list(self):
        config = PostConfig()
        assert "html" in config.file_extensions
        assert "pdf" in config.file_extensions
        assert len(config.file_extensions) == 22

    def test_empty_extension_list_is_rejected(self):
        with pytest.raises(PostConfigError):
            build_post_config(file_extensions="")


class TestContentPatterns:
    def test_patterns_compile_case_insensitive(self):
        config = build_post_config(exclude_regex="no_index", include_regex="index_me")
        assert config.exclude_regex.flags & re.IGNORECASE
        assert config.include_regex.search("INDEX_ME please")

    def test_no_patterns(self):
        config = build_post_config()
        assert config.exclude_regex is None
        assert config.include_regex is None

    def test_precompiled_pattern_becomes_case_insensitive(self):
        config = build_post_config(exclude_regex=re.compile("no_index"))
        assert config.exclude_regex.flags & re.IGNORECASE
        assert config.exclude_regex.search("NO_INDEX")

    def test_precompiled_pattern_keeps_its_flags(self):
        config = build_post_config(include_regex=re.compile("^title", re.MULTILINE))
        assert config.include_regex.flags & re.MULTILINE
        assert config.include_regex.search("body\nTITLE here")

    def test_invalid_regex_is_fatal(self):
        with pytest.raises(PostConfigError, match="Invalid regex"):
            build_post_config(include_regex="([unclosed")

    def test_empty_pattern_means_no_filter(self):
        assert compile_content_pattern("") is None
        assert compile_content_pattern(None) is None


class TestValidation:
    def test_concurrency_must_be_positive(self):
        with pytest.raises(PostConfigError, match="concurrency"):
            build_post_config(concurrency=0)

    def test_credentials_need_a_colon(self):
        with pytest.raises(PostConfigError, match="basic_auth_creds"):
            build_post_config(basic_auth_creds="justauser")

    def test_basic_auth_splits_on_first_colon(self):
        config = build_post_config(basic_auth_creds="solr:pa:ss")
        assert config.basic_auth == ("solr", "pa:ss")

    def test_config_is_immutable(self):
        config = build_post_config()
        with pytest.raises(ValidationError):
            config.concurrency = 4

    def test_directory_path_is_path(self):
        config = build_post_config(directory_path="./public")
        assert config.directory_path == Path("./public")


class TestFromSettings:
    def test_settings_provide_defaults(self):
        settings = Settings(host="solr1", port=9000, collection="docs", concurrency=3)
        config = PostConfig.from_settings(settings)
        assert config.resolved_update_url == "http://solr1:9000/solr/docs/update"
        assert config.concurrency == 3
        assert config.chunk_size == settings.upload_chunk_size_kb * 1024

    def test_none_overrides_are_ignored(self):
        settings = Settings(collection="docs")
        config = PostConfig.from_settings(settings, collection=None, concurrency=5)
        assert config.collection == "docs"
        assert config.concurrency == 5

    def test_settings_extensions_are_used(self):
        settings = Settings(file_extensions="html,htm")
        config = PostConfig.from_settings(settings)
        assert config.file_extensions == frozenset({"html", "htm"})
