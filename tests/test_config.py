"""
Configuration Tests
"""

import pytest

from http_sequence import CaptureConfig, DiagramConfig, PageConfig


class TestDiagramConfig:

    def test_defaults(self):
        config = DiagramConfig()

        assert config.capture == CaptureConfig()
        assert config.capture.json_content_type == "application/json"
        assert config.capture.json_indent == 4
        assert config.page.diagram_theme == "simple"

    def test_partial_config_is_filled(self):
        config = DiagramConfig(capture=CaptureConfig(json_indent=8))

        assert config.capture.json_indent == 8
        assert config.page == PageConfig()

    def test_from_empty_env(self):
        assert DiagramConfig.from_env({}) == DiagramConfig()

    def test_from_env_overrides(self):
        config = DiagramConfig.from_env({
            "HTTP_SEQUENCE_JSON_INDENT": "2",
            "HTTP_SEQUENCE_JSON_CONTENT_TYPE": "application/vnd.api+json",
            "HTTP_SEQUENCE_DIAGRAM_THEME": "hand",
        })

        assert config.capture.json_indent == 2
        assert config.capture.json_content_type == "application/vnd.api+json"
        assert config.page.diagram_theme == "hand"

    def test_blank_indent_uses_default(self):
        assert DiagramConfig.from_env({"HTTP_SEQUENCE_JSON_INDENT": " "}).capture.json_indent == 4

    def test_invalid_indent_names_variable(self):
        with pytest.raises(ValueError, match="HTTP_SEQUENCE_JSON_INDENT"):
            DiagramConfig.from_env({"HTTP_SEQUENCE_JSON_INDENT": "four"})
