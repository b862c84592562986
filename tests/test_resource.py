"""Tests for resource name extraction."""

from unittest.mock import MagicMock

import pytest

from tower_launcher.outputs import PipelineOutputs
from tower_launcher.resource import (
    RESOURCE_NAME_OUTPUT,
    export_resource_name,
    find_resource_name,
)


class TestFindResourceName:
    @pytest.mark.parametrize(
        "output,expected",
        [
            ('Resource created: /myResource"', "myResource"),
            ("/subscriptions/abc\\resourceGroups\\/autoSOMEname\\ done", "autoSOMEname"),
            ('"id": "/rg/first" then "/rg/second"', "second"),
            ('/one\\ and later /two"', "two"),
            ('/under_score_9"', "under_score_9"),
        ],
    )
    def test_last_match_without_delimiters(self, output, expected):
        assert find_resource_name(output) == expected

    @pytest.mark.parametrize(
        "output",
        [
            "",
            "PLAY RECAP localhost ok=3",
            "/path/without/delimiter",
            "/name' single quote",
            '/"',
        ],
    )
    def test_no_match(self, output):
        assert find_resource_name(output) is None

    def test_none_output(self):
        assert find_resource_name(None) is None

    def test_word_characters_are_ascii_only(self):
        assert find_resource_name('/café"') is None


class TestExportResourceName:
    def test_publishes_name(self, capsys):
        outputs = MagicMock(spec=PipelineOutputs)

        assert export_resource_name('Resource created: /myResource"', outputs) == "myResource"

        outputs.set_output.assert_called_once_with(RESOURCE_NAME_OUTPUT, "myResource")
        assert "Resource name exported: myResource" in capsys.readouterr().out

    def test_no_match_publishes_nothing(self, capsys):
        outputs = MagicMock(spec=PipelineOutputs)

        assert export_resource_name("nothing to see", outputs) is None

        outputs.set_output.assert_not_called()
        outputs.set_failed.assert_not_called()
        assert "WARNING: No resource name exported" in capsys.readouterr().out
