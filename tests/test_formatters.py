"""Tests for the formatters package."""

import json

import pytest

from commit_story.formatters import (
    GithubFormatter,
    JsonFormatter,
    OutputContext,
    RichFormatter,
    get_formatter,
)
from commit_story.gitlog import parse_git_log


@pytest.fixture
def partial_result(missing_sha_log):
    return parse_git_log(missing_sha_log)


class TestGetFormatter:
    @pytest.mark.parametrize(
        "name, cls", [("rich", RichFormatter), ("json", JsonFormatter), ("github", GithubFormatter)]
    )
    def test_known(self, name, cls):
        assert isinstance(get_formatter(name), cls)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("csv")


class TestJsonFormatter:
    def test_full_result(self, partial_result):
        data = json.loads(JsonFormatter().format(partial_result, OutputContext()))

        assert data["totalCommits"] == 3
        assert data["successfullyParsed"] == 2
        assert len(data["commits"]) == 2
        assert data["errors"][0]["recordIndex"] == 1
        assert data["errors"][0]["reason"] == "missing SHA"
        assert "rawExcerpt" in data["errors"][0]

    def test_render_prints(self, partial_result, capsys):
        JsonFormatter().render(partial_result, OutputContext())
        assert json.loads(capsys.readouterr().out)["totalCommits"] == 3


class TestGithubFormatter:
    def test_commits_only(self, partial_result):
        text = GithubFormatter().format(
            partial_result, OutputContext(repo_url="https://github.com/acme/app")
        )
        data = json.loads(text)

        assert len(data) == 2
        assert data[0]["commit"]["message"] == "Valid commit"
        assert data[0]["commit"]["author"]["name"] == "John Doe"
        assert data[0]["html_url"].endswith("/commit/" + data[0]["sha"])


class TestRichFormatter:
    def test_summary_and_tables(self, partial_result, capsys):
        RichFormatter().render(partial_result, OutputContext(source="repo_git-log.txt"))
        out = capsys.readouterr().out

        assert "repo_git-log.txt" in out
        assert "Rejected blocks" in out
        assert "missing SHA" in out
        assert "partial" in out

    def test_format_returns_empty_string(self, partial_result, capsys):
        assert RichFormatter().format(partial_result, OutputContext()) == ""

    def test_empty_result(self, capsys):
        RichFormatter().render(parse_git_log(""), OutputContext())
        assert "no commit blocks found" in capsys.readouterr().out
