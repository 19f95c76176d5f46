"""Tests for the git log command users are asked to run."""

from commit_story.command import LOG_FORMAT, build_log_command, log_filename


class TestLogFilename:
    def test_lowercased_and_sanitised(self):
        assert log_filename("My-Repo.js") == "my_repo_js_git-log.txt"

    def test_plain_name(self):
        assert log_filename("widgets") == "widgets_git-log.txt"


class TestBuildLogCommand:
    def test_full_command(self):
        assert build_log_command("Commit Story") == (
            'git log --all --pretty=format:"COMMIT_START%nSHA: %H%nAuthor: %an <%ae>'
            '%nDate: %ad%nMessage: %s%n%b%nCOMMIT_END" --date=iso --stat -p'
            " > commit_story_git-log.txt"
        )

    def test_format_produces_parseable_headers(self):
        for key in ("SHA: %H", "Author: %an <%ae>", "Date: %ad", "Message: %s"):
            assert key in LOG_FORMAT
        assert LOG_FORMAT.startswith("COMMIT_START%n")
        assert LOG_FORMAT.endswith("%nCOMMIT_END")
