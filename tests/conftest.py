"""Shared git log fixtures for commit-story tests."""

import pytest

SHA_A = "abc123def456789012345678901234567890abcd"
SHA_B = "def456abc789012345678901234567890abcdef12"
SHA_C = "1234567890abcdef1234567890abcdef12345678"


def commit_block(
    sha="abc123def456789012345678901234567890abcd",
    author="John Doe <john@example.com>",
    date="2024-01-15 10:30:00 -0500",
    message="Add user authentication feature",
    extra="",
):
    """Render one COMMIT_START/COMMIT_END block; None omits a header line."""
    lines = ["COMMIT_START"]
    if sha is not None:
        lines.append(f"SHA: {sha}")
    if author is not None:
        lines.append(f"Author: {author}")
    if date is not None:
        lines.append(f"Date: {date}")
    if message is not None:
        lines.append(f"Message: {message}")
    if extra:
        lines.append(extra)
    lines.append("COMMIT_END")
    return "\n".join(lines)


@pytest.fixture
def make_block():
    """Factory for single commit blocks."""
    return commit_block


@pytest.fixture
def single_commit_log():
    return commit_block(
        extra="\n src/auth.ts | 45 " + "+" * 45 + "\n 1 file changed, 45 insertions(+)",
    )


@pytest.fixture
def three_commit_log():
    """Three valid commits, as a user would upload them."""
    return "\n".join(
        [
            commit_block(
                sha=SHA_A,
                extra="\n src/auth.ts | 45 " + "+" * 45 + "\n 1 file changed, 45 insertions(+)",
            ),
            commit_block(
                sha=SHA_B,
                author="Jane Smith <jane@example.com>",
                date="2024-01-16 14:20:00 -0500",
                message="Fix login bug",
                extra="\n src/login.ts | 12 ++++++------\n 1 file changed, 6 insertions(+), 6 deletions(-)",
            ),
            commit_block(
                sha=SHA_C,
                author="Bob Johnson <bob@example.com>",
                date="2024-01-17 09:15:00 -0500",
                message="Update documentation",
                extra="\n README.md | 20 " + "+" * 20 + "\n 1 file changed, 20 insertions(+)",
            ),
        ]
    )


@pytest.fixture
def missing_sha_log():
    """Two valid commits around one without a SHA line."""
    return "\n".join(
        [
            commit_block(sha=SHA_A, message="Valid commit"),
            commit_block(
                sha=None,
                author="Missing SHA <test@example.com>",
                message="This commit is missing SHA",
            ),
            commit_block(sha=SHA_B, message="Another valid commit"),
        ]
    )


@pytest.fixture
def all_invalid_log():
    return "\n".join(
        [
            commit_block(sha=None, message="This commit is missing SHA"),
            commit_block(sha="invalid-sha", message="This commit has invalid SHA"),
        ]
    )


@pytest.fixture
def five_file_log():
    """One commit whose stat graph git has scaled down."""
    stat = "\n".join(
        [
            "",
            " src/file1.ts | 150 " + "+" * 60,
            " src/file2.ts | 200 " + "+" * 80,
            " src/file3.ts | 75 " + "+" * 30,
            " src/file4.ts | 50 " + "+" * 20,
            " src/file5.ts | 100 " + "+" * 40,
            " 5 files changed, 575 insertions(+)",
        ]
    )
    return commit_block(message="Large refactoring", extra=stat)


@pytest.fixture
def git_output_log():
    """Output of the documented ``git log ... --stat -p`` command.

    git appends its "---" diffstat separator to the COMMIT_END line and
    separates commits with a newline, leaving a blank line after each patch.
    Commits with no diff keep a bare COMMIT_END. The last commit edits a
    file whose content quotes the delimiters.
    """
    return (
        "COMMIT_START\n"
        "SHA: 1111111111111111111111111111111111111111\n"
        "Author: Ada Lovelace <ada@example.com>\n"
        "Date: 2024-02-01 09:00:00 +0000\n"
        "Message: Rename parser module\n"
        "Longer explanation of the change.\n"
        "\n"
        "Refs #12\n"
        "\n"
        "COMMIT_END---\n"
        " docs/logo.png              | Bin 0 -> 1534 bytes\n"
        " src/{old => new}/parser.py |   3 ++-\n"
        " 2 files changed, 2 insertions(+), 1 deletion(-)\n"
        "\n"
        "diff --git a/docs/logo.png b/docs/logo.png\n"
        "new file mode 100644\n"
        "index 0000000..4b825dc\n"
        "Binary files /dev/null and b/docs/logo.png differ\n"
        "diff --git a/src/old/parser.py b/src/new/parser.py\n"
        "similarity index 67%\n"
        "rename from src/old/parser.py\n"
        "rename to src/new/parser.py\n"
        "index 8f3c1d2..a41b9e0 100644\n"
        "--- a/src/old/parser.py\n"
        "+++ b/src/new/parser.py\n"
        "@@ -1,2 +1,3 @@\n"
        "-import os\n"
        "+import re\n"
        "+import sys\n"
        " import json\n"
        "\n"
        "COMMIT_START\n"
        "SHA: 2222222222222222222222222222222222222222\n"
        "Author: Grace Hopper <grace@example.com>\n"
        "Date: 2024-02-02 10:00:00 +0000\n"
        "Message: Drop legacy shim\n"
        "\n"
        "COMMIT_END---\n"
        " legacy.py | 4 ----\n"
        " 1 file changed, 4 deletions(-)\n"
        "\n"
        "diff --git a/legacy.py b/legacy.py\n"
        "deleted file mode 100644\n"
        "index 4b825dc..0000000\n"
        "--- a/legacy.py\n"
        "+++ /dev/null\n"
        "@@ -1,4 +0,0 @@\n"
        "-a\n"
        "-b\n"
        "-c\n"
        "-d\n"
        "\n"
        "COMMIT_START\n"
        "SHA: 3333333333333333333333333333333333333333\n"
        "Author: Ada Lovelace <ada@example.com>\n"
        "Date: 2024-02-03 11:00:00 +0000\n"
        "Message: Record release\n"
        "\n"
        "COMMIT_END\n"
        "COMMIT_START\n"
        "SHA: 4444444444444444444444444444444444444444\n"
        "Author: Grace Hopper <grace@example.com>\n"
        "Date: 2024-02-04 12:00:00 +0000\n"
        "Message: Extend sample log fixture\n"
        "\n"
        "COMMIT_END---\n"
        " tests/sample_log.txt | 1 +\n"
        " 1 file changed, 1 insertion(+)\n"
        "\n"
        "diff --git a/tests/sample_log.txt b/tests/sample_log.txt\n"
        "index 1a2b3c4..5d6e7f8 100644\n"
        "--- a/tests/sample_log.txt\n"
        "+++ b/tests/sample_log.txt\n"
        "@@ -1,3 +1,4 @@\n"
        " COMMIT_START\n"
        " SHA: 9999999999999999999999999999999999999999\n"
        "+Message: fixture\n"
        " COMMIT_END\n"
    )


@pytest.fixture
def log_file(tmp_path, three_commit_log):
    path = tmp_path / "my_repo_git-log.txt"
    path.write_text(three_commit_log, encoding="utf-8")
    return path
