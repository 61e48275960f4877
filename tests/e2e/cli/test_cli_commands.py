"""End-to-end tests for the handykit text-utility commands."""

import hashlib
from pathlib import Path

import pytest

from handykit.entrypoints.cli.main import handykit

# pylint: disable=unused-argument

CONTENT = b"hello world"
DIGEST = hashlib.sha256(CONTENT).hexdigest()


# ============================================================================
#                                   slug
# ============================================================================


class TestSlug:
    """Tests for `handykit slug`."""

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["Hello World!!!"], "hello-world"),
            (["Café", "&", "Restaurant"], "cafe-restaurant"),
            (["My File.txt", "--allow-dots"], "my-file.txt"),
            (["Hello World", "--separator", "_"], "hello_world"),
            (["Hello World", "-s", ""], "helloworld"),
        ],
    )
    def test_converts(runner, args, expected) -> None:
        """The slug is printed alone on stdout."""
        result = runner.invoke(handykit, ["slug", *args])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    @staticmethod
    def test_existing_slugs(runner) -> None:
        """--existing makes the result unique."""
        result = runner.invoke(
            handykit, ["slug", "Post", "-e", "post", "-e", "post-1", "--existing", "post-2"]
        )
        assert result.exit_code == 0
        assert result.stdout == "post-3\n"

    @staticmethod
    def test_empty_result_warns(runner) -> None:
        """Input without letters or digits warns on stderr and prints an empty line."""
        result = runner.invoke(handykit, ["slug", "!!!"])
        assert result.exit_code == 0
        assert result.stdout == "\n"
        assert "the slug is empty" in result.stderr

    @staticmethod
    def test_separator_from_env(runner) -> None:
        """HANDYKIT_SLUG_SEPARATOR replaces the default separator."""
        result = runner.invoke(
            handykit, ["slug", "Hello World"], env={"HANDYKIT_SLUG_SEPARATOR": "~"}
        )
        assert result.exit_code == 0
        assert result.stdout == "hello~world\n"

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "env"),
        [
            (["--separator", "x"], {}),
            ([], {"HANDYKIT_SLUG_SEPARATOR": "1"}),
            (["--separator", "é"], {}),
        ],
        ids=["cli-flag", "env-var", "accented"],
    )
    def test_unusable_separator_is_rejected(runner, args, env) -> None:
        """A separator that conversion would rewrite is a usage error."""
        result = runner.invoke(handykit, ["slug", "Hello World", *args], env=env)
        assert result.exit_code == 2
        assert "separator must not contain ASCII letters or digits" in result.output

    @staticmethod
    def test_text_is_required(runner) -> None:
        """At least one word is needed."""
        result = runner.invoke(handykit, ["slug"])
        assert result.exit_code == 2


class TestCheckSlug:
    """Tests for `handykit check-slug`."""

    @staticmethod
    @pytest.mark.parametrize(
        "args", [["hello-world"], ["file.txt", "--allow-dots"], ["a_b", "-s", "_"]]
    )
    def test_valid(runner, args) -> None:
        """Valid slugs exit 0 with a success line on stderr."""
        result = runner.invoke(handykit, ["check-slug", *args])
        assert result.exit_code == 0
        assert "is a valid slug" in result.stderr
        assert result.stdout == ""

    @staticmethod
    @pytest.mark.parametrize("args", [["Hello World"], ["hello--world"], ["file.txt"]])
    def test_invalid(runner, args) -> None:
        """Invalid slugs exit 1 with an error line on stderr."""
        result = runner.invoke(handykit, ["check-slug", *args])
        assert result.exit_code == 1
        assert "is not a valid slug" in result.stderr


# ============================================================================
#                                   name
# ============================================================================


class TestName:
    """Tests for `handykit name`."""

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["  John   Doe  "], "John Doe"),
            (["John", "Doe!"], "John Doe"),
            (["Jean - Luc", "--allow", "-"], "Jean-Luc"),
            (["John . Doe", "-a", " ", "-a", "."], "John Doe"),
        ],
    )
    def test_normalizes(runner, args, expected) -> None:
        """The normalized name is printed on stdout."""
        result = runner.invoke(handykit, ["name", *args])
        assert result.exit_code == 0
        assert result.stdout == f"{expected}\n"

    @staticmethod
    def test_empty_result_warns(runner) -> None:
        """Nothing usable warns on stderr."""
        result = runner.invoke(handykit, ["name", "@@@"])
        assert result.exit_code == 0
        assert "the name is empty" in result.stderr


class TestCheckName:
    """Tests for `handykit check-name`."""

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "exit_code"),
        [
            (["John Doe"], 0),
            (["John  Doe"], 1),
            (["Jean-Luc", "--allow", "-"], 0),
            (["Jean-Luc"], 1),
        ],
    )
    def test_verdict(runner, args, exit_code) -> None:
        """The exit status reflects validity."""
        result = runner.invoke(handykit, ["check-name", *args])
        assert result.exit_code == exit_code
        verdict = "is a valid name" if exit_code == 0 else "is not a valid name"
        assert verdict in result.stderr


# ============================================================================
#                               hashed-filename
# ============================================================================


@pytest.fixture
def sample(tmp_path) -> Path:
    """A file with known content."""
    path = tmp_path / "My Image.PNG"
    path.write_bytes(CONTENT)
    return path


class TestHashedFilename:
    """Tests for `handykit hashed-filename`."""

    @staticmethod
    def test_default(runner, sample) -> None:
        """The sanitized name gets the first 8 digest digits."""
        result = runner.invoke(handykit, ["hashed-filename", str(sample)])
        assert result.exit_code == 0
        assert result.stdout == f"my-image.{DIGEST[:8]}.PNG\n"

    @staticmethod
    def test_hash_length_and_name(runner, sample) -> None:
        """--hash-length and --name override the defaults."""
        result = runner.invoke(
            handykit, ["hashed-filename", str(sample), "-n", "12", "--name", "Cover Art.jpg"]
        )
        assert result.exit_code == 0
        assert result.stdout == f"cover-art.{DIGEST[:12]}.jpg\n"

    @staticmethod
    def test_hash_length_from_env(runner, sample) -> None:
        """HANDYKIT_HASH_LENGTH is used when --hash-length is absent."""
        result = runner.invoke(
            handykit, ["hashed-filename", str(sample)], env={"HANDYKIT_HASH_LENGTH": "4"}
        )
        assert result.exit_code == 0
        assert result.stdout == f"my-image.{DIGEST[:4]}.PNG\n"

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "env", "message"),
        [
            (["-n", "0"], {}, "Hash length must be between 1 and 64"),
            (["-n", "65"], {}, "Hash length must be between 1 and 64"),
            ([], {"HANDYKIT_HASH_LENGTH": "lots"}, "HANDYKIT_HASH_LENGTH"),
        ],
    )
    def test_bad_hash_length(runner, sample, args, env, message) -> None:
        """Bad lengths are reported as errors with exit status 1."""
        result = runner.invoke(handykit, ["hashed-filename", str(sample), *args], env=env)
        assert result.exit_code == 1
        assert message in result.stderr

    @staticmethod
    def test_missing_file(runner, tmp_path) -> None:
        """A missing path is a usage error."""
        result = runner.invoke(handykit, ["hashed-filename", str(tmp_path / "nope.bin")])
        assert result.exit_code == 2
