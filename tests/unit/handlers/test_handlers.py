# tests/unit/handlers/test_handlers.py

import io
from unittest.mock import MagicMock

import pytest

from qiish_args.exceptions import FileSystemError, QiishArgsError
from qiish_args.handlers import handle_command, handle_file, handle_interactive


class TestHandleCommand:
    """Test the --command handler."""

    def test_prints_text_result(self, base_namespace, capsys):
        """Test text output for a single line."""
        assert handle_command(base_namespace(command="ls -la /tmp")) is True
        out = capsys.readouterr().out
        assert out == 'Args : ["ls", "/tmp"]\nFlags: ["l", "a"]\n'

    def test_prints_json_result(self, base_namespace, capsys):
        """Test JSON output for a single line."""
        handle_command(base_namespace(command='echo "a b" --n', format="json"))
        out = capsys.readouterr().out
        assert out == '{"args": ["echo", "a b"], "flags": ["n"]}\n'

    def test_legacy_rules(self, base_namespace, capsys):
        """Test that --legacy drops the quoted span."""
        handle_command(base_namespace(command='echo "a b" --n', format="json", legacy=True))
        out = capsys.readouterr().out
        assert out == '{"args": ["echo"], "flags": ["n"]}\n'

    def test_unexpected_error_is_wrapped(self, base_namespace, mocker, capsys):
        """Test that unexpected errors become QiishArgsError."""
        mocker.patch("qiish_args.handlers.command.tokenize", side_effect=RuntimeError("boom"))
        with pytest.raises(QiishArgsError, match="Failed to tokenize input: boom") as exc_info:
            handle_command(base_namespace(command="ls"))
        assert exc_info.value.details["handler"] == "handle_command"
        assert "Error: Failed to tokenize input: boom" in capsys.readouterr().err


class TestHandleFile:
    """Test the --file handler."""

    def test_one_result_per_line(self, base_namespace, input_file, capsys):
        """Test that every line, blank ones included, gets a result."""
        assert handle_file(base_namespace(file=str(input_file), format="json")) is True
        out = capsys.readouterr().out.splitlines()
        assert out == [
            '{"args": ["ls"], "flags": ["l", "a"]}',
            '{"args": [], "flags": []}',
            '{"args": ["echo", "hi there"], "flags": ["now"]}',
        ]

    def test_undecodable_file_raises_filesystem_error(self, base_namespace, tmp_path, capsys):
        """Test that a file that is not UTF-8 is reported."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(FileSystemError, match="Failed to read") as exc_info:
            handle_file(base_namespace(file=str(path)))
        assert exc_info.value.details["path"] == str(path)
        assert "Could not read input file" in capsys.readouterr().err

    def test_unreadable_file(self, base_namespace, mocker):
        """Test that OS errors are reported as FileSystemError."""
        mocker.patch("builtins.open", side_effect=PermissionError("denied"))
        with pytest.raises(FileSystemError, match="denied"):
            handle_file(base_namespace(file="locked.txt"))


class TestHandleInteractive:
    """Test the interactive handler."""

    def test_reads_until_eof_from_pipe(self, base_namespace, capsys):
        """Test line-by-line tokenizing of a non-terminal stream."""
        stream = io.StringIO('ls -a\r\n"x y"\n')
        assert handle_interactive(base_namespace(format="json"), stream=stream) is True
        out = capsys.readouterr().out.splitlines()
        assert out == [
            '{"args": ["ls"], "flags": ["a"]}',
            '{"args": ["x y"], "flags": []}',
        ]

    def test_empty_stream(self, base_namespace, capsys):
        """Test that an empty stream produces no output."""
        assert handle_interactive(base_namespace(), stream=io.StringIO("")) is True
        assert capsys.readouterr().out == ""

    def test_terminal_reads_given_stream_with_prompt(self, base_namespace, mocker, capsys):
        """Test that a terminal stream is read directly, with the qiish prompt shown."""
        stream = MagicMock()
        stream.isatty.return_value = True
        stream.readline.side_effect = ["-v\n", ""]
        mock_input = mocker.patch("builtins.input")

        handle_interactive(base_namespace(), stream=stream)

        mock_input.assert_not_called()
        assert stream.readline.call_count == 2
        assert capsys.readouterr().out == 'qiish> Args : []\nFlags: ["v"]\nqiish> \n'

    def test_keyboard_interrupt_propagates(self, base_namespace):
        """Test that Ctrl-C is not wrapped."""
        stream = MagicMock()
        stream.isatty.return_value = True
        stream.readline.side_effect = KeyboardInterrupt()
        with pytest.raises(KeyboardInterrupt):
            handle_interactive(base_namespace(), stream=stream)
