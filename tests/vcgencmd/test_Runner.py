"""Tests for SubprocessRunner with mocked subprocess."""
import shutil
import subprocess
import unittest
from unittest.mock import patch

from vcgencmd import LaunchError, ParseFloatError, Runner, SubprocessRunner, parsers


class TestSubprocessRunner(unittest.TestCase):
    def setUp(self):
        self.check_output_patcher = patch('subprocess.check_output')
        self.mock_check_output = self.check_output_patcher.start()

    def tearDown(self):
        self.check_output_patcher.stop()

    def test_implements_protocol(self):
        assert isinstance(SubprocessRunner(), Runner)

    def test_run_returns_stdout_unmodified(self):
        self.mock_check_output.return_value = "temp=42.8'C\n"

        output = SubprocessRunner().run(["measure_temp"])

        assert output == "temp=42.8'C\n"

    def test_run_direct_invocation(self):
        self.mock_check_output.return_value = "arm=448M\n"

        SubprocessRunner().run(["get_mem", "arm"])

        args, kwargs = self.mock_check_output.call_args
        assert args[0] == ["vcgencmd", "get_mem", "arm"]
        assert kwargs["text"] is True
        assert kwargs["stderr"] == subprocess.PIPE
        assert kwargs["timeout"] is None

    def test_run_decodes_output_lossily(self):
        self.mock_check_output.return_value = "temp=42.8'C\n"

        SubprocessRunner().run(["measure_temp"])

        _, kwargs = self.mock_check_output.call_args
        assert kwargs["errors"] == "replace"

    def test_run_through_sudo(self):
        self.mock_check_output.return_value = "throttled=0x0\n"

        SubprocessRunner(sudo=True).run(["get_throttled"])

        args, _ = self.mock_check_output.call_args
        assert args[0] == ["sudo", "vcgencmd", "get_throttled"]

    def test_custom_binaries_and_timeout(self):
        runner = SubprocessRunner(
            binary="/usr/bin/vcgencmd",
            sudo=True,
            sudo_binary="doas",
            timeout=2.5
        )
        self.mock_check_output.return_value = ""

        runner.run(["measure_temp"])

        args, kwargs = self.mock_check_output.call_args
        assert args[0] == ["doas", "/usr/bin/vcgencmd", "measure_temp"]
        assert kwargs["timeout"] == 2.5

    def test_missing_binary_raises_launch_error(self):
        self.mock_check_output.side_effect = FileNotFoundError(2, "No such file or directory")

        with self.assertRaises(LaunchError) as context:
            SubprocessRunner().run(["measure_temp"])

        error = context.exception
        assert error.command == ["vcgencmd", "measure_temp"]
        assert isinstance(error.__cause__, FileNotFoundError)
        assert "No such file or directory" in str(error)

    def test_permission_denied_raises_launch_error(self):
        self.mock_check_output.side_effect = PermissionError(13, "Permission denied")

        with self.assertRaises(LaunchError):
            SubprocessRunner().run(["measure_temp"])

    def test_non_zero_exit_raises_launch_error(self):
        self.mock_check_output.side_effect = subprocess.CalledProcessError(
            255, ["vcgencmd", "measure_temp"], output="", stderr="VCHI initialization failed\n"
        )

        with self.assertRaises(LaunchError) as context:
            SubprocessRunner().run(["measure_temp"])

        assert context.exception.returncode == 255
        assert context.exception.stderr == "VCHI initialization failed\n"
        assert "exit status 255" in str(context.exception)

    def test_timeout_raises_launch_error(self):
        self.mock_check_output.side_effect = subprocess.TimeoutExpired(["vcgencmd"], 1.0)

        with self.assertRaises(LaunchError) as context:
            SubprocessRunner(timeout=1.0).run(["measure_temp"])

        assert "timed out" in context.exception.reason


class TestSubprocessRunnerFromSettings(unittest.TestCase):
    def test_defaults(self):
        runner = SubprocessRunner.from_settings({})

        assert runner.command(["measure_temp"]) == ["vcgencmd", "measure_temp"]
        assert runner.timeout is None

    def test_from_settings(self):
        settings = {
            "vcgencmd": {
                "binary": "/opt/vc/bin/vcgencmd",
                "sudo": True,
                "sudo_binary": "sudo",
                "timeout": 3,
            }
        }

        runner = SubprocessRunner.from_settings(settings)

        assert runner.command(["get_throttled"]) == ["sudo", "/opt/vc/bin/vcgencmd", "get_throttled"]
        assert runner.timeout == 3

    def test_zero_timeout_means_no_timeout(self):
        runner = SubprocessRunner.from_settings({"vcgencmd": {"timeout": 0}})

        assert runner.timeout is None


@unittest.skipIf(shutil.which("printf") is None, "printf not available")
class TestSubprocessRunnerInvalidUtf8(unittest.TestCase):
    """Runs a real process that writes a byte which is not valid UTF-8."""

    def test_invalid_utf8_is_replaced(self):
        output = SubprocessRunner(binary="printf").run(["temp=4\\3772'C"])

        assert output == "temp=4\ufffd2'C"

    def test_invalid_utf8_fails_as_number_error(self):
        output = SubprocessRunner(binary="printf").run(["temp=4\\3772'C"])

        with self.assertRaises(ParseFloatError):
            parsers.temp(output)


if __name__ == "__main__":
    unittest.main()
