from typing import Optional, Sequence


class VcgencmdError(Exception):
    pass


class LaunchError(VcgencmdError):
    """Raised when vcgencmd could not be started or terminated abnormally."""
    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None
    ):
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Failed to run {' '.join(self.command)}: {reason}")


class FormatError(VcgencmdError):
    """Raised when the output is not of the form 'key=value'."""
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Unexpected vcgencmd output: {raw!r}")


class NumericConversionError(VcgencmdError, ValueError):
    kind = "number"

    def __init__(self, raw: str, value: str):
        self.raw = raw
        self.value = value
        super().__init__(f"Could not parse {value!r} as {self.kind} (output: {raw!r})")


class ParseFloatError(NumericConversionError):
    kind = "float"


class ParseIntError(NumericConversionError):
    kind = "integer"
