"""
Bindings for the Raspberry Pi's vcgencmd cli utility.

Every call spawns exactly one vcgencmd process through the configured Runner,
and parses its single line of output.
"""
import logging
from typing import Optional, Type

from vcgencmd import parsers
from vcgencmd.custom_types import ClockSrc, Cmd, MemSrc, Src, VoltSrc
from vcgencmd.dataclasses import ThrottledStatus
from vcgencmd.helper import build_arguments, decode_throttled
from vcgencmd.Runner import Runner, SubprocessRunner


class Vcgencmd:
    def __init__(self, runner: Optional[Runner] = None) -> None:
        self.runner: Runner = runner if runner is not None else SubprocessRunner()

    def exec_command(self, cmd: Cmd, src: Optional[Src] = None) -> str:
        """Execute the given command and return its stdout without modifying it."""
        output = self.runner.run(build_arguments(cmd, src))
        logging.debug("%s -> %r", cmd.value, output)

        return output

    def measure_clock(self, src: ClockSrc) -> int:
        """Frequency of the given clock in Hz."""
        self._check_src(src, ClockSrc)
        return parsers.frequency(self.exec_command(Cmd.MEASURE_CLOCK, src))

    def measure_volts(self, src: VoltSrc) -> float:
        """Voltage of the given rail in V."""
        self._check_src(src, VoltSrc)
        return parsers.volts(self.exec_command(Cmd.MEASURE_VOLTS, src))

    def measure_temp(self) -> float:
        """SoC temperature in degrees Celsius."""
        return parsers.temp(self.exec_command(Cmd.MEASURE_TEMP))

    def get_mem(self, src: MemSrc) -> int:
        """Memory split of the given pool in MB."""
        self._check_src(src, MemSrc)
        return parsers.mem(self.exec_command(Cmd.GET_MEM, src))

    def get_throttled(self) -> int:
        """Raw throttled bit pattern, see ThrottledStatus for its meaning."""
        return parsers.throttled(self.exec_command(Cmd.GET_THROTTLED))

    def get_throttled_status(self) -> ThrottledStatus:
        return decode_throttled(self.get_throttled())

    def _check_src(self, src: Src, expected: Type[Src]) -> None:
        if not isinstance(src, expected):
            raise TypeError(f"Expected {expected.__name__}, got {src!r}")
