"""
Process wide vcgencmd bindings.

Call configure() once at startup to switch between direct, elevated (sudo) or
test double invocation, every module level function uses that instance.
"""
import logging
from typing import Optional

from vcgencmd.custom_types import ClockSrc, Cmd, MemSrc, Src, VoltSrc
from vcgencmd.dataclasses import ThrottledStatus
from vcgencmd.Runner import Runner, SubprocessRunner
from vcgencmd.Settings import Settings
from vcgencmd.Vcgencmd import Vcgencmd

_default = Vcgencmd()


def configure(
    runner: Optional[Runner] = None,
    settings: Optional[Settings] = None
) -> Vcgencmd:
    global _default

    if runner is not None and settings is not None:
        raise ValueError("Pass either a runner or settings, not both")

    if runner is None:
        runner = SubprocessRunner.from_settings(settings) if settings else SubprocessRunner()

    logging.debug("Using %r", runner)
    _default = Vcgencmd(runner)

    return _default


def get_default() -> Vcgencmd:
    return _default


def exec_command(cmd: Cmd, src: Optional[Src] = None) -> str:
    return _default.exec_command(cmd, src)


def measure_clock(src: ClockSrc) -> int:
    return _default.measure_clock(src)


def measure_volts(src: VoltSrc) -> float:
    return _default.measure_volts(src)


def measure_temp() -> float:
    return _default.measure_temp()


def get_mem(src: MemSrc) -> int:
    return _default.get_mem(src)


def get_throttled() -> int:
    return _default.get_throttled()


def get_throttled_status() -> ThrottledStatus:
    return _default.get_throttled_status()
