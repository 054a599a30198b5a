from .exceptions import (
    VcgencmdError,
    LaunchError,
    FormatError,
    NumericConversionError,
    ParseFloatError,
    ParseIntError,
)
from .custom_types import Cmd, ClockSrc, VoltSrc, MemSrc, Src
from .dataclasses import ThrottledStatus, VcgencmdState
from .helper import resolve_command, resolve_src, build_arguments, decode_throttled
from .Runner import Runner, SubprocessRunner
from .Settings import Settings
from .Vcgencmd import Vcgencmd
from .TelemetrySource import TelemetrySource
from .VcgencmdTelemetry import VcgencmdTelemetry
from .api import (
    configure,
    get_default,
    exec_command,
    measure_clock,
    measure_volts,
    measure_temp,
    get_mem,
    get_throttled,
    get_throttled_status,
)

__all__ = [
  'VcgencmdError',
  'LaunchError',
  'FormatError',
  'NumericConversionError',
  'ParseFloatError',
  'ParseIntError',
  'Cmd',
  'ClockSrc',
  'VoltSrc',
  'MemSrc',
  'Src',
  'ThrottledStatus',
  'VcgencmdState',
  'resolve_command',
  'resolve_src',
  'build_arguments',
  'decode_throttled',
  'Runner',
  'SubprocessRunner',
  'Settings',
  'Vcgencmd',
  'TelemetrySource',
  'VcgencmdTelemetry',
  'configure',
  'get_default',
  'exec_command',
  'measure_clock',
  'measure_volts',
  'measure_temp',
  'get_mem',
  'get_throttled',
  'get_throttled_status',
]
