from enum import Enum
from typing import Union


class Cmd(Enum):
    GET_MEM = "get_mem"
    GET_THROTTLED = "get_throttled"
    MEASURE_CLOCK = "measure_clock"
    MEASURE_TEMP = "measure_temp"
    MEASURE_VOLTS = "measure_volts"


class ClockSrc(Enum):
    ARM = "arm"
    CORE = "core"
    DPI = "dpi"
    EMMC = "emmc"
    H264 = "h264"
    HDMI = "hdmi"
    ISP = "isp"
    PIXEL = "pixel"
    PWM = "pwm"
    UART = "uart"
    V3D = "v3d"
    VEC = "vec"


class VoltSrc(Enum):
    CORE = "core"
    SDRAM_C = "sdram_c"
    SDRAM_I = "sdram_i"
    SDRAM_P = "sdram_p"


class MemSrc(Enum):
    ARM = "arm"
    GPU = "gpu"


Src = Union[ClockSrc, VoltSrc, MemSrc]
