import time
from typing import Optional

from vcgencmd.custom_types import ClockSrc, MemSrc, VoltSrc
from vcgencmd.dataclasses import VcgencmdState
from vcgencmd.helper import decode_throttled
from vcgencmd.TelemetrySource import TelemetrySource
from vcgencmd.Vcgencmd import Vcgencmd


class VcgencmdTelemetry(TelemetrySource):
    def __init__(self, vcgencmd: Optional[Vcgencmd] = None):
        self._vcgencmd = vcgencmd if vcgencmd is not None else Vcgencmd()
        self._state = VcgencmdState()

    def update(self) -> None:
        """
        Poll all values, the previous state is kept if any command fails.
        """
        vc = self._vcgencmd
        throttled = vc.get_throttled()

        self._state = VcgencmdState(
            temperature=vc.measure_temp(),
            arm_frequency=vc.measure_clock(ClockSrc.ARM),
            core_frequency=vc.measure_clock(ClockSrc.CORE),
            core_volts=vc.measure_volts(VoltSrc.CORE),
            arm_memory=vc.get_mem(MemSrc.ARM),
            gpu_memory=vc.get_mem(MemSrc.GPU),
            throttled=throttled,
            throttled_status=decode_throttled(throttled),
            updated_at=time.time(),
        )

    def get_state(self) -> VcgencmdState:
        return self._state

    def get_byte(self) -> int:
        """Return throttle flags packed as a byte for telemetry transmission."""
        return self._state.throttled_status.to_byte()
