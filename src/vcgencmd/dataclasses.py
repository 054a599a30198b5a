"""Dataclasses for vcgencmd results."""
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Optional


# Bit positions in the get_throttled word, bits 0-3 are current conditions,
# bits 16-19 the same conditions since last reboot.
THROTTLED_BITS: Dict[str, int] = {
    "under_voltage": 0,
    "arm_frequency_capped": 1,
    "currently_throttled": 2,
    "soft_temp_limit_active": 3,
    "under_voltage_occurred": 16,
    "throttling_occurred": 17,
    "arm_frequency_cap_occurred": 18,
    "soft_temp_limit_occurred": 19,
}


@dataclass(frozen=True)
class ThrottledStatus:
    """
    Interpretation of the bit pattern returned by get_throttled:

        11110000000000001010
        ||||            ||||_ under-voltage
        ||||            |||_ arm frequency capped
        ||||            ||_ currently throttled
        ||||            |_ soft temperature limit active
        ||||_ under-voltage has occurred since last reboot
        |||_ throttling has occurred since last reboot
        ||_ arm frequency capped has occurred since last reboot
        |_ soft temperature limit has occurred since last reboot

    Bit positions follow the firmware documentation, history flags start at
    bit 16 (a 21 digit pattern does not line up with this diagram).
    This interpretation might be outdated for other firmware versions.
    """
    under_voltage: bool = False
    arm_frequency_capped: bool = False
    currently_throttled: bool = False
    soft_temp_limit_active: bool = False
    under_voltage_occurred: bool = False
    throttling_occurred: bool = False
    arm_frequency_cap_occurred: bool = False
    soft_temp_limit_occurred: bool = False

    @classmethod
    def from_bit_pattern(cls, pattern: int) -> 'ThrottledStatus':
        """Decode a get_throttled word, reserved bits are ignored."""
        return cls(**{
            name: bool(pattern & (1 << bit))
            for name, bit in THROTTLED_BITS.items()
        })

    def to_bit_pattern(self) -> int:
        pattern = 0
        for name, bit in THROTTLED_BITS.items():
            if getattr(self, name):
                pattern |= (1 << bit)
        return pattern

    def to_byte(self) -> int:
        """Pack flags into a single byte (lower nibble=current, upper=history)."""
        pattern = self.to_bit_pattern()
        return (pattern & 0x0F) | (((pattern >> 16) & 0x0F) << 4)

    @classmethod
    def from_byte(cls, byte: int) -> 'ThrottledStatus':
        """Parse flags from byte value."""
        return cls.from_bit_pattern((byte & 0x0F) | (((byte >> 4) & 0x0F) << 16))

    def as_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class VcgencmdState:
    """Snapshot of the values polled by VcgencmdTelemetry."""
    temperature: float = 0.0
    arm_frequency: int = 0
    core_frequency: int = 0
    core_volts: float = 0.0
    arm_memory: int = 0
    gpu_memory: int = 0
    throttled: int = 0
    throttled_status: ThrottledStatus = field(default_factory=ThrottledStatus)
    updated_at: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
