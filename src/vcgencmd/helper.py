from typing import List, Optional

from vcgencmd.custom_types import Cmd, Src
from vcgencmd.dataclasses import ThrottledStatus


def resolve_command(cmd: Cmd) -> str:
    return cmd.value


def resolve_src(src: Optional[Src]) -> Optional[str]:
    if src is None:
        return None

    return src.value


def build_arguments(cmd: Cmd, src: Optional[Src] = None) -> List[str]:
    arguments = [resolve_command(cmd)]

    source = resolve_src(src)
    if source:
        arguments.append(source)

    return arguments


def decode_throttled(bit_pattern: int) -> ThrottledStatus:
    return ThrottledStatus.from_bit_pattern(bit_pattern)
