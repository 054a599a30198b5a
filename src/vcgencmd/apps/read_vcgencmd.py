import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional, Sequence

from vcgencmd import (
    ClockSrc,
    MemSrc,
    Settings,
    SubprocessRunner,
    TelemetrySource,
    Vcgencmd,
    VcgencmdError,
    VcgencmdTelemetry,
    VoltSrc,
    decode_throttled,
)


actions = [
    'measure_clock',
    'measure_volts',
    'measure_temp',
    'get_mem',
    'get_throttled',
    'snapshot',
    'init_config',
]

sources = {
    'measure_clock': ClockSrc,
    'measure_volts': VoltSrc,
    'get_mem': MemSrc,
}


def setup_logging(name: str) -> None:
    level = getattr(logging, str(name).upper(), None)

    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


def run_action(vc: Vcgencmd, action: str, source: Any, decode: bool) -> Dict[str, Any]:
    if action == 'measure_clock':
        return {'source': source.value, 'frequency': vc.measure_clock(source)}

    elif action == 'measure_volts':
        return {'source': source.value, 'volts': vc.measure_volts(source)}

    elif action == 'measure_temp':
        return {'temp': vc.measure_temp()}

    elif action == 'get_mem':
        return {'source': source.value, 'mem': vc.get_mem(source)}

    elif action == 'get_throttled':
        throttled = vc.get_throttled()
        response: Dict[str, Any] = {'throttled': hex(throttled)}
        if decode:
            response['status'] = decode_throttled(throttled).as_dict()
        return response

    return poll(VcgencmdTelemetry(vc))


def poll(source: TelemetrySource) -> Dict[str, Any]:
    source.update()
    state = source.get_state().as_dict()
    # Same form as get_throttled
    state['throttled'] = hex(state['throttled'])
    return state


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Query the Raspberry Pi firmware through vcgencmd.")
    parser.add_argument('action', choices=actions, help='Action to perform')
    parser.add_argument('source', nargs='?', help='Clock, voltage rail or memory pool')
    parser.add_argument('--config', default=None, help='Path to TOML config file')
    parser.add_argument('--sudo', action='store_true', help='Run vcgencmd through sudo')
    parser.add_argument('--decode', action='store_true', help='Decode get_throttled flags')
    parser.add_argument(
        "--log", default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). (default: ERROR)"
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings(args.config or "vcgencmd.toml")
        setup_logging(args.log or settings.get("log_level", "ERROR"))
    except ValueError as e:
        parser.error(str(e))

    if args.action == 'init_config':
        settings.save()
        print(json.dumps({'config': str(settings.path)}))
        return 0

    source = None
    if args.action in sources:
        family = sources[args.action]
        choices = [member.value for member in family]
        if args.source not in choices:
            parser.error(f"{args.action} requires a source: {', '.join(choices)}")
        source = family(args.source)

    elif args.source:
        parser.error(f"{args.action} takes no source")

    runner = SubprocessRunner.from_settings(settings)
    if args.sudo:
        runner.sudo = True

    try:
        response = run_action(Vcgencmd(runner), args.action, source, args.decode)
    except VcgencmdError as e:
        logging.debug("%s failed", args.action, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
