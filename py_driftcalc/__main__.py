import argparse
import json
import logging
import os
import sys
from importlib import metadata

from py_driftcalc.logger import logger
from py_driftcalc.config import load_config
from py_driftcalc.exceptions import InvalidInputError, SolverRuntimeError
from py_driftcalc.interface import Calculator
from py_driftcalc.shot import TrajectoryInput
from py_driftcalc.trajectory_data import HitResult

version = metadata.version("py_driftcalc")

TABLE_HEADER = ('Distance', 'Velocity', 'Energy', 'Drop', 'Drift', 'Time', 'MOA', 'MIL')


def add_cartridge_group(parser):
    cartridge = parser.add_argument_group('Cartridge', 'Bullet and muzzle parameters')
    cartridge.add_argument("-mv", "--mv", type=float, help="Muzzle velocity, m/s")
    cartridge.add_argument("-w", "--weight", type=float, help="Bullet weight, grams")
    cartridge.add_argument("-bc", "--bc", type=float, help="G1 ballistic coefficient")


def add_geometry_group(parser):
    geometry = parser.add_argument_group('Geometry', 'Sight and distances')
    geometry.add_argument("-zd", "--zero", type=float, default=100.0, help="Zero range, m (default 100)")
    geometry.add_argument("-sd", "--range", type=float, default=500.0, help="Target distance, m (default 500)")
    geometry.add_argument("-sh", "--sight-height", type=float, default=38.0,
                          help="Sight height above bore, mm (default 38)")


def add_atmo_group(parser):
    atmo = parser.add_argument_group('Atmosphere', 'Current atmosphere parameters')
    atmo.add_argument("-at", "--temperature", type=float, default=15.0, help="Temperature, °C (default 15)")
    atmo.add_argument("-aa", "--altitude", type=float, default=0.0, help="Altitude, m (default 0)")


def add_wind_group(parser):
    wind = parser.add_argument_group('Wind', 'Shot wind data')
    wind.add_argument("-wv", "--wind-speed", type=float, default=0.0, help="Wind speed, m/s (default 0)")
    wind.add_argument("-wd", "--wind-angle", type=float, default=90.0,
                      help="Wind direction, degrees; 0 = headwind (default 90)")


def get_arg_parser():
    parser = argparse.ArgumentParser(
        prog=f'pydc v{version}',
        description="Tool for small arms drift and drop tables"
    )
    parser.add_argument("-v", "--version", action='version',
                        version=f'pydc v{version}', help="Show version")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug messages")
    parser.add_argument("-c", "--config", action="store", help="Path to a pydc TOML config file")

    commands = parser.add_subparsers(dest="command", required=True)

    calc = commands.add_parser("calc", help="Compute a trajectory table")
    calc.add_argument("-i", "--input", action="store", help="JSON file with the input record")
    calc.add_argument("--json", action="store_true", help="Print the table as JSON")
    add_cartridge_group(calc)
    add_geometry_group(calc)
    add_atmo_group(calc)
    add_wind_group(calc)

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0", help="Bind address")
    serve.add_argument("--port", type=int, default=None, help="Port, defaults to $PORT or 8080")
    return parser


def build_input(argv) -> TrajectoryInput:
    if argv.input:
        with open(argv.input, "r", encoding="utf-8") as fp:
            return TrajectoryInput.from_dict(json.load(fp))
    for name in ('mv', 'weight', 'bc'):
        if getattr(argv, name) is None:
            raise InvalidInputError(name, None, "is required without --input")
    return TrajectoryInput(
        muzzle_velocity=argv.mv,
        bullet_weight=argv.weight,
        ballistic_coefficient=argv.bc,
        zero_range=argv.zero,
        target_distance=argv.range,
        wind_speed=argv.wind_speed,
        wind_angle=argv.wind_angle,
        sight_height=argv.sight_height,
        temperature=argv.temperature,
        altitude=argv.altitude,
    )


def format_table(hit_result: HitResult) -> str:
    rows = [TABLE_HEADER] + [p.formatted() for p in hit_result]
    widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_HEADER))]
    lines = ["  ".join(cell.rjust(width) for cell, width in zip(row, widths)) for row in rows]
    lines.insert(1, "  ".join("-" * width for width in widths))
    return "\n".join(lines)


def main(args=None) -> int:
    parser = get_arg_parser()
    argv = parser.parse_args(args)

    if argv.debug:
        logger.setLevel(logging.DEBUG)
        logger.info("Debug messages enabled")

    if argv.command == "serve":
        from py_driftcalc.server import serve, DEFAULT_PORT  # pylint: disable=import-outside-toplevel
        port = argv.port or int(os.environ.get("PORT") or DEFAULT_PORT)
        serve(argv.host, port, argv.config)
        return 0

    try:
        config = load_config(argv.config)
        shot = build_input(argv)
        hit_result = Calculator(config=config).fire(shot)
    except InvalidInputError as exc:
        logger.error(exc)
        return 2
    except SolverRuntimeError as exc:
        logger.error(exc)
        return 1
    except (OSError, ValueError) as exc:
        logger.error(exc)
        return 2

    if argv.json:
        print(json.dumps(hit_result.to_list()))
    else:
        print(format_table(hit_result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
