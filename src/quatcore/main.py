#!/usr/bin/env python3
"""
===============================================================================
QUATCORE - COMMAND LINE ENTRY POINT
===============================================================================
Convert between rotation representations from the shell.

USAGE:
    quatcore axis-angle 0 0 1 90 --degrees     # quaternion + 3x3 matrix
    quatcore matrix 0 1 0 -1 0 0 0 0 1         # quaternion + axis/angle
    quatcore rotation 1 0 0 0 1 1              # quaternion from -> to
    quatcore --precision float32 axis-angle 1 1 0 0.25

CONFIG (YAML, all keys optional):
    precision: float64        # float32 | float64
    print_digits: 8
    log_level: WARNING
    angle_units: radians      # radians | degrees

Command-line options override the config file.
===============================================================================
"""

import argparse
import logging
import sys

import numpy as np
import yaml

from .core.constants import DEG2RAD, RAD2DEG, SUPPORTED_DTYPES
from .core.matrix_algo import extract_quat
from .core.quaternion import Quaternion

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'precision': 'float64',
    'print_digits': 8,
    'log_level': 'WARNING',
    'angle_units': 'radians',
}

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
_ANGLE_UNITS = ('radians', 'degrees')


def validate_config(config: dict) -> dict:
    """
    Check config keys and values.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}. "
                         f"Valid: {list(DEFAULT_CONFIG.keys())}")
    if config['precision'] not in SUPPORTED_DTYPES:
        raise ValueError(f"Unknown precision: {config['precision']}. "
                         f"Valid: {list(SUPPORTED_DTYPES.keys())}")
    digits = config['print_digits']
    if not isinstance(digits, int) or isinstance(digits, bool) or digits < 1:
        raise ValueError(f"print_digits must be a positive integer, got {digits!r}")
    if str(config['log_level']).upper() not in _LOG_LEVELS:
        raise ValueError(f"Unknown log_level: {config['log_level']}. Valid: {list(_LOG_LEVELS)}")
    if config['angle_units'] not in _ANGLE_UNITS:
        raise ValueError(f"Unknown angle_units: {config['angle_units']}. "
                         f"Valid: {list(_ANGLE_UNITS)}")
    return config


def load_config(config_path: str = None) -> dict:
    """
    Load CLI configuration from a YAML file.

    Args:
        config_path: Path to YAML config. None returns the defaults.

    Returns:
        Dictionary of configuration parameters, defaults filled in.
    """
    config = dict(DEFAULT_CONFIG)
    if config_path is None:
        return config

    logger.info(f"Loading configuration from: {config_path}")
    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must hold a mapping, got {type(loaded).__name__}")
    config.update(loaded)
    return validate_config(config)


def _format_quat(q: Quaternion, digits: int) -> str:
    return np.array2string(q.components, precision=digits, separator=', ')


def _format_matrix(m: np.ndarray, digits: int) -> str:
    return np.array2string(m, precision=digits, separator=', ', suppress_small=True)


def _angle_in(value: float, config: dict) -> float:
    return value * DEG2RAD if config['angle_units'] == 'degrees' else value


def _angle_out(value: float, config: dict) -> float:
    return value * RAD2DEG if config['angle_units'] == 'degrees' else value


def cmd_axis_angle(args, config: dict) -> None:
    """Print the quaternion and 3x3 matrix of an axis-angle rotation."""
    dtype = config['precision']
    angle = _angle_in(args.angle, config)
    q = Quaternion.from_axis_angle(args.axis, angle, dtype=dtype)
    logger.debug(f"axis={args.axis} angle={angle} -> {q!r}")
    digits = config['print_digits']
    print(f"quaternion: {_format_quat(q, digits)}")
    print("matrix:")
    print(_format_matrix(q.to_matrix33(), digits))


def cmd_matrix(args, config: dict) -> None:
    """Print the quaternion and axis/angle extracted from a 3x3 matrix."""
    dtype = config['precision']
    m = np.array(args.values, dtype=dtype).reshape(3, 3)
    q = extract_quat(m)
    logger.debug(f"extracted {q!r}")
    digits = config['print_digits']
    axis, angle = q.to_axis_angle()
    print(f"quaternion: {_format_quat(q, digits)}")
    print(f"axis: {np.array2string(axis, precision=digits, separator=', ')}")
    print(f"angle: {_angle_out(float(angle), config):.{digits}g} {config['angle_units']}")


def cmd_rotation(args, config: dict) -> None:
    """Print the quaternion rotating one direction onto another."""
    dtype = config['precision']
    q = Quaternion.from_rotation(args.from_dir, args.to_dir, dtype=dtype)
    digits = config['print_digits']
    print(f"quaternion: {_format_quat(q, digits)}")
    print("matrix:")
    print(_format_matrix(q.to_matrix33(), digits))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='quatcore',
        description='Convert between quaternion, axis-angle and rotation matrix.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  quatcore axis-angle 0 0 1 90 --degrees
  quatcore matrix 0 1 0 -1 0 0 0 0 1
  quatcore rotation 1 0 0 0 1 1
        """
    )
    parser.add_argument('--config', type=str, default=None,
                        help='Path to config YAML')
    parser.add_argument('--precision', choices=list(SUPPORTED_DTYPES.keys()), default=None,
                        help='Element type (default: from config, float64)')
    parser.add_argument('--degrees', action='store_true',
                        help='Read and print angles in degrees')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('axis-angle', help='Quaternion from axis and angle')
    p.add_argument('axis', type=float, nargs=3, metavar='A')
    p.add_argument('angle', type=float)
    p.set_defaults(func=cmd_axis_angle)

    p = sub.add_parser('matrix', help='Quaternion from a row-major 3x3 matrix')
    p.add_argument('values', type=float, nargs=9, metavar='M')
    p.set_defaults(func=cmd_matrix)

    p = sub.add_parser('rotation', help='Quaternion rotating one direction onto another')
    p.add_argument('from_dir', type=float, nargs=3, metavar='F')
    p.add_argument('to_dir', type=float, nargs=3, metavar='T')
    p.set_defaults(func=cmd_rotation)

    return parser


def main(argv=None) -> int:
    """
    Main entry point. Parses command line arguments and runs the requested
    conversion.

    Returns:
        Process exit status: 0 on success, 1 on a handled error.
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Could not load configuration: {e}")
        return 1

    if args.precision is not None:
        config['precision'] = args.precision
    if args.degrees:
        config['angle_units'] = 'degrees'

    level = 'DEBUG' if args.verbose else str(config['log_level']).upper()
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    try:
        args.func(args, config)
    except ValueError as e:
        logger.error(f"Conversion failed: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
