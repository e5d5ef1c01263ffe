import argparse
import logging
import sys
from argparse import ArgumentParser

import numpy as np

from geometry import Geometry

logger = logging.getLogger(__name__)


def parse_args(argv):
    parser = ArgumentParser()
    parser.add_argument('-f', '--filename', type=str, help='The path to the .ply file', default='./data/horse.ply')
    parser.add_argument('-s', '--source', type=int, help='The start vertex', default=0)
    parser.add_argument('-t', '--target', type=int, help='The end vertex, the last vertex by default', default=-1)
    parser.add_argument('--all-pairs', action='store_true', help='Also compute the all-pairs distance matrix')
    parser.add_argument('--log-level', type=str, help='The logging level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_known_args(argv)[0]


def run(args: argparse.Namespace) -> int:
    try:
        geometry = Geometry.from_ply(args.filename)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f'Cannot load mesh: {e}')
        return 1

    # only -1 means the last vertex, other negatives fall through to the range check
    target = len(geometry.v) - 1 if args.target == -1 else args.target
    try:
        cost, path = geometry.geodesic_path(args.source, target)
    except ValueError as e:
        logger.error(str(e))
        return 1

    if not path:
        logger.info(f'Vertex {target} is unreachable from vertex {args.source}')
    else:
        logger.info(f'Distance {args.source} -> {target} = {cost:.6f}')
        logger.info('Path: ' + ' '.join(map(str, path)))

    if args.all_pairs:
        d = geometry.build_graph().calculate_all_distance()
        finite = d[np.isfinite(d)]
        logger.info(f'All-pairs: {d.shape[0]} x {d.shape[1]}, max finite distance = {finite.max():.6f}')
    return 0


def main(argv=None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
