"""
Command-line interface for BuddyPool library.

This module provides the demonstration driver that replays a sequence
of allocate/deallocate calls against a pool and reports its progress.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.pool import BuddyPool
from .exceptions import BuddyPoolError, InsufficientMemory
from .factory import DEMO_CAPACITY, create_pool
from .reporting.formatter import (
    SEPARATOR,
    block_to_dict,
    format_event,
    format_snapshot,
    format_stats,
    snapshot_to_dict,
)
from .reporting.listeners import EventRecorder, LoggingListener
from .types.enums import PoolEventKind

logger = logging.getLogger(__name__)

DEMO_REQUESTS = (60, 500, 225, 110)

Operation = Tuple[str, int]


def parse_operation(text: str) -> Operation:
    """Parse ``alloc:SIZE`` or ``free:INDEX``."""
    action, sep, value = text.partition(':')
    action = action.strip().lower()
    if not sep or action not in ('alloc', 'free'):
        raise argparse.ArgumentTypeError(f"Expected alloc:SIZE or free:INDEX, got {text!r}")
    try:
        return action, int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid number in {text!r}") from None


def demo_operations() -> List[Operation]:
    ops: List[Operation] = [('alloc', size) for size in DEMO_REQUESTS]
    ops.extend(('free', i) for i in range(len(DEMO_REQUESTS)))
    return ops


def run_operations(pool: BuddyPool, operations: Sequence[Operation],
                   unit: str = "KB", as_json: bool = False) -> Dict[str, Any]:
    """Replay ``operations`` against ``pool``, printing progress unless ``as_json``."""
    recorder = EventRecorder(maxlen=None)
    pool.add_listener(recorder)

    allocations: List[Optional[Any]] = []
    steps: List[Dict[str, Any]] = []
    failures = 0

    if not as_json:
        print(f"Initial Memory Pool: {pool.total_capacity} {unit}")
        print(SEPARATOR)

    try:
        for action, value in operations:
            step: Dict[str, Any] = {'op': action, 'arg': value, 'ok': True}
            try:
                if action == 'alloc':
                    block = None
                    try:
                        block = pool.allocate(value)
                    finally:
                        allocations.append(block)
                    step['block'] = block_to_dict(block)
                else:
                    if not 0 <= value < len(allocations) or allocations[value] is None:
                        raise BuddyPoolError(f"No allocation #{value} to free")
                    pool.deallocate(allocations[value])
                    step['block'] = block_to_dict(allocations[value])
            except BuddyPoolError as exc:
                failures += 1
                step['ok'] = False
                step['error'] = exc.message
                logger.debug("Step %s:%s failed: %s", action, value, exc.message)
                if not as_json and not isinstance(exc, InsufficientMemory):
                    print(f"Error: {exc.message}")

            events = recorder.drain()
            step['events'] = [format_event(event, unit) for event in events]
            step['free'] = [block_to_dict(block) for block in pool.snapshot()]
            steps.append(step)

            if not as_json:
                for event in events:
                    if event.kind != PoolEventKind.SPLIT:
                        print(format_event(event, unit))
                for line in format_snapshot(pool.snapshot(), unit):
                    print(line)
    finally:
        pool.remove_listener(recorder)

    if not as_json:
        for line in format_stats(pool.stats(), unit):
            print(line)

    return {
        'steps': steps,
        'failures': failures,
        'final': snapshot_to_dict(pool),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='buddypool', description='Buddy-system memory allocator simulator')
    parser.add_argument('--capacity', type=int, default=DEMO_CAPACITY,
                       help='Total pool size (power of 2)')
    parser.add_argument('--min-block', type=int, default=1,
                       help='Smallest block the pool hands out (power of 2)')
    parser.add_argument('--unit', type=str, default='KB',
                       help='Unit label used in reports')
    parser.add_argument('--json', action='store_true',
                       help='Emit a JSON document instead of progress text')
    parser.add_argument('-v', '--verbose', action='store_true',
                       help='Log every pool event, including splits')

    subparsers = parser.add_subparsers(dest='command', required=True)
    subparsers.add_parser('demo', help='Replay the allocate/release demonstration')
    run_parser = subparsers.add_parser('run', help='Replay a custom operation sequence')
    run_parser.add_argument('operations', nargs='+', type=parse_operation,
                           metavar='OP', help='alloc:SIZE or free:INDEX')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    try:
        pool = create_pool(args.capacity, min_block_size=args.min_block)
    except BuddyPoolError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 2

    if args.verbose:
        pool.add_listener(LoggingListener(unit=args.unit))

    operations = demo_operations() if args.command == 'demo' else args.operations
    results = run_operations(pool, operations, unit=args.unit, as_json=args.json)

    if args.json:
        print(json.dumps(results, indent=2))

    return 1 if results['failures'] else 0


if __name__ == '__main__':
    sys.exit(main())
