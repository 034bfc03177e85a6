"""
Trace runner for the index cursors.

Builds a VariableSet from a list of domain sizes (labels 0..n-1), picks a
sub-collection or a target order, and logs every step of one enumeration
pass together with the cursor's internal state.

Usage:
    # Project a 2x3 space onto its first variable
    python -m factorindex.runners.trace_index --dims 2 3 --sub 0

    # Embed the first variable into a 2x3 space with the second fixed at state 3
    python -m factorindex.runners.trace_index --dims 2 3 --sub 0 --mode embed --offset 4

    # Transpose a 2x3x4 table to order (2, 0, 1), first variable most significant
    python -m factorindex.runners.trace_index --dims 2 3 4 --mode permute --order 2 0 1 --big-endian
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from factorindex.core.variables import VariableSet
from factorindex.indexing.embedding import EmbeddingIndex
from factorindex.indexing.permutation import PermutationIndex
from factorindex.indexing.projecting import ProjectingIndex


# Logger for this module
logger = logging.getLogger(__name__)


TRACE_MODES = ("project", "embed", "permute")


@dataclass
class TraceConfig:
    """
    Settings for one trace run.

    Attributes:
        dims: Domain sizes of the full collection, in label order
        sub: Positions (labels) of the sub-collection, for project/embed
        mode: One of "project", "embed", "permute"
        offset: Base offset for embed mode
        order: Target label order for permute mode (defaults to 0..n-1)
        big_endian: Permute mode: first variable of `order` most significant
        dump: Also log the cursor's internal state at every step
    """
    dims: List[int]
    sub: List[int] = field(default_factory=list)
    mode: str = "project"
    offset: int = 0
    order: Optional[List[int]] = None
    big_endian: bool = False
    dump: bool = False


def trace(config: TraceConfig) -> List[int]:
    """
    Run one enumeration pass and return the reported indices.

    Args:
        config: TraceConfig describing the space and the cursor

    Returns:
        The cursor's index at every step of the pass

    Raises:
        ValueError: If mode is unknown or a label is out of range
        IndexPreconditionError: If the cursor rejects its variables
    """
    if config.mode not in TRACE_MODES:
        raise ValueError(f"Unknown mode: {config.mode!r} (expected one of {TRACE_MODES})")

    full = VariableSet.from_dims(config.dims)
    for label in list(config.sub) + list(config.order or []):
        if not 0 <= label < full.nvar():
            raise ValueError(f"Label {label} out of range for {full.nvar()} variables")

    logger.info("Full collection: %r (%d states)", full, full.num_states())

    if config.mode == "permute":
        labels = config.order if config.order is not None else full.labels()
        order = [full[label] for label in labels]
        cursor = PermutationIndex(order, big_endian=config.big_endian)
        logger.info("Target order: %s (big_endian=%s)", labels, config.big_endian)
        steps = cursor.end()
    else:
        sub = VariableSet(full[label] for label in config.sub)
        logger.info("Sub collection: %r", sub)
        if config.mode == "project":
            cursor = ProjectingIndex(full, sub)
            steps = cursor.end()
        else:
            cursor = EmbeddingIndex(full, sub, config.offset)
            steps = cursor.num_positions()

    indices = []
    for step in range(steps):
        indices.append(cursor.index)
        logger.info("  step %d -> %d", step, cursor.index)
        if config.dump:
            logger.debug("%s", cursor.dump())
        cursor.increment()

    logger.info("Traced %d steps, end=%d", steps, cursor.end())
    return indices


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for the index trace runner."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Trace the indices reported by a projecting, embedding or permutation cursor."
    )
    parser.add_argument(
        "--dims",
        type=int,
        nargs="+",
        required=True,
        help="Domain sizes of the full collection (labels 0..n-1).",
    )
    parser.add_argument(
        "--sub",
        type=int,
        nargs="*",
        default=[],
        help="Labels of the sub-collection (project/embed modes).",
    )
    parser.add_argument(
        "--mode",
        choices=TRACE_MODES,
        default="project",
        help="Which cursor to trace.",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Base offset into the full space (embed mode).",
    )
    parser.add_argument(
        "--order",
        type=int,
        nargs="+",
        default=None,
        help="Target label order (permute mode).",
    )
    parser.add_argument(
        "--big-endian",
        action="store_true",
        help="Permute mode: first variable of --order gets the largest stride.",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Log the cursor's internal state at every step (implies DEBUG level).",
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.dump else logging.INFO,
        format="%(levelname)s: %(message)s"
    )

    trace(TraceConfig(
        dims=args.dims,
        sub=args.sub,
        mode=args.mode,
        offset=args.offset,
        order=args.order,
        big_endian=args.big_endian,
        dump=args.dump,
    ))


if __name__ == "__main__":
    main()
