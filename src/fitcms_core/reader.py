"""Reader: single-pass parser for the YAML subset used by the content files.

The supported dialect is the one the admin panel itself writes::

    title: "Strength"              # scalar
    bio: |                         # block scalar
      First paragraph.

      Second paragraph.
    tags:                          # list of plain items -> {text: ...} records
      - "cardio"
    stats:                         # list of records
      - number: "500"
        label: "Workouts"
    social:                        # one level of nested mapping
      instagram: "@me"

Anything else is skipped line by line; parsing never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from .scalars import BLOCK_MARKER, indent_of, split_pair, unquote
from .values import VList, VMapping, VScalar

logger = logging.getLogger(__name__)

# Record continuation lines (``    label: "x"``) sit at least this deep.
CONTINUATION_INDENT = 4


# ---------------------------------------------------------------------------
# Scanner state
# ---------------------------------------------------------------------------

class State(Enum):
    DEFAULT = auto()
    IN_MAPPING = auto()       # inside a nested mapping
    IN_LIST = auto()          # list open, no record in progress
    IN_RECORD = auto()        # list open, record in progress
    IN_BLOCK_SCALAR = auto()  # accumulating a ``key: |`` block


@dataclass
class _Scan:
    """Accumulators threaded through the line loop."""

    result: VMapping = field(default_factory=VMapping)

    # A key with an empty value: the owner of upcoming list items or of a
    # nested mapping.
    pending_key: str | None = None
    pending_indent: int = 0
    pending_owner: VMapping | None = None

    mapping: VMapping | None = None
    items: VList | None = None
    record: VMapping | None = None

    block_key: str = ""
    block_indent: int = 0
    block_text: str = ""
    block_owner: VMapping | None = None
    resume: State = State.DEFAULT


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(text: str) -> VMapping:
    """Parse *text* into a top-level :class:`VMapping`.

    Plain list items become ``{text: ...}`` records. Key order follows the
    source. Lines outside the subset contribute nothing.
    """
    scan = _Scan()
    state = State.DEFAULT
    for line in text.split("\n"):
        state = _step(state, scan, line)

    if state is State.IN_BLOCK_SCALAR:
        _close_block(scan)
    _flush_record(scan)
    return scan.result


# ---------------------------------------------------------------------------
# Line dispatch
# ---------------------------------------------------------------------------

def _step(state: State, scan: _Scan, line: str) -> State:
    trimmed = line.strip()

    if not trimmed or trimmed.startswith("#"):
        if state is State.IN_BLOCK_SCALAR and not trimmed:
            scan.block_text += "\n"
        return state

    indent = indent_of(line)

    if state is State.IN_BLOCK_SCALAR:
        if indent > scan.block_indent:
            scan.block_text += ("\n" if scan.block_text else "") + trimmed
            return state
        state = _close_block(scan)

    if trimmed.startswith("- "):
        return _list_item(scan, trimmed[2:].strip())

    if ":" not in trimmed:
        logger.debug("Skipping line without a key: %r", line)
        return state

    if state is State.IN_RECORD and indent >= CONTINUATION_INDENT:
        return _record_field(state, scan, trimmed, indent)

    state = _close_containers(state, scan, indent)

    if trimmed.startswith("-"):
        logger.debug("Skipping malformed list item: %r", line)
        return state

    owner, state = _owner_for(state, scan, indent)

    if trimmed.endswith(BLOCK_MARKER):
        return _open_block(scan, trimmed, indent, owner, resume=state)

    return _key_line(state, scan, trimmed, indent, owner)


# ---------------------------------------------------------------------------
# Line handlers
# ---------------------------------------------------------------------------

def _list_item(scan: _Scan, content: str) -> State:
    _flush_record(scan)

    if scan.items is None:
        scan.items = VList()
        if scan.pending_key is not None:
            owner = scan.pending_owner if scan.pending_owner is not None else scan.result
            owner.entries[scan.pending_key] = scan.items
        else:
            logger.debug("List item without a key: %r", content)

    if ":" in content:
        key, raw = split_pair(content)
        scan.record = VMapping({key: VScalar(unquote(raw))})
        return State.IN_RECORD

    scan.items.items.append(VMapping({"text": VScalar(unquote(content))}))
    return State.IN_LIST


def _record_field(state: State, scan: _Scan, trimmed: str, indent: int) -> State:
    assert scan.record is not None
    if trimmed.endswith(BLOCK_MARKER):
        return _open_block(scan, trimmed, indent, scan.record, resume=state)
    key, raw = split_pair(trimmed)
    scan.record.entries[key] = VScalar(unquote(raw))
    return state


def _key_line(
    state: State, scan: _Scan, trimmed: str, indent: int, owner: VMapping
) -> State:
    key, raw = split_pair(trimmed)
    if not raw:
        scan.pending_key = key
        scan.pending_indent = indent
        scan.pending_owner = owner
        return state

    owner.entries[key] = VScalar(unquote(raw))
    if (
        scan.pending_key is not None
        and scan.items is None
        and indent <= scan.pending_indent
    ):
        # the earlier empty key never received a list
        scan.pending_key = None
    return state


def _open_block(
    scan: _Scan, trimmed: str, indent: int, owner: VMapping, resume: State
) -> State:
    key, _ = split_pair(trimmed[: -len(BLOCK_MARKER)])
    scan.block_key = key
    scan.block_indent = indent
    scan.block_text = ""
    scan.block_owner = owner
    scan.resume = resume
    # placeholder keeps the key in source order
    owner.entries[key] = VScalar("")
    return State.IN_BLOCK_SCALAR


# ---------------------------------------------------------------------------
# Container bookkeeping
# ---------------------------------------------------------------------------

def _close_block(scan: _Scan) -> State:
    assert scan.block_owner is not None
    scan.block_owner.entries[scan.block_key] = VScalar(scan.block_text.strip())
    scan.block_owner = None
    scan.block_text = ""
    return scan.resume


def _flush_record(scan: _Scan) -> None:
    if scan.record is not None and scan.record.entries and scan.items is not None:
        scan.items.items.append(scan.record)
    scan.record = None


def _close_containers(state: State, scan: _Scan, indent: int) -> State:
    """Close the open list and nested mapping that *indent* falls out of."""
    if scan.items is not None and indent <= scan.pending_indent:
        _flush_record(scan)
        scan.items = None
        scan.pending_key = None
        state = State.IN_MAPPING if scan.mapping is not None else State.DEFAULT

    if scan.mapping is not None and indent == 0:
        scan.mapping = None
        scan.pending_key = None
        state = State.DEFAULT

    return state


def _owner_for(state: State, scan: _Scan, indent: int) -> tuple[VMapping, State]:
    """Return the mapping a key line at *indent* belongs to.

    An indented key right after a top-level empty key opens a nested mapping
    under that key.
    """
    if scan.mapping is not None:
        return scan.mapping, state

    if (
        scan.pending_key is not None
        and scan.items is None
        and scan.pending_owner is scan.result
        and indent > scan.pending_indent
    ):
        scan.mapping = VMapping()
        scan.result.entries[scan.pending_key] = scan.mapping
        scan.pending_key = None
        return scan.mapping, State.IN_MAPPING

    return scan.result, state
