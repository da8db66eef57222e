"""Best-effort repair of malformed JSON payloads.

The backend sometimes embeds JSON inside string fields with escaping
artifacts that a strict parser rejects. ``repair`` runs an ordered chain of
string transforms, least destructive first, and returns the first candidate
that parses. Later stages are lossy: they may rewrite legitimately escaped
content, so they only run once the cheaper stages have failed.

Usage:
    from pulsefinder.repair import parse, repair

    data = parse(raw_match_string)
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pulsefinder.exceptions import MalformedPayloadError

if TYPE_CHECKING:
    from pulsefinder.models.match import MatchData

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_ESCAPED_QUOTE = re.compile(r'\\+"')
_NEWLINE_ESCAPE = re.compile(r"\\+n")
_TRAILING_COMMA = re.compile(r",\s*([}\]])")
_QUOTED_DELIMITERS = (
    ('"{', "{"),
    ('}"', "}"),
    ('["', "["),
    (']"', "]"),
)


# =============================================================================
# Repair stages
# =============================================================================


def strip_control_characters(text: str) -> str:
    """Remove C0/C1 control characters (newlines and tabs included) and trim."""
    return _CONTROL_CHARS.sub("", text).strip()


def repair_escaping(text: str) -> str:
    """Undo double-encoding artifacts around quotes and delimiters.

    Steps, in order:
        1. Double every backslash so stray escapes become literal.
        2. Collapse escaped quotes back to bare quotes.
        3. Unquote delimiters (``"{``, ``}"``, ``["``, ``]"``).
        4. Drop trailing commas before ``}`` or ``]``.
        5. Replace literal ``\\n`` escape sequences with a space.

    Step 2 removes every backslash run before a quote, not only the extra
    level added by double encoding. ``{\\"a\\":1}`` therefore comes back as
    ``{"a":1}``, while a string value with a legitimately escaped quote such
    as ``{"a":"say \\"hi\\"",}`` loses its escapes and cannot be repaired.
    """
    text = text.replace("\\", "\\\\")
    text = _ESCAPED_QUOTE.sub('"', text)
    for quoted, bare in _QUOTED_DELIMITERS:
        text = text.replace(quoted, bare)
    text = _TRAILING_COMMA.sub(r"\1", text)
    return _NEWLINE_ESCAPE.sub(" ", text)


RepairStage = Callable[[str], str]

REPAIR_STAGES: tuple[RepairStage, ...] = (
    strip_control_characters,
    repair_escaping,
)


# =============================================================================
# Public API
# =============================================================================


def _is_valid_json(text: str) -> bool:
    try:
        json.loads(text)
    except ValueError:
        return False
    return True


def repair(text: str) -> str:
    """Return ``text`` or the first repaired variant of it that is valid JSON.

    Valid input is returned unchanged. Stages apply cumulatively: each one
    transforms the output of the previous stage.

    Raises:
        MalformedPayloadError: If no stage produced parseable JSON.
    """
    if _is_valid_json(text):
        return text

    candidate = text
    for stage in REPAIR_STAGES:
        candidate = stage(candidate)
        if _is_valid_json(candidate):
            logger.debug("Payload repaired by %s", stage.__name__)
            return candidate

    logger.warning("Payload could not be repaired (%d chars)", len(text))
    raise MalformedPayloadError("Unable to repair JSON payload", text)


def parse(text: str) -> Any:
    """Repair and decode a JSON payload.

    A payload that decodes to a string holding a JSON object or array
    (double-encoded) is decoded once more. If that inner string is beyond
    repair it is returned as the plain string it is.

    Raises:
        MalformedPayloadError: If the payload could not be repaired.
    """
    value = json.loads(repair(text))
    if isinstance(value, str) and value.strip()[:1] in ("{", "["):
        try:
            return json.loads(repair(value))
        except MalformedPayloadError:
            return value
    return value


def parse_match_data(text: str) -> MatchData:
    """Repair, decode and validate an embedded match string.

    Raises:
        MalformedPayloadError: If the string cannot be repaired or does not
            describe a match.
    """
    # models.match imports this module
    from pulsefinder.models.match import MatchData

    return MatchData.from_raw(text)
