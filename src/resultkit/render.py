"""Rendering of error values for unwrap/expect messages."""

from __future__ import annotations

import json
import reprlib

from resultkit.config import get_settings


def render_error(error: object) -> str:
    """Render an error value as JSON, falling back to repr().

    Strings come out quoted and dicts/lists as JSON text. Values JSON cannot
    encode (exceptions, arbitrary objects, circular structures) use repr().
    Structures nested too deeply for either use the depth-limited reprlib.repr().
    Output longer than ``render.max_length`` is cut and suffixed with "...".
    """
    try:
        text = json.dumps(error, ensure_ascii=False)
    except RecursionError:
        text = reprlib.repr(error)
    except (TypeError, ValueError):
        text = repr(error)

    limit = get_settings().render_max_length
    if limit and len(text) > limit:
        return text[:limit] + "..."
    return text
