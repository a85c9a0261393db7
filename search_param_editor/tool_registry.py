"""
Registry of the parameter schemas, keyed by search engine.

Lookup is case-insensitive and ignores punctuation, so ``"xtandem"``,
``"X!Tandem"`` and ``"x-tandem"`` all name the same schema.
"""

import re
from typing import Dict, List

from .schema import ParameterSchema
from .schema_comet import COMET_SCHEMA
from .schema_metamorpheus import METAMORPHEUS_SCHEMA
from .schema_msgf import MSGF_SCHEMA
from .schema_omssa import OMSSA_SCHEMA
from .schema_sage import SAGE_SCHEMA
from .schema_xtandem import XTANDEM_SCHEMA

TOOL_SCHEMAS: Dict[str, ParameterSchema] = {
    schema.tool: schema
    for schema in (
        COMET_SCHEMA, METAMORPHEUS_SCHEMA, MSGF_SCHEMA, OMSSA_SCHEMA,
        SAGE_SCHEMA, XTANDEM_SCHEMA,
    )
}


def _key(name: str) -> str:
    return re.sub(r'[^a-z0-9]', '', name.lower())


_BY_KEY = {_key(tool): schema for tool, schema in TOOL_SCHEMAS.items()}


def available_tools() -> List[str]:
    """Display names of every registered search engine, sorted."""
    return sorted(TOOL_SCHEMAS, key=str.lower)


def get_schema(name: str) -> ParameterSchema:
    """Return the schema of search engine *name*.

    Raises
    ------
    KeyError
        No registered engine matches *name*.
    """
    try:
        return _BY_KEY[_key(name)]
    except KeyError:
        raise KeyError(
            f"Unknown search engine '{name}'. "
            f"Available: {', '.join(available_tools())}"
        ) from None
