"""
Errors raised by the cohort engine.

Everything downstream of the record store is total: unknown patients, missing
observation types and empty collections come back as ``None`` or empty frames.
The only failure is a record that does not have the shape the engine needs.
"""

from __future__ import annotations


class MalformedRecordError(ValueError):
    """A source record is missing a required field or carries an unusable value.

    Attributes:
        entity: record kind, e.g. ``"observation"``
        identifier: the record's id, or ``"row <n>"`` when the id itself is absent
        field: the offending field name
    """

    def __init__(self, entity: str, identifier: str, field: str, reason: str = "missing required field"):
        self.entity = entity
        self.identifier = identifier
        self.field = field
        self.reason = reason
        super().__init__(f"Malformed {entity} record {identifier}: {reason} '{field}'")
