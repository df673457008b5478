# core/errors.py

"""
Exception taxonomy for the roster.

- `ValidationError`: a field value is out of range or badly formatted. Raised at construction or mutation time.
- `PersistenceError`: saving or loading the roster failed.
    - `RecordNotFoundError`: the requested save file does not exist.
    - `DeserializationError`: the save file exists but does not match the expected schema.

Lookup misses are not errors; `Roster` returns None or an empty list for those.
"""


class ValidationError(ValueError):
    pass


class PersistenceError(Exception):
    pass


class RecordNotFoundError(PersistenceError):
    pass


class DeserializationError(PersistenceError):
    pass
