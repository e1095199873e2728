class TtlSchemaError(Exception):
    """Base class for errors raised by ttlschema."""


class InvalidInputError(TtlSchemaError, ValueError):
    """The document handed to the parser is not text.

    Malformed Turtle never raises; this is reserved for input that cannot be
    read as a string at all (undecodable bytes, arbitrary objects).
    """


class RegistryError(TtlSchemaError):
    """The schema registry file is missing or not a list of entries."""
