"""Exceptions raised by the converter."""


class ConverterError(Exception):
    """Base class for conversion failures that abort a run."""


class FetchError(ConverterError):
    """The API index could not be retrieved."""


class InvalidIndexError(ConverterError):
    """The API index response has no usable route list."""


class InvalidSchemaError(ConverterError):
    """The assembled collection does not conform to the collection schema."""
