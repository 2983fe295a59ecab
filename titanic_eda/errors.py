"""Exceptions raised by the EDA core; the web layer maps them to HTTP errors."""


class EdaError(Exception):
    """Base class for dataset errors surfaced to the user."""


class EmptyDatasetError(EdaError):
    """An operation that needs at least one record got none."""


class DatasetNotLoadedError(EdaError):
    """No dataset has been loaded into the session yet."""


class DatasetParseError(EdaError):
    """The uploaded file could not be read as CSV."""
