"""Exceptions raised by the tracking pipeline."""


class FaceTouchError(Exception):
    """Base class for face-touch alert errors."""


class AcquisitionError(FaceTouchError):
    """Camera or pose model could not be acquired at startup."""
