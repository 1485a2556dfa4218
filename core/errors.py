#!/usr/bin/env python3
"""
Errors Module
Exception types raised by camera path parsing and transforms
"""


class CameraPathError(ValueError):
    """Base class for all camera path errors"""
    pass


class MalformedInput(CameraPathError):
    """Text does not deserialize into a keyframe collection"""
    pass


class InvalidParameter(CameraPathError):
    """A transform parameter value is semantically invalid

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(self, parameter, value, reason=None):
        self.parameter = parameter
        self.value = value
        message = f"Invalid {parameter}: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class SerializationFailure(CameraPathError):
    """In-memory data could not be serialized (programming defect)"""
    pass
