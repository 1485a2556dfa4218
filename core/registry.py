#!/usr/bin/env python3
"""
Registry Module
Catalogue of camera path operations and parameter validation

Callers that receive operation names and loosely typed parameters (CLI,
scripted batches) go through apply_transform(), which checks the operation
name and each parameter before running the transform.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple

from . import path_ops, transforms
from .errors import InvalidParameter
from .path_data import CameraPath

_REQUIRED = object()

# Parameter kinds
NUMBER = 'number'
INTEGER = 'integer'
BOOLEAN = 'boolean'
STRING = 'string'


@dataclass
class Parameter:
    """Operation parameter description

    Attributes:
        name: Keyword name passed to the transform
        kind: One of NUMBER, INTEGER, BOOLEAN, STRING
        default: Default value, _REQUIRED if the caller must supply it
    """
    name: str
    kind: str
    default: Any = _REQUIRED

    @property
    def required(self) -> bool:
        return self.default is _REQUIRED

    def coerce(self, value):
        """Check value against the kind, returning the value to pass on

        Integers are accepted for NUMBER parameters and passed through as is.
        Floats must be finite.
        Booleans are never accepted as numbers.
        """
        if self.kind == BOOLEAN:
            if isinstance(value, bool):
                return value
        elif self.kind == STRING:
            if isinstance(value, str):
                return value
        elif isinstance(value, bool):
            pass
        elif self.kind == INTEGER:
            if isinstance(value, int):
                return value
        elif self.kind == NUMBER:
            if isinstance(value, int) or (isinstance(value, float) and math.isfinite(value)):
                return value
        raise InvalidParameter(self.name, value, f"expected {self.kind}")


@dataclass
class Operation:
    """Registered camera path operation"""
    name: str
    func: Callable[..., CameraPath]
    parameters: Tuple[Parameter, ...]
    description: str


def _xyz(default=_REQUIRED):
    return (Parameter('x', NUMBER, default), Parameter('y', NUMBER, default),
            Parameter('z', NUMBER, default))


OPERATIONS: Dict[str, Operation] = {op.name: op for op in (
    Operation('fov_add', transforms.fov_add,
              (Parameter('value', NUMBER),),
              "Add a value to every FOV"),
    Operation('fov_multiply', transforms.fov_multiply,
              (Parameter('multiplier', NUMBER),),
              "Multiply every FOV"),
    Operation('fov_set', transforms.fov_set,
              (Parameter('value', NUMBER),),
              "Set every FOV"),
    Operation('position_offset', transforms.position_offset,
              _xyz(0.0),
              "Translate positions"),
    Operation('position_scale', transforms.position_scale,
              _xyz(1.0),
              "Scale positions about the origin"),
    # Integers only checked when use_degrees is False, see rotation_offset()
    Operation('rotation_offset', transforms.rotation_offset,
              (Parameter('pitch', NUMBER, 0), Parameter('yaw', NUMBER, 0),
               Parameter('roll', NUMBER, 0), Parameter('use_degrees', BOOLEAN, False)),
              "Offset rotations (engine units, or degrees with use_degrees)"),
    Operation('mirror', path_ops.mirror,
              (Parameter('axis', STRING), Parameter('flip_pitch', BOOLEAN, False),
               Parameter('flip_yaw', BOOLEAN, False), Parameter('flip_roll', BOOLEAN, False),
               Parameter('bounded', BOOLEAN, False)),
              "Mirror positions along an axis"),
    Operation('speed', transforms.speed,
              (Parameter('multiplier', NUMBER),),
              "Change playback speed"),
    Operation('time_offset', transforms.time_offset,
              (Parameter('seconds', NUMBER),),
              "Shift timestamps"),
    Operation('reverse', path_ops.reverse,
              (),
              "Play the path backwards"),
    Operation('smooth', path_ops.smooth,
              (Parameter('window_size', INTEGER),),
              "Moving-average smoothing of position and FOV"),
)}


def list_operations() -> List[str]:
    """Names of all registered operations, in definition order"""
    return list(OPERATIONS)


def get_operation(name: str) -> Operation:
    """Look up an operation by name

    Raises:
        InvalidParameter: If no operation has that name
    """
    try:
        return OPERATIONS[name]
    except KeyError:
        raise InvalidParameter(
            'operation', name, f"expected one of {', '.join(OPERATIONS)}"
        ) from None


def apply_transform(name: str, path: CameraPath, **params) -> CameraPath:
    """Validate parameters and run a named operation

    Args:
        name: Operation name (see list_operations())
        path: Camera path to transform
        **params: Operation parameters

    Returns:
        CameraPath: Transformed path

    Raises:
        InvalidParameter: Unknown operation, unknown/missing parameter, wrong
                          parameter type, or a value the transform rejects
    """
    operation = get_operation(name)
    known = {p.name for p in operation.parameters}
    for param_name in params:
        if param_name not in known:
            raise InvalidParameter(
                'parameter', param_name, f"not accepted by {operation.name}"
            )

    kwargs = {}
    for param in operation.parameters:
        if param.name in params:
            kwargs[param.name] = param.coerce(params[param.name])
        elif param.required:
            raise InvalidParameter(
                param.name, None, f"required by {operation.name}"
            )
        else:
            kwargs[param.name] = param.default

    return operation.func(path, **kwargs)
