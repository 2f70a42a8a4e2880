"""
Transform conversion between the source (assimp) layout and the target graph.

Node transforms go matrix -> (scale, quaternion, translation) -> Euler angles
-> quaternion. Bind poses go matrix -> (scale, quaternion, translation) ->
matrix with the quaternion used as is. The two paths are kept separate on
purpose; do not merge them.
"""

import numpy as np
from trimesh import transformations as tf

# Euler order of the target engine: z, then x, then y about the fixed axes
EULER_AXES = "szxy"


def mat4_from_source(flat):
    """16 floats, row-major, translation in the last column -> 4x4 array."""
    if flat is None or len(flat) < 16:
        return np.identity(4)
    return np.array(flat[:16], dtype=np.float64).reshape(4, 4)


def decompose(matrix):
    """Split an affine matrix into (scale, quaternion, translation).

    Scale is the length of each basis column and is never negative.
    """
    m = np.asarray(matrix, dtype=np.float64)
    translation = m[:3, 3].copy()
    scale = np.linalg.norm(m[:3, :3], axis=0)
    safe = np.where(scale > 1e-12, scale, 1.0)
    rotation = np.identity(4)
    rotation[:3, :3] = m[:3, :3] / safe
    quaternion = tf.quaternion_from_matrix(rotation)
    return scale, quaternion, translation


def quaternion_to_euler(quaternion):
    """Quaternion (w, x, y, z) -> Euler degrees (x, y, z), each in [0, 360)."""
    az, ax, ay = tf.euler_from_quaternion(quaternion, axes=EULER_AXES)
    euler = np.degrees([ax, ay, az]) % 360.0
    # tiny negative angles wrap to 360.0
    euler[euler >= 360.0 - 1e-9] = 0.0
    return euler


def euler_to_quaternion(euler):
    """Euler degrees (x, y, z) -> quaternion (w, x, y, z)."""
    ax, ay, az = np.radians(euler)
    return tf.quaternion_from_euler(az, ax, ay, axes=EULER_AXES)


def convert_node_transform(flat):
    """Local transform of a source node -> (position, rotation, scale)."""
    scale, quaternion, translation = decompose(mat4_from_source(flat))
    rotation = euler_to_quaternion(quaternion_to_euler(quaternion))
    return translation, rotation, scale


def trs_matrix(translation, quaternion, scale):
    m = tf.quaternion_matrix(quaternion)
    m[:3, :3] = m[:3, :3] * np.asarray(scale, dtype=np.float64)
    m[:3, 3] = translation
    return m


def convert_bind_pose(offset_matrix):
    """Bone offset (inverse bind) matrix -> target bind pose matrix."""
    scale, quaternion, translation = decompose(mat4_from_source(offset_matrix))
    return trs_matrix(translation, quaternion, scale)


def inverse_transform(matrix):
    """(position, rotation, scale) of the inverse of `matrix`.

    This is the local transform an identity node gets when attached under a
    node with local `matrix` while keeping its world placement.
    """
    scale, quaternion, translation = decompose(np.linalg.pinv(np.asarray(matrix, dtype=np.float64)))
    return translation, quaternion, scale
