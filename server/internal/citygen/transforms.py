"""
Affine transform helpers.
Quaternions are stored as [x, y, z, w].
"""

from typing import Sequence

import numpy as np

IDENTITY_ROTATION = (0.0, 0.0, 0.0, 1.0)


def quaternion_to_matrix(quat: Sequence[float]) -> np.ndarray:
    """Convert quaternion to 4x4 rotation matrix."""
    x, y, z, w = quat[0], quat[1], quat[2], quat[3]

    mat = np.eye(4, dtype=np.float64)

    mat[0, 0] = 1.0 - 2.0 * (y * y + z * z)
    mat[0, 1] = 2.0 * (x * y - w * z)
    mat[0, 2] = 2.0 * (x * z + w * y)

    mat[1, 0] = 2.0 * (x * y + w * z)
    mat[1, 1] = 1.0 - 2.0 * (x * x + z * z)
    mat[1, 2] = 2.0 * (y * z - w * x)

    mat[2, 0] = 2.0 * (x * z - w * y)
    mat[2, 1] = 2.0 * (y * z + w * x)
    mat[2, 2] = 1.0 - 2.0 * (x * x + y * y)

    return mat


def compose_transform(
    translation: Sequence[float],
    rotation: Sequence[float],
    scale: Sequence[float],
) -> np.ndarray:
    """
    Compose a translation * rotation * scale matrix.

    Args:
        translation: (x, y, z) offset
        rotation: Quaternion [x, y, z, w]
        scale: Per-axis (x, y, z) scale

    Returns:
        4x4 float64 matrix; column 3 holds the translation
    """
    translate = np.eye(4, dtype=np.float64)
    translate[:3, 3] = translation

    scale_mat = np.diag([scale[0], scale[1], scale[2], 1.0]).astype(np.float64)

    return translate @ quaternion_to_matrix(rotation) @ scale_mat
