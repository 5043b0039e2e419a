"""Shared typing aliases for RegKit."""

from __future__ import annotations

from typing import Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

ArrayLike1D: TypeAlias = Sequence[float] | NDArray[np.floating]
ArrayLike2D: TypeAlias = Sequence[Sequence[float]] | NDArray[np.floating]
