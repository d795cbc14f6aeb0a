from typing import Tuple

Scalar = int | float
RGBTuple = Tuple[Scalar, Scalar, Scalar]
RGBATuple = Tuple[Scalar, Scalar, Scalar, Scalar]
