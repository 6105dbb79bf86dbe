################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from linalgo.structs.config.structs_params import CopyParams
from linalgo.structs.config.structs_params import StructsParams
from linalgo.structs.config.structs_params import StructsParamsError
from linalgo.structs.fixed_square_matrix import FixedSquareMatrix
from linalgo.structs.fixed_vector import FixedVector
from linalgo.structs.structs_errors import ContainerSizeError
from linalgo.structs.structs_errors import StructsError


__all__ = [
    "ContainerSizeError",
    "CopyParams",
    "FixedSquareMatrix",
    "FixedVector",
    "StructsError",
    "StructsParams",
    "StructsParamsError",
]
