################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of linalgo
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Linear algebra building blocks.

Currently provides fixed-size vector and square matrix containers. Operations
on them are not implemented yet.
"""

import logging

from linalgo.structs import ContainerSizeError
from linalgo.structs import CopyParams
from linalgo.structs import FixedSquareMatrix
from linalgo.structs import FixedVector
from linalgo.structs import StructsError
from linalgo.structs import StructsParams
from linalgo.structs import StructsParamsError


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "ContainerSizeError",
    "CopyParams",
    "FixedSquareMatrix",
    "FixedVector",
    "StructsError",
    "StructsParams",
    "StructsParamsError",
]
