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


__all__ = [
    "CopyParams",
    "StructsParams",
    "StructsParamsError",
]
