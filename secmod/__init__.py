
#
# Python-secmod -- Wallet Security Module: second password, seed decryption and key derivation
#
# Copyright (c) 2022, Dominion Research & Development Corp.
#
# Python-secmod is free software: you can redistribute it and/or modify it under
# the terms of the GNU General Public License as published by the Free Software
# Foundation, either version 3 of the License, or (at your option) any later
# version.  It is also available under alternative (eg. Commercial) licenses, at
# your option.  See the LICENSE file at the top of the source tree.
#
# Python-secmod is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
from .api		import *  # noqa F403
from .types		import *  # noqa F403
from .crypto		import Primitives, WalletCrypto  # noqa F401
from .version		import __version__  # noqa F401
