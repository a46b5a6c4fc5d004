
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

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

#
# Second Password hashing and Seed encryption
#
#     hash:   sha256^N( sharedKey + password ), hex encoded
#     cipher: base64( IV + AES-256-CBC( ISO-10126 padded plaintext )), keyed by
#             PBKDF2-HMAC-SHA1( sharedKey + password, salt=IV, N )
#
ITERATIONS_DEFAULT		= 5000	# The wallet's usual PBKDF2 iteration count
SALT_BYTES			= 16	# Also the AES block size; the IV doubles as the PBKDF2 salt
KEY_BIT_LEN			= 256

MNEMONIC_LANGUAGE		= 'english'

#
# HD Wallet Derivation Paths
#
# BIP-44 defines the purpose of each depth level:
#    m / purpose’ / coin_type’ / account’ / change / address_index
#
NETWORK_DEFAULT			= 'BTC'		# python-hdwallet symbol; eg. 'BTCTEST' for testnet
BIP32_PATH_DEFAULT		= "m/0"
SLIP10_PATH_DEFAULT		= "m/44'/148'/0'"	# Stellar (SEP-0005); ed25519 requires hardened segments

# Existing Ethereum accounts were derived at this path directly from the seed entropy; it is
# not configurable, and must not change.
ETHEREUM_LEGACY_PATH		= "m/44'/60'/0'/0/0"

SCHEMES				= ('bip32', 'ethereum', 'ed25519')
