
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
"""
Functions that require sensitive information to perform (eg. password, seed, and shared_key).
Think of this module as similar to a Hardware Security Module: seed material is only ever
decrypted after the second password has been verified against the wallet's stored hash, and
nothing is retained between calls.
"""
from __future__		import annotations

import hmac
import logging

from typing		import Optional, Union

from .crypto		import Primitives, WalletCrypto
from .defaults		import NETWORK_DEFAULT, ETHEREUM_LEGACY_PATH
from .types		import Credentials, InvalidSecondPassword, SLIP10Key

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "SecurityModule", )

log				= logging.getLogger( __package__ )


class SecurityModule:
    """Second password verification, seed decryption, and HD wallet key derivation over an explicit
    Credentials value, using the supplied cryptographic Primitives (default: WalletCrypto).

    Holds no state other than the Primitives; every operation is a pure function of its arguments,
    and may be invoked concurrently.

    """
    def __init__( self, crypto: Optional[Primitives] = None ):
        self.crypto		= crypto or WalletCrypto()

    def compute_second_password_hash( self, credentials: Credentials, password: str ) -> str:
        """The hex second password hash for the wallet's iterations and shared_key.  Store this when
        setting a new second password; it is what verify_second_password checks against.

        """
        if credentials.iterations is None or credentials.shared_key is None:
            raise ValueError( "Computing a second password hash requires iterations and shared_key" )
        return self.crypto.hash_n_times(
            credentials.iterations, ( credentials.shared_key + password ).encode( 'UTF-8' )
        ).hex()

    def credentials_entropy( self, credentials: Credentials ) -> bytes:
        """Stable entropy derived from the wallet's login credentials; unrelated to the seed."""
        if None in ( credentials.guid, credentials.shared_key, credentials.password ):
            raise ValueError( "Credentials entropy requires guid, shared_key and password" )
        return self.crypto.sha256(
            ( credentials.guid + credentials.shared_key + credentials.password ).encode( 'UTF-8' )
        )

    def verify_second_password( self, credentials: Credentials, password: str ) -> bool:
        computed		= self.compute_second_password_hash( credentials, password )
        stored			= credentials.stored_hash
        if not stored:
            log.warning( "No second password hash is stored; cannot verify second password" )
            return False
        verified		= hmac.compare_digest( computed.encode( 'UTF-8' ), stored.lower().encode( 'UTF-8' ))
        log.debug( f"Second password {'verified' if verified else 'rejected'} w/ {credentials.iterations} iterations" )
        return verified

    def decrypt_with_second_password( self, credentials: Credentials, ciphertext: str ) -> str:
        """Decrypt ciphertext w/ the credentials' second_password, iff it matches the stored_hash.
        Raises InvalidSecondPassword, without attempting decryption, if it doesn't.

        """
        if not self.verify_second_password( credentials, credentials.second_password or '' ):
            log.warning( "Refusing to decrypt: invalid second password" )
            raise InvalidSecondPassword()
        return self.crypto.decrypt_sec_pass(
            credentials.shared_key, credentials.iterations, credentials.second_password, ciphertext
        )

    def encrypt_with_second_password( self, credentials: Credentials, plaintext: str ) -> str:
        """Encrypt plaintext w/ the credentials' second_password.  Unverified; this is how data is
        (re-)encrypted when a new second password is being established.

        """
        if not credentials.second_password:
            raise ValueError( "Encryption requires a second password" )
        return self.crypto.encrypt_sec_pass(
            credentials.shared_key, credentials.iterations, credentials.second_password, plaintext
        )

    def seed_entropy( self, credentials: Credentials ) -> Union[str,bytes]:
        """The usable seed entropy: the seed_hex as-is if no second password is in use, otherwise the
        seed_hex decrypted w/ the (verified) second password.  All derivations obtain their entropy
        here.

        """
        if credentials.seed_hex is None:
            raise ValueError( "No seed_hex supplied" )
        if not credentials.has_second_password:
            return credentials.seed_hex
        return self.decrypt_with_second_password( credentials, credentials.seed_hex )

    def entropy_to_seed( self, entropy: Union[str,bytes] ) -> bytes:
        """The 512-bit BIP-39 seed of the Mnemonic encoding the entropy (w/ no passphrase)."""
        return self.crypto.mnemonic_to_seed( self.crypto.entropy_to_mnemonic( entropy ))

    def seed( self, credentials: Credentials ) -> bytes:
        return self.entropy_to_seed( self.seed_entropy( credentials ))

    def derive_bip32_key( self, credentials: Credentials, path: str ) -> str:
        """Derive the extended private key (eg. "xprv...") at path from the wallet's seed."""
        network			= credentials.network or NETWORK_DEFAULT
        log.info( f"Deriving BIP-32 key for {getattr( network, 'SYMBOL', network )} at {path}" )
        return self.crypto.bip32_derive( self.seed( credentials ), path, network )

    def derive_legacy_ethereum_key( self, credentials: Credentials ) -> bytes:
        """Derive the wallet's original Ethereum account private key.

        Derivation error using seed_hex directly instead of seed derived from mnemonic derived from
        seed_hex.  Existing Ethereum accounts depend on it; do not "fix" it.  The master seed is the
        entropy exactly as the wallet holds it: hex entropy is used as its UTF-8 text, not decoded.

        """
        entropy			= self.seed_entropy( credentials )
        if isinstance( entropy, str ):
            entropy		= entropy.encode( 'UTF-8' )
        log.info( f"Deriving legacy Ethereum key at {ETHEREUM_LEGACY_PATH}" )
        return self.crypto.ethhd_derive( entropy, ETHEREUM_LEGACY_PATH )

    def derive_slip10_ed25519_key( self, credentials: Credentials, path: str ) -> SLIP10Key:
        """Derive the SLIP-10 ed25519 key at path (all segments hardened) from the wallet's seed."""
        log.info( f"Deriving SLIP-10 ed25519 key at {path}" )
        return self.crypto.slip10_ed25519_derive( path, self.seed( credentials ).hex() )
