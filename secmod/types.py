
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
from __future__		import annotations

from collections	import namedtuple
from dataclasses	import dataclass, replace
from typing		import Any, Optional, Union

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Credentials", "SLIP10Key", "InvalidSecondPassword", "PrimitiveFailure" )


class InvalidSecondPassword( ValueError ):
    """The supplied second password does not match the wallet's stored second password hash."""
    def __init__( self, message="INVALID_SECOND_PASSWORD" ):
        super().__init__( message )


class PrimitiveFailure( ValueError ):
    """An underlying cryptographic primitive rejected its input (eg. malformed ciphertext, bad
    padding).  The original library exception is always available as __cause__.

    """
    pass


# The result of a SLIP-10 ed25519 derivation.  The 32-byte 'key' is the raw ed25519 private seed,
# eg. as expected by Stellar's Keypair.fromRawEd25519Seed.
SLIP10Key			= namedtuple( 'SLIP10Key', ('key', 'chain_code', 'public_key') )


@dataclass( eq=True, frozen=True )
class Credentials:
    """The wallet security parameters supplied to every security module operation.

    Assembled by the caller from wherever the wallet state lives, for the duration of one call.
    Only the fields required by an operation need be supplied, eg. deriving from a plaintext
    seed_hex requires nothing else.  A second_password of None (or empty) means that no second
    password is configured, and the seed_hex is already plaintext.

        iterations		-- the wallet's PBKDF2 iteration count
        shared_key		-- the wallet's shared key (a UUID string)
        stored_hash		-- the hex second password hash stored in the wallet (if any)
        second_password		-- the second password entered by the user (if any)
        seed_hex		-- the HD wallet seed: hex entropy, or base64 ciphertext
        network			-- a python-hdwallet symbol (eg. 'BTC') or Cryptocurrency class
        guid			-- the wallet identifier
        password		-- the wallet's main (login) password

    """
    iterations: Optional[int]	= None
    shared_key: Optional[str]	= None
    stored_hash: Optional[str]	= None
    second_password: Optional[str] = None
    seed_hex: Optional[Union[str,bytes]] = None
    network: Any		= None
    guid: Optional[str]		= None
    password: Optional[str]	= None

    def __post_init__( self ):
        if self.iterations is not None and (
                isinstance( self.iterations, bool ) or not isinstance( self.iterations, int ) or self.iterations < 1 ):
            raise ValueError( f"PBKDF2 iterations must be a positive integer, not {self.iterations!r}" )
        if self.second_password:
            if self.iterations is None or not self.shared_key:
                raise ValueError( "A second password requires the wallet's iterations and shared_key" )

    def __repr__( self ):
        """Never reveal secrets in logs or tracebacks."""
        def redact( value ):
            return None if value is None else '...'
        return (
            f"{self.__class__.__name__}(iterations={self.iterations!r}, shared_key={redact( self.shared_key )},"
            f" stored_hash={redact( self.stored_hash )}, second_password={redact( self.second_password )},"
            f" seed_hex={redact( self.seed_hex )}, network={self.network!r}, guid={self.guid!r},"
            f" password={redact( self.password )})"
        )

    @property
    def has_second_password( self ) -> bool:
        return bool( self.second_password )

    def using( self, **kwds ) -> Credentials:
        """Return a copy of these Credentials w/ some fields replaced (and re-validated)."""
        return replace( self, **kwds )
