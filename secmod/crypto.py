
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

import abc
import base64
import binascii
import hashlib
import logging

from typing		import Any, Union

import hdwallet

from bip_utils		import Bip32Slip10Ed25519
from Crypto.Cipher	import AES
from Crypto.Hash	import SHA1
from Crypto.Protocol.KDF import PBKDF2
from Crypto.Random	import get_random_bytes
from mnemonic		import Mnemonic

from .defaults		import SALT_BYTES, KEY_BIT_LEN, MNEMONIC_LANGUAGE
from .types		import PrimitiveFailure, SLIP10Key
from .util		import into_bytes

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

__all__				= ( "Primitives", "WalletCrypto", "iso10126_pad", "iso10126_unpad" )

log				= logging.getLogger( __package__ )


class Primitives( abc.ABC ):
    """The cryptographic capabilities required by the SecurityModule.  The SecurityModule only
    orchestrates these; it never hashes, encrypts or does any elliptic curve math itself.

    Supply an alternative implementation to the SecurityModule to eg. test its gating and
    sequencing logic w/ fixed canned values.

    """
    @abc.abstractmethod
    def hash_n_times( self, iterations: int, data: bytes ) -> bytes:
        raise NotImplementedError()

    @abc.abstractmethod
    def sha256( self, data: bytes ) -> bytes:
        raise NotImplementedError()

    @abc.abstractmethod
    def encrypt_sec_pass( self, shared_key: str, iterations: int, password: str, plaintext: str ) -> str:
        raise NotImplementedError()

    @abc.abstractmethod
    def decrypt_sec_pass( self, shared_key: str, iterations: int, password: str, ciphertext: str ) -> str:
        raise NotImplementedError()

    @abc.abstractmethod
    def entropy_to_mnemonic( self, entropy: Union[str,bytes] ) -> str:
        raise NotImplementedError()

    @abc.abstractmethod
    def mnemonic_to_seed( self, mnemonic: str ) -> bytes:
        raise NotImplementedError()

    @abc.abstractmethod
    def bip32_derive( self, seed: bytes, path: str, network: Any ) -> str:
        """Return the serialized extended private key of the node at path, from the master node
        derived from seed for the network."""
        raise NotImplementedError()

    @abc.abstractmethod
    def ethhd_derive( self, seed: bytes, path: str ) -> bytes:
        """Return the raw private key of the node at path, from the master node derived from seed."""
        raise NotImplementedError()

    @abc.abstractmethod
    def slip10_ed25519_derive( self, path: str, seed: Union[str,bytes] ) -> SLIP10Key:
        raise NotImplementedError()


def iso10126_pad( data: bytes, block: int = AES.block_size ) -> bytes:
    """ISO 10126 padding: random filler, w/ the pad length in the final byte (always 1-block bytes)."""
    n				= block - len( data ) % block
    return data + get_random_bytes( n - 1 ) + bytes( [n] )


def iso10126_unpad( data: bytes, block: int = AES.block_size ) -> bytes:
    if not data or len( data ) % block:
        raise ValueError( f"Padded data must be a non-zero multiple of {block} bytes, not {len( data )}" )
    n				= data[-1]
    if not 1 <= n <= block:
        raise ValueError( f"Invalid ISO 10126 pad length {n}" )
    return data[:-n]


class WalletCrypto( Primitives ):
    """The wallet's standard cryptographic primitives.

    The second password hash is the SHA-256 of the UTF-8 text, rehashed until 'iterations' rounds
    have been performed.  Second password encrypted data is the base64 encoding of:

        IV (16 bytes) + AES-256-CBC( ISO 10126 padded UTF-8 plaintext )

    keyed by PBKDF2-HMAC-SHA1 of the UTF-8 "<shared_key><password>", salted by the IV.

    BIP-39 Mnemonics use python-mnemonic, secp256k1 BIP-32 derivation uses python-hdwallet, and
    SLIP-10 ed25519 derivation uses bip_utils.

    """
    def __init__( self, language: str = MNEMONIC_LANGUAGE ):
        self.mnemonic		= Mnemonic( language )

    def hash_n_times( self, iterations, data ):
        if iterations < 1:
            raise ValueError( f"Hash iterations must be positive, not {iterations}" )
        for _ in range( iterations ):
            data		= hashlib.sha256( data ).digest()
        return data

    def sha256( self, data ):
        return hashlib.sha256( data ).digest()

    @staticmethod
    def stretch_password( password: str, salt: bytes, iterations: int, keylen: int = KEY_BIT_LEN ) -> bytes:
        # pycryptodome would encode a str password as latin-1; the wallet uses UTF-8
        return PBKDF2(
            password.encode( 'UTF-8' ), salt,
            dkLen		= keylen // 8,
            count		= iterations,
            hmac_hash_module	= SHA1,
        )

    def encrypt_sec_pass( self, shared_key, iterations, password, plaintext ):
        iv			= get_random_bytes( SALT_BYTES )
        key			= self.stretch_password( shared_key + password, iv, iterations )
        aes			= AES.new( key, AES.MODE_CBC, iv=iv )
        encrypted		= aes.encrypt( iso10126_pad( plaintext.encode( 'UTF-8' )))
        return base64.b64encode( iv + encrypted ).decode( 'ASCII' )

    def decrypt_sec_pass( self, shared_key, iterations, password, ciphertext ):
        try:
            data		= base64.b64decode( ciphertext, validate=True )
        except (binascii.Error, ValueError) as exc:
            raise PrimitiveFailure( f"Second password ciphertext is not valid base64: {exc}" ) from exc
        if len( data ) <= SALT_BYTES:
            raise PrimitiveFailure( f"Second password ciphertext is too short: {len( data )} bytes" )
        iv,payload		= data[:SALT_BYTES],data[SALT_BYTES:]
        key			= self.stretch_password( shared_key + password, iv, iterations )
        try:
            aes			= AES.new( key, AES.MODE_CBC, iv=iv )
            plaintext		= iso10126_unpad( aes.decrypt( payload ))
            return plaintext.decode( 'UTF-8' )
        except ValueError as exc:  # includes UnicodeDecodeError
            raise PrimitiveFailure( f"Failed to decrypt second password ciphertext: {exc}" ) from exc

    def entropy_to_mnemonic( self, entropy ):
        return self.mnemonic.to_mnemonic( into_bytes( entropy ))

    def mnemonic_to_seed( self, mnemonic ):
        return Mnemonic.to_seed( mnemonic, passphrase="" )

    @staticmethod
    def hdwallet_for( network: Any ) -> hdwallet.HDWallet:
        """A python-hdwallet HDWallet for the network; a symbol (eg. 'BTC', 'BTCTEST') or a
        hdwallet.cryptocurrencies Cryptocurrency class."""
        if isinstance( network, str ):
            return hdwallet.HDWallet( symbol=network )
        return hdwallet.HDWallet( cryptocurrency=network )

    def bip32_derive( self, seed, path, network ):
        wallet			= self.hdwallet_for( network )
        wallet.from_seed( seed.hex() )
        wallet.from_path( path )
        return wallet.xprivate_key()

    def ethhd_derive( self, seed, path ):
        wallet			= self.hdwallet_for( 'ETH' )
        wallet.from_seed( seed.hex() )
        wallet.from_path( path )
        return bytes.fromhex( wallet.private_key() )

    def slip10_ed25519_derive( self, path, seed ):
        node			= Bip32Slip10Ed25519.FromSeed( into_bytes( seed )).DerivePath( path )
        return SLIP10Key(
            key		= node.PrivateKey().Raw().ToBytes(),
            chain_code	= node.ChainCode().ToBytes(),
            public_key	= node.PublicKey().RawCompressed().ToBytes()[1:],  # drop the 0x00 prefix
        )
