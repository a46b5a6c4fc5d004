import base64
import hashlib
import pytest

from .crypto		import WalletCrypto, iso10126_pad, iso10126_unpad
from .types		import PrimitiveFailure

SHARED_KEY			= "a59a510d-433a-4b11-8f7f-6bacfa1f0f2d"


@pytest.fixture( scope="module" )
def crypto():
    return WalletCrypto()


def test_iso10126():
    for length in range( 0, 40 ):
        data			= bytes( range( length ))
        padded			= iso10126_pad( data )
        assert len( padded ) % 16 == 0
        assert 1 <= len( padded ) - length <= 16
        assert padded[-1] == len( padded ) - length
        assert iso10126_unpad( padded ) == data

    with pytest.raises( ValueError ):
        iso10126_unpad( b'' )
    with pytest.raises( ValueError ):
        iso10126_unpad( b'\0' * 15 )
    with pytest.raises( ValueError ):
        iso10126_unpad( b'\0' * 16 )
    with pytest.raises( ValueError ):
        iso10126_unpad( b'\0' * 15 + b'\x11' )


def test_hash_n_times( crypto ):
    assert crypto.hash_n_times( 1, b'abc' ) == hashlib.sha256( b'abc' ).digest()
    assert crypto.hash_n_times( 2, b'abc' ) == hashlib.sha256( hashlib.sha256( b'abc' ).digest() ).digest()
    with pytest.raises( ValueError ):
        crypto.hash_n_times( 0, b'abc' )


def test_sec_pass_cipher( crypto ):
    # Non-ASCII passwords and plaintext are UTF-8 encoded
    for password,plaintext in (
        ("second password", "3b5fbf176a2462a02d4aa2b79b56482d"),
        ("pässwörd ✓", "Ünïcödé"),
        ("x", ""),
    ):
        ciphertext		= crypto.encrypt_sec_pass( SHARED_KEY, 10, password, plaintext )
        assert crypto.decrypt_sec_pass( SHARED_KEY, 10, password, ciphertext ) == plaintext


def test_sec_pass_cipher_failures( crypto ):
    ciphertext			= crypto.encrypt_sec_pass( SHARED_KEY, 10, "password", "3b5fbf176a2462a02d4aa2b79b56482d" )
    data			= base64.b64decode( ciphertext )

    with pytest.raises( PrimitiveFailure ) as exc:
        crypto.decrypt_sec_pass( SHARED_KEY, 10, "password", "%%%" )
    assert exc.value.__cause__ is not None

    # IV only; no payload
    with pytest.raises( PrimitiveFailure ):
        crypto.decrypt_sec_pass( SHARED_KEY, 10, "password", base64.b64encode( data[:16] ).decode() )

    # Truncated payload is not a multiple of the AES block size
    with pytest.raises( PrimitiveFailure ):
        crypto.decrypt_sec_pass( SHARED_KEY, 10, "password", base64.b64encode( data[:-1] ).decode() )


def test_entropy_mnemonic( crypto ):
    assert crypto.entropy_to_mnemonic( "00000000000000000000000000000000" ) \
        == "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
    assert crypto.entropy_to_mnemonic( b'\xff' * 16 ) \
        == "zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo zoo wrong"
    # BIP-39 test vector (w/ no passphrase)
    assert crypto.mnemonic_to_seed(
        "abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon abandon about"
    ).hex() == (
        "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
        "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
    )
    with pytest.raises( ValueError ):
        crypto.entropy_to_mnemonic( "0000" )


def test_bip32_derive( crypto ):
    """BIP-32 test vector 1 (secp256k1), from https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki"""
    seed			= bytes.fromhex( "000102030405060708090a0b0c0d0e0f" )
    assert crypto.bip32_derive( seed, "m/0'", 'BTC' ) \
        == "xprv9uHRZZhk6KAJC1avXpDAp4MDc3sQKNxDiPvvkX8Br5ngLNv1TxvUxt4cV1rGL5hj6KCesnDYUhd7oWgT11eZG7XnxHrnYeSvkzY7d2bhkJ7"
    assert crypto.bip32_derive( seed, "m/0'/1", 'BTC' ) \
        == "xprv9wTYmMFdV23N2TdNG573QoEsfRrWKQgWeibmLntzniatZvR9BmLnvSxqu53Kw1UmYPxLgboyZQaXwTCg8MSY3H2EU4pWcQDnRnrVA1xe8fs"
    with pytest.raises( Exception ):
        crypto.bip32_derive( seed, "0/1", 'BTC' )


def test_slip10_ed25519_derive( crypto ):
    """SLIP-10 ed25519 test vector 1, from https://github.com/satoshilabs/slips/blob/master/slip-0010.md"""
    seed			= "000102030405060708090a0b0c0d0e0f"
    key				= crypto.slip10_ed25519_derive( "m/0'", seed )
    assert key.key.hex() == "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3"
    assert key.chain_code.hex() == "8b59aa11380b624e81507a27fedda59fea6d0b779a778918a2fd3590e16e9c69"
    assert key.public_key.hex() == "8c8a13df77a28f3445213a0f432fde644acaa215fc72dcdf300d5efaa85d350c"
    assert crypto.slip10_ed25519_derive( "m/0'", bytes.fromhex( seed )) == key
