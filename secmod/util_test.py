import io
import logging
import pytest

from .util		import log_level, commas, into_bytes, input_secure

log				= logging.getLogger( 'util_test' )


def test_log_level():
    assert log_level( 0 ) == logging.WARNING
    assert log_level( 1 ) == logging.INFO
    assert log_level( 5 ) == logging.DEBUG
    assert log_level( -1 ) == logging.ERROR
    assert log_level( -9 ) == logging.FATAL


def test_commas():
    assert commas( [] ) == ''
    assert commas( [ 'bip32' ] ) == 'bip32'
    assert commas( [ 'bip32' ], final='or' ) == 'bip32'
    assert commas( ( 'bip32', 'ethereum' ), final='or' ) == 'bip32 or ethereum'
    assert commas( ( 'bip32', 'ethereum', 'ed25519' )) == 'bip32, ethereum, ed25519'
    assert commas( ( 'bip32', 'ethereum', 'ed25519' ), final='and' ) == 'bip32, ethereum and ed25519'
    assert commas( range( 3 ), final='or' ) == '0, 1 or 2'


def test_into_bytes():
    assert into_bytes( b'\x01\x02' ) == b'\x01\x02'
    assert into_bytes( "0102" ) == b'\x01\x02'
    assert into_bytes( "0xFF00" ) == b'\xff\x00'
    assert into_bytes( "" ) == b''
    with pytest.raises( ValueError ):
        into_bytes( "0g" )
    with pytest.raises( ValueError ):
        into_bytes( "012" )


def test_input_secure():
    source			= io.StringIO( "second password\nnext line\n" )
    assert input_secure( "Second password: ", file=source ) == "second password\n"
    assert input_secure( "Second password: ", secret=False, file=source ) == "next line\n"


def test_into_bytes_whitespace():
    # Hex is decoded by bytes.fromhex, which tolerates whitespace between byte pairs
    assert into_bytes( "01 02 0a" ) == b'\x01\x02\x0a'
    assert into_bytes( "0x01 ff" ) == b'\x01\xff'
