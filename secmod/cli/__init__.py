
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

from __future__          import annotations

import base64
import click
import json
import logging

from bip_utils		import Bip32KeyError, Bip32PathError

from ..			import SecurityModule, Credentials
from ..util		import commas, log_cfg, log_level, input_secure
from ..defaults		import (
    ITERATIONS_DEFAULT, NETWORK_DEFAULT, BIP32_PATH_DEFAULT, SLIP10_PATH_DEFAULT, SCHEMES,
)

__author__                      = "Perry Kundert"
__email__                       = "perry@dominionrnd.com"
__copyright__                   = "Copyright (c) 2022 Dominion Research & Development Corp."
__license__                     = "Dual License: GPLv3 (or later) and Commercial (see LICENSE)"

"""
Provide basic CLI access to the secmod API.  The CLI is just another caller: it assembles the
Credentials from its options, and passes them to the SecurityModule.

Output generally defaults to JSON.  Use -v for more details, and --no-json to emit standard text output instead.

Supply '-' for any password, seed or ciphertext to read it from stdin (without echo, on a TTY).
"""

log				= logging.getLogger( __package__ )


def secret( value, prompt ):
    """Read the secret value from input if '-', warning if it was supplied on the command line."""
    if value == '-':
        return input_secure( prompt, secret=True )
    if value:
        log.warning( f"It is recommended to not supply secrets on the command line; specify '-' to read {prompt.rstrip( ': ' )} from input" )
    return value


def output( result, **details ):
    """Emit the result as JSON (w/ any details, if verbose), or as text."""
    if cli.json:
        if cli.verbosity > 0 and details:
            click.echo( json.dumps( dict( details, result=result ), indent=4 ))
        else:
            click.echo( json.dumps( result ))
    else:
        if cli.verbosity > 0:
            for k,v in details.items():
                click.echo( f"{k:12} {v}" )
        click.echo( f"{result}" )


@click.group()
@click.option('-v', '--verbose', count=True)
@click.option('-q', '--quiet', count=True)
@click.option( '--json/--no-json', default=True, help="Output JSON (the default)")
def cli( verbose, quiet, json ):
    cli.verbosity		= verbose - quiet
    log_cfg['level']		= log_level( cli.verbosity )
    logging.basicConfig( **log_cfg )
    if verbose or quiet:
        logging.getLogger().setLevel( log_cfg['level'] )
    cli.json			= json
cli.verbosity			= 0  # noqa: E305
cli.json			= False


def wallet_options( command ):
    """The wallet's second password parameters, common to most commands."""
    for option in reversed((
        click.option( "--iterations", type=int, default=ITERATIONS_DEFAULT, show_default=True,
                      help="The wallet's PBKDF2 iterations" ),
        click.option( "--shared-key", help="The wallet's shared key" ),
        click.option( "--stored-hash", help="The wallet's stored second password hash (hex)" ),
        click.option( "--second-password", help="The second password; '-' reads it from stdin" ),
    )):
        command			= option( command )
    return command


@click.command( name="hash" )
@wallet_options
def hash_command( iterations, shared_key, stored_hash, second_password ):
    """Compute the hash of a (new) second password."""
    if not second_password:
        raise click.ClickException( "Supply the new --second-password ('-' reads it from stdin)" )
    try:
        credentials		= Credentials( iterations=iterations, shared_key=shared_key )
        result			= SecurityModule().compute_second_password_hash(
            credentials, secret( second_password, "Second password: " ))
    except ValueError as exc:
        raise click.ClickException( str( exc ))
    output( result, iterations=iterations )


@click.command()
@wallet_options
@click.pass_context
def verify( ctx, iterations, shared_key, stored_hash, second_password ):
    """Verify a second password against the stored hash; exits non-zero if it doesn't match."""
    try:
        credentials		= Credentials( iterations=iterations, shared_key=shared_key, stored_hash=stored_hash )
        verified		= SecurityModule().verify_second_password(
            credentials, secret( second_password, "Second password: " ) or '' )
    except ValueError as exc:
        raise click.ClickException( str( exc ))
    output( verified, iterations=iterations )
    if not verified:
        ctx.exit( 1 )


@click.command()
@click.option( "--guid", required=True, help="The wallet identifier" )
@click.option( "--shared-key", required=True, help="The wallet's shared key" )
@click.option( "--password", required=True, help="The wallet's main password; '-' reads it from stdin" )
def entropy( guid, shared_key, password ):
    """Derive the (base64) entropy of the wallet's login credentials."""
    try:
        credentials		= Credentials(
            guid		= guid,
            shared_key		= shared_key,
            password		= secret( password, "Password: " ),
        )
        result			= SecurityModule().credentials_entropy( credentials )
    except ValueError as exc:
        raise click.ClickException( str( exc ))
    output( base64.b64encode( result ).decode( 'ASCII' ), guid=guid )


@click.command()
@wallet_options
@click.argument( "plaintext" )
def encrypt( iterations, shared_key, stored_hash, second_password, plaintext ):
    """Encrypt PLAINTEXT ('-' reads it from stdin) w/ the second password."""
    try:
        credentials		= Credentials(
            iterations		= iterations,
            shared_key		= shared_key,
            second_password	= secret( second_password, "Second password: " ),
        )
        result			= SecurityModule().encrypt_with_second_password(
            credentials, secret( plaintext, "Plaintext: " ))
    except ValueError as exc:
        raise click.ClickException( str( exc ))
    output( result, iterations=iterations )


@click.command()
@wallet_options
@click.argument( "ciphertext" )
def decrypt( iterations, shared_key, stored_hash, second_password, ciphertext ):
    """Decrypt the base64 CIPHERTEXT ('-' reads it from stdin) w/ the verified second password."""
    try:
        credentials		= Credentials(
            iterations		= iterations,
            shared_key		= shared_key,
            stored_hash		= stored_hash,
            second_password	= secret( second_password, "Second password: " ),
        )
        result			= SecurityModule().decrypt_with_second_password(
            credentials, secret( ciphertext, "Ciphertext: " ))
    except ValueError as exc:  # Includes InvalidSecondPassword, PrimitiveFailure
        raise click.ClickException( str( exc ))
    output( result, iterations=iterations )


@click.command()
@wallet_options
@click.option( "--scheme", type=click.Choice( SCHEMES ), default=SCHEMES[0], show_default=True,
               help=f"The key derivation scheme: {commas( SCHEMES, final='or' )}" )
@click.option( "--seed", required=True, help="The wallet's seed hex (or ciphertext, if a second password is used); '-' reads it from stdin" )
@click.option( "--path", help=f"The HD wallet derivation path (default: {BIP32_PATH_DEFAULT} for bip32, {SLIP10_PATH_DEFAULT} for ed25519)" )
@click.option( "--network", default=NETWORK_DEFAULT, show_default=True, help="The BIP-32 network symbol, eg. BTCTEST" )
def derive( iterations, shared_key, stored_hash, second_password, scheme, seed, path, network ):
    """Derive a key from the wallet's seed w/ the bip32, (legacy) ethereum or (SLIP-10) ed25519 scheme."""
    try:
        credentials		= Credentials(
            iterations		= iterations,
            shared_key		= shared_key,
            stored_hash		= stored_hash,
            second_password	= secret( second_password, "Second password: " ),
            seed_hex		= secret( seed, "Seed: " ),
            network		= network,
        )
        module			= SecurityModule()
        if scheme == 'bip32':
            path		= path or BIP32_PATH_DEFAULT
            result		= module.derive_bip32_key( credentials, path )
        elif scheme == 'ethereum':
            if path:
                log.warning( f"The legacy Ethereum derivation path is fixed; ignoring {path}" )
            path		= None
            result		= module.derive_legacy_ethereum_key( credentials ).hex()
        else:
            path		= path or SLIP10_PATH_DEFAULT
            key			= module.derive_slip10_ed25519_key( credentials, path )
            result		= dict(
                key		= key.key.hex(),
                chain_code	= key.chain_code.hex(),
                public_key	= key.public_key.hex(),
            )
    except ( ValueError, Bip32KeyError, Bip32PathError ) as exc:  # Includes InvalidSecondPassword, PrimitiveFailure
        raise click.ClickException( str( exc ))
    output( result, scheme=scheme, path=path, network=network )


cli.add_command( hash_command )
cli.add_command( verify )
cli.add_command( entropy )
cli.add_command( encrypt )
cli.add_command( decrypt )
cli.add_command( derive )
