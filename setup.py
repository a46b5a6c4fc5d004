import os

from setuptools import setup

# 
# All platforms
# 
HERE				= os.path.dirname( os.path.abspath( __file__ ))

install_requires		= open( os.path.join( HERE, "requirements.txt" )).readlines()
tests_require			= open( os.path.join( HERE, "requirements-tests.txt" )).readlines()

# Since setuptools is retiring tests_require, add it as an extra option
extras_require			= {
    'tests':			tests_require,
}

# Must work if setup.py is run in the source distribution context, or from
# within the packaged distribution directory.
__version__			= None
try:
    exec( open( 'secmod/version.py', 'r' ).read() )
except FileNotFoundError:
    exec( open( 'version.py', 'r' ).read() )

console_scripts			= [
    'secmod-cli		= secmod.cli:cli',
]

entry_points			= {
    'console_scripts': 		console_scripts,
}

package_dir			= {
    "secmod":			"./secmod",
    "secmod.cli":		"./secmod/cli",
}

long_description_content_type	= 'text/markdown'
long_description		= """\
A wallet's sensitive operations, performed in one place, much like a
Hardware Security Module.

Given the wallet's (optionally second password encrypted) seed, the
second password and its stored hash, and the account credentials,
secmod:

- Verifies the second password against the stored hash (iterated SHA-256).
- Decrypts the seed (AES-256-CBC, PBKDF2-HMAC-SHA1 key), only once the
  second password is verified.
- Derives BIP-32 secp256k1 extended keys from the seed's BIP-39 seed.
- Derives the legacy Ethereum account key, preserving the original
  derivation from the seed hex text (so existing accounts remain valid).
- Derives SLIP-10 ed25519 keys (eg. Stellar m/44'/148'/0').
- Derives login credential entropy.

Keys are never derived, and seeds never decrypted, with an unverified
second password.

    $ secmod-cli verify --shared-key <key> --stored-hash <hex> --second-password -
    $ secmod-cli derive --scheme ed25519 --seed - --path "m/44'/148'/0'"
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Environment :: Console",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
]

setup(
    name			= "secmod",
    version			= __version__,
    install_requires		= install_requires,
    tests_require		= tests_require,
    extras_require		= extras_require,
    packages			= package_dir.keys(),
    package_dir			= package_dir,
    include_package_data	= True,
    zip_safe			= True,
    entry_points		= entry_points,
    author			= "Perry Kundert",
    author_email		= "perry@dominionrnd.com",
    description			= "Wallet security module: second password verification, seed decryption and HD key derivation",
    long_description		= long_description,
    long_description_content_type = long_description_content_type,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "Bitcoin Ethereum Stellar cryptocurrency wallet BIP-32 BIP-39 SLIP-10 ed25519 second password",
    classifiers			= classifiers,
    python_requires		= ">=3.9",
)
