from setuptools import setup

import os

HERE				= os.path.dirname( os.path.abspath( __file__ ))

__version__			= None
__version_info__		= None
exec( open( os.path.join( HERE, 'unix_ts', 'version.py' ), 'r' ).read() )

def requirements( name ):
    # Remove whitespace, elide blank lines and comments
    return list(
        ''.join( r.split() )
        for r in open( os.path.join( HERE, name )).readlines()
        if r.strip() and not r.strip().startswith( '#' )
    )

install_requires		= requirements( "requirements.txt" )
tests_require			= requirements( "requirements-tests.txt" )

# Since setuptools is retiring tests_require, add it as an option
extras_require			= {
    'tests':			tests_require,
}

package_dir			= {
    "unix_ts":			"./unix_ts",
}

long_description		= """\
Unix-ts represents UNIX timestamps as exact (seconds, nanos) values: whole
seconds since the epoch (possibly negative), plus a sub-second offset in
nanoseconds that is always non-negative.

Timestamps support exact arithmetic with whole seconds, other timestamps and
non-negative spans, extraction at any decimal precision (seconds through
nanoseconds), parsing of decimal numerals such as '-0.5', and conversion
to/from datetimes in any timezone.
"""

classifiers			= [
    "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
    "License :: Other/Proprietary License",
    "Programming Language :: Python :: 3",
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
]

setup(
    name			= "unix-ts",
    version			= __version__,
    install_requires		= install_requires,
    extras_require		= extras_require,
    packages			= list( package_dir.keys() ),
    package_dir			= package_dir,
    python_requires		= ">=3.8",
    zip_safe			= False,
    author			= "Perry Kundert",
    author_email		= "perry@hardconsulting.com",
    description			= "Unix timestamp manipulation and conversion",
    long_description		= long_description,
    license			= "Dual License; GPLv3 and Proprietary",
    keywords			= "unix timestamp time nanoseconds",
    classifiers			= classifiers,
)
