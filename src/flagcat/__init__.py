"""flagcat - canonical command-line flag identities.

Declares each option once (long name plus optional short alias), groups the
options into catalogs by the subsystem that owns them, and lets argument
parsers resolve raw argv tokens against the effective flag set of a
subcommand.
"""

from flagcat.catalog import FlagCatalog as FlagCatalog
from flagcat.errors import DuplicateFlagSpelling as DuplicateFlagSpelling
from flagcat.errors import FlagError as FlagError
from flagcat.errors import InvalidFlagDefinition as InvalidFlagDefinition
from flagcat.errors import UnknownFlagKey as UnknownFlagKey
from flagcat.flag import Flag as Flag
from flagcat.registry import FlagRegistry as FlagRegistry
from flagcat.registry import default_registry as default_registry

__version__ = "0.1.0"
