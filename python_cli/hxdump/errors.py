# Copyright (c) 2024, NCC Group plc
# Released as open source under GPLv3

# raised when hxdump APIs or utilities are invoked incorrectly
class UsageError(Exception):
    pass

# raised when a dumper configuration file can't be loaded
class ConfigError(UsageError):
    pass

# raised when an input file can't be opened, positioned or read
class SourceError(Exception):
    pass
