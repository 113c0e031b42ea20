"""
Test utilities package for phrasepack tests.

### test_helpers.py
- `write_phrase_source()`: Write a YAML or JSON phrase source file
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `make_lookup()`: Build a LookupConfig for a directory
- `read_bundle()`: Split a written bundle into its locale and compiled data
"""

from .test_helpers import (
    create_temp_config_file,
    make_lookup,
    read_bundle,
    write_phrase_source,
)

__all__ = [
    "create_temp_config_file",
    "make_lookup",
    "read_bundle",
    "write_phrase_source",
]
