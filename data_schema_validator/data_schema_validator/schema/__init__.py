"""Shape checks for schema definition files.

This package only describes what a schema definition looks like; it does not
depend on the validator so that file checks stay independent of validation.
"""

from .meta_schema import (
    check_schema_definition,
    get_meta_schema_path,
    load_meta_schema,
)
