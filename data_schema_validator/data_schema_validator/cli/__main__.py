"""Module entrypoint for `python -m data_schema_validator.cli`.

Delegates to the validation CLI implementation.
"""

from .run_validate import main


if __name__ == "__main__":
    main()
