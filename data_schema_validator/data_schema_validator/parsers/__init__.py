from .document_parser import DocumentParser, document_parser
from .schema_loader import (
    load_schema_directory,
    load_schema_file,
    schema_id_from_path,
)
