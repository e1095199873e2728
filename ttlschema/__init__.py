from .errors import InvalidInputError, RegistryError, TtlSchemaError
from .model import Class, Instance, OntologyHeader, ParsedDocument, Prefix, Property, SchemaEntry, Triple
from .parser import PrefixTable, TurtleParser, clean_literal, extract_triples, parse_ttl
from .registry import load_builtin_schemas, parse_uploaded_schema
from .tokenizer import find_prefixes, iter_tokens, split_blocks, strip_comments, tokenize
