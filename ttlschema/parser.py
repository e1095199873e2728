import logging
import re
from typing import Dict, List, Optional, Sequence, Union

from rdflib.namespace import OWL, RDF, RDFS, SDO

from .errors import InvalidInputError
from .model import Class, Instance, OntologyHeader, ParsedDocument, Prefix, Property, Triple
from .tokenizer import find_prefixes, split_blocks, strip_comments, tokenize

logger = logging.getLogger(__name__)

RDF_TYPE = str(RDF.type)
RDFS_LABEL = str(RDFS.label)
RDFS_COMMENT = str(RDFS.comment)
RDFS_SUBCLASS_OF = str(RDFS.subClassOf)
RDFS_DOMAIN = str(RDFS.domain)
RDFS_RANGE = str(RDFS.range)
OWL_IMPORTS = str(OWL.imports)
SCHEMA_NAME = str(SDO.name)

ONTOLOGY_TYPE = str(OWL.Ontology)
CLASS_TYPE = str(RDFS.Class)
PROPERTY_TYPE = str(RDF.Property)

_LITERAL_PATTERN = re.compile(r'^"(.*)"(@[\w-]+)?$', re.DOTALL)


def clean_literal(value: str) -> str:
    """Return the text inside a quoted literal, dropping any language tag.

    Datatyped literals and non-literals come back unchanged, so callers can
    compare the result with the input to tell literals from terms.
    """
    if not value:
        return ""
    m = _LITERAL_PATTERN.match(value)
    if m:
        return m.group(1)
    return value


def local_name(term: str) -> str:
    return term.split(":")[-1] or term


def extract_triples(tokens: Sequence[str]) -> List[Triple]:
    """Read ``subject predicate object (, object)* (; predicate ...)*``.

    Bracketed blank nodes are captured as a single opaque object, the
    keyword ``a`` is rewritten to ``rdf:type``. Fewer than three tokens
    yield nothing.
    """
    triples = []
    if len(tokens) < 3:
        return triples

    subject = tokens[0]
    n = len(tokens)
    i = 1
    while i < n:
        predicate = tokens[i]
        i += 1
        if predicate in (";", ","):
            continue

        while i < n:
            obj = tokens[i]
            if obj == ";":
                i += 1
                break
            if obj == ",":
                i += 1
                continue

            if obj == "[":
                depth = 1
                parts = ["["]
                i += 1
                while i < n and depth > 0:
                    if tokens[i] == "[":
                        depth += 1
                    elif tokens[i] == "]":
                        depth -= 1
                    parts.append(tokens[i])
                    i += 1
                obj = " ".join(parts)
            else:
                i += 1

            triples.append(Triple(subject, predicate, obj))
            if i < n and tokens[i] in (";", ","):
                sep = tokens[i]
                i += 1
                if sep == ";":
                    break

    return [
        Triple(t.subject, "rdf:type", t.object) if t.predicate == "a" else t
        for t in triples
    ]


class PrefixTable:
    """Expands prefixed names and shortens absolute URIs for one document."""

    def __init__(self, prefixes: Sequence[Prefix]):
        self.prefixes = list(prefixes)

    def resolve(self, term: str) -> str:
        term = term.strip()
        if term.startswith("<") and term.endswith(">"):
            return term[1:-1]
        if ":" in term:
            prefix, local = term.split(":", 1)
            for p in self.prefixes:
                if p.prefix == prefix:
                    return p.uri + local
        return term

    def shorten(self, uri: str) -> str:
        for p in self.prefixes:
            if uri.startswith(p.uri):
                return f"{p.prefix}:{uri[len(p.uri):]}"
        return uri


class TurtleParser:
    def __init__(self, content: Union[str, bytes]):
        self.content = self._as_text(content)
        self.table = PrefixTable(find_prefixes(self.content))

        self.ontology: Optional[OntologyHeader] = None
        self.classes: List[Class] = []
        self.properties: List[Property] = []
        self.instances: List[Instance] = []
        self._recorded = set()

        for block in split_blocks(strip_comments(self.content)):
            self._process_block(block)

        logger.debug(
            "Parsed %d prefixes, %d classes, %d properties, %d instances",
            len(self.table.prefixes), len(self.classes), len(self.properties), len(self.instances),
        )

    @staticmethod
    def _as_text(content) -> str:
        if isinstance(content, str):
            return content
        if isinstance(content, (bytes, bytearray)):
            try:
                return bytes(content).decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise InvalidInputError(f"Document is not valid UTF-8: {e}") from e
        raise InvalidInputError(f"Expected Turtle text, got {type(content).__name__}")

    def _resolve(self, term: str) -> str:
        return self.table.resolve(term)

    def _shorten(self, uri: str) -> str:
        return self.table.shorten(uri)

    def _first(self, pred_map: Dict[str, List[str]], predicate: str) -> Optional[str]:
        values = pred_map.get(predicate)
        return values[0] if values else None

    def _first_literal(self, pred_map, predicate) -> str:
        return clean_literal(self._first(pred_map, predicate) or "")

    def _first_term(self, pred_map, predicate) -> str:
        value = self._first(pred_map, predicate)
        return self._shorten(self._resolve(value)) if value is not None else ""

    def _process_block(self, block: str):
        triples = extract_triples(tokenize(block))
        if not triples:
            logger.debug("Skipping block without triples: %.40r", block)
            return

        resolved_subject = self._resolve(triples[0].subject)
        short_subject = self._shorten(resolved_subject)

        pred_map: Dict[str, List[str]] = {}
        for t in triples:
            pred_map.setdefault(self._resolve(t.predicate), []).append(t.object)

        types = [self._resolve(v) for v in pred_map.get(RDF_TYPE, [])]
        rdf_type = types[0] if types else ""
        label = self._first_literal(pred_map, RDFS_LABEL)
        comment = self._first_literal(pred_map, RDFS_COMMENT)

        if rdf_type == ONTOLOGY_TYPE:
            if self.ontology is not None:
                logger.debug("Ontology header %s replaces %s", resolved_subject, self.ontology.uri)
            self.ontology = OntologyHeader(
                uri=resolved_subject,
                label=label,
                comment=comment,
                imports=tuple(self._shorten(self._resolve(v)) for v in pred_map.get(OWL_IMPORTS, [])),
            )
            return

        if not rdf_type and not pred_map:
            return

        if short_subject in self._recorded:
            logger.debug("Subject %s already classified, dropping later block", short_subject)
            return
        self._recorded.add(short_subject)

        if rdf_type == CLASS_TYPE:
            self.classes.append(Class(
                uri=short_subject,
                label=label or local_name(short_subject),
                comment=comment,
                sub_class_of=self._first_term(pred_map, RDFS_SUBCLASS_OF),
            ))
        elif rdf_type == PROPERTY_TYPE:
            self.properties.append(Property(
                uri=short_subject,
                label=label or local_name(short_subject),
                comment=comment,
                domain=self._first_term(pred_map, RDFS_DOMAIN),
                range=self._first_term(pred_map, RDFS_RANGE),
            ))
        else:
            self.instances.append(self._create_instance(short_subject, rdf_type, pred_map))

    def _create_instance(self, short_subject: str, rdf_type: str, pred_map) -> Instance:
        properties = {}
        for pred, values in pred_map.items():
            if pred == RDF_TYPE:
                continue
            cleaned_values = []
            for v in values:
                cleaned = clean_literal(v)
                cleaned_values.append(cleaned if cleaned != v else self._shorten(self._resolve(v)))
            # two predicates may shorten to the same key
            properties.setdefault(self._shorten(pred), []).extend(cleaned_values)

        return Instance(
            uri=short_subject,
            type=self._shorten(rdf_type),
            name=self._first_literal(pred_map, SCHEMA_NAME) or local_name(short_subject),
            properties=properties,
        )

    def get_metadata(self) -> Optional[OntologyHeader]:
        return self.ontology

    def get_namespaces(self) -> List[Prefix]:
        return list(self.table.prefixes)

    def get_classes(self) -> List[Class]:
        return list(self.classes)

    def get_properties(self) -> List[Property]:
        return list(self.properties)

    def get_instances(self) -> List[Instance]:
        return list(self.instances)

    @property
    def document(self) -> ParsedDocument:
        return ParsedDocument(
            prefixes=tuple(self.table.prefixes),
            ontology=self.ontology,
            classes=tuple(self.classes),
            properties=tuple(self.properties),
            instances=tuple(self.instances),
            raw=self.content,
        )


def parse_ttl(content: Union[str, bytes]) -> ParsedDocument:
    """Parse a Turtle document into its ontology header, classes, properties and instances.

    Malformed content yields a partial or empty document. Only input that is
    not text raises :class:`~ttlschema.errors.InvalidInputError`.
    """
    return TurtleParser(content).document
